"""
Core amount conversions, domain models, and JSON validation.

This module contains the building blocks that are independent
of the UI layer and of the wallet service transport.
"""
