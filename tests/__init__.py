"""
Test suite for wallet-amounts

Contains:
- tests/unit/          : Unit tests for individual modules
"""
