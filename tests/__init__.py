"""
Test suite for Nameshake

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end app scenarios
"""
