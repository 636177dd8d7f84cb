"""
Test suite for exact fractions

Contains:
- tests/unit/          : Unit tests for individual modules
"""
