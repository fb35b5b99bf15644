"""
Test suite for spacing

Contains:
- tests/unit/          : Unit tests for individual modules
"""
