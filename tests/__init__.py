"""
Test suite for bigfixed

Contains:
- tests/unit/          : Unit tests for individual modules
"""
