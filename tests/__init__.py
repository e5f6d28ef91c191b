"""
Test suite for prefix_parse

Contains:
- tests/unit/          : Unit tests for individual modules
"""
