"""
Test suite for signed-numeric

Contains:
- tests/unit/          : Unit tests for the kind table and the signed facade
"""
