"""
Test suite for arithmetic primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
