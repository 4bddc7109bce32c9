"""
Test suite for Numerus

Contains:
- tests/unit/          : Unit tests for individual modules
"""
