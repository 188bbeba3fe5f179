"""
Test suite for the numeric kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
