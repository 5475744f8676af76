"""
Test suite for Factorial Hash

Contains:
- tests/unit/          : Unit tests for individual modules
"""
