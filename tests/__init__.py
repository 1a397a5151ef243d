"""
Test suite for grid-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
