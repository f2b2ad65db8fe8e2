"""
Test suite for persian-chrono

Contains:
- tests/unit/          : Unit tests for individual modules
"""
