"""
Test suite for Radix Converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
