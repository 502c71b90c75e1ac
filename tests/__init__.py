"""
Test suite for fibcalc

Contains:
- tests/unit/          : Unit tests for engines, models, contracts, harness
"""
