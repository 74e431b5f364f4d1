"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit tests for the arithmetic primitives and BigInteger
"""
