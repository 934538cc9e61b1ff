"""
Test suite for currency_units

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/fixtures/  : Recorded rate-provider payloads (fixer.io, currencylayer)
"""
