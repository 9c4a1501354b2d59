"""
Test suite for GeoMath primitives

Contains:
- tests/unit/          : Unit tests for primitives, float format config, contracts
"""
