"""
Test suite for decfloat

Contains:
- tests/unit/          : Unit tests for scaling, codecs, arithmetic, bridges and the boundary API
"""
