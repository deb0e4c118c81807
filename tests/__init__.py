"""Test suite for chromatone.

Tests are grouped by package under tests/core/<area>/ and share the
scheme fixtures defined in conftest.py.
"""
