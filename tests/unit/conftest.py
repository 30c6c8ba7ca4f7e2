"""
Pytest configuration for pure unit tests.

These tests exercise parsing and normalization only and need no database.
"""

import pytest


# Override the autouse database fixture from the parent conftest
# to prevent database setup for these unit tests
@pytest.fixture(autouse=True)
async def setup_database():
    """No-op database setup for unit tests."""
    yield
