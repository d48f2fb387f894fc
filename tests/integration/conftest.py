"""Shared fixtures for integration tests.

Integration tests call the real SEC EDGAR API and, when a key is configured,
the real LLM provider.
"""

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio for async tests."""
    return "asyncio"
