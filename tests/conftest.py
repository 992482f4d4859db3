"""Root conftest: shared fixtures for all tests.

Provides:
- Autouse guard that replaces the shared GitHub HTTP client with a mock,
  so no test ever reaches api.github.com
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_github_http():
    """SAFETY: Always mock the GitHub HTTP client.

    Yields the AsyncMock standing in for httpx.AsyncClient; tests set
    `mock_github_http.get.return_value` or `.side_effect`.
    """
    client = AsyncMock()
    with patch(
        "contributor_hub.services.github.client.get_github_client",
        return_value=client,
    ):
        yield client


@pytest.fixture
def anyio_backend():
    """The code under test is built on asyncio (asyncio.gather), so run anyio tests there."""
    return "asyncio"
