"""
Pytest configuration and common fixtures for Telegrapher tests.

This module provides shared fixtures for testing the Telegraph service and
the publishing flow. All fixtures follow camelCase naming convention.
"""

from typing import Generator
from unittest.mock import AsyncMock, Mock, patch

import pytest

from tests.utils import createAsyncMock

# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def resetTelegraphService() -> Generator[None, None, None]:
    """
    Reset TelegraphService singleton around the test.

    Example:
        def testService(resetTelegraphService):
            service = TelegraphService.getInstance()  # Fresh instance
    """
    from internal.services.telegraph.service import TelegraphService

    TelegraphService._instance = None
    yield
    TelegraphService._instance = None


@pytest.fixture
def mockConfigManager(tmp_path):
    """
    Create a mock ConfigManager.

    Account file points into temporary directory, so tests never touch
    real account.

    Returns:
        Mock: Mocked ConfigManager instance

    Example:
        def testConfig(mockConfigManager):
            mockConfigManager.getTelegraphConfig.return_value["threshold"] = 10
    """
    from internal.config.manager import ConfigManager

    mock = Mock(spec=ConfigManager)
    mock.config = {}
    mock.getTelegraphConfig.return_value = {
        "short-name": "Telegrapher",
        "author-name": "Test Author",
        "account-file": str(tmp_path / "telegraph-account.json"),
    }
    mock.getConverterConfig.return_value = {"validate": True}
    mock.getLoggingConfig.return_value = {}

    return mock


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def mockHttpPost() -> Generator[AsyncMock, None, None]:
    """
    Patch httpx.AsyncClient and provide its post() mock.

    Example:
        async def testPublish(mockHttpPost):
            mockHttpPost.return_value = createApiResponse({...})
    """
    with patch("httpx.AsyncClient") as mockClient:
        yield mockClient.return_value.__aenter__.return_value.post


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sampleAccount() -> dict:
    """Sample Telegraph account as returned by createAccount."""
    return {
        "short_name": "Telegrapher",
        "author_name": "Test Author",
        "access_token": "test_token",
        "auth_url": "https://edit.telegra.ph/auth/test",
    }


@pytest.fixture
def samplePage() -> dict:
    """Sample Telegraph page as returned by createPage."""
    return {
        "path": "Weekly-Report-10-19",
        "url": "https://telegra.ph/Weekly-Report-10-19",
        "title": "Weekly Report",
        "description": "",
        "views": 0,
    }


@pytest.fixture
def sampleMarkdown() -> str:
    """Sample markdown document touching every block rule."""
    return (
        "# Weekly report\n"
        "\n"
        "Work done by **team**, see [board](https://example.com/board).\n"
        "\n"
        "### Done\n"
        "- Parser\n"
        "- Client\n"
        "1. Review\n"
        "\n"
        "> All green\n"
        "\n"
        "| Task | State |\n"
        "|------|-------|\n"
        "| CI | ok |\n"
        "\n"
        "***\n"
        "```\n"
        "make test\n"
        "```\n"
    )


# ============================================================================
# Async Test Utilities
# ============================================================================


@pytest.fixture
def asyncMockFactory():
    """
    Factory fixture for creating async mocks.

    Returns:
        callable: Function to create async mocks

    Example:
        def testAsync(asyncMockFactory):
            mockFunc = asyncMockFactory(returnValue="result")
            result = await mockFunc()
            assert result == "result"
    """
    return createAsyncMock
