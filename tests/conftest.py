"""Shared test fixtures for the Serper MCP test suite."""

from typing import Any

import pytest
import respx

# ─── Pytest Configuration ────────────────────────────────────────


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no I/O)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


# ─── Async Backend ───────────────────────────────────────────────


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


# ─── Settings Fixtures ───────────────────────────────────────────


@pytest.fixture
def test_settings():
    """Test settings with no API key."""
    from serper_mcp.config import Settings

    return Settings(_env_file=None, debug=True, log_level="DEBUG", api_key=None)


@pytest.fixture
def mock_settings():
    """Settings with a mock API key for testing."""
    from serper_mcp.config import Settings

    return Settings(_env_file=None, debug=True, api_key="test-serper-key")


@pytest.fixture
def configured_api_key(monkeypatch):
    """Set an API key on the global settings instance."""
    from serper_mcp.config import settings

    monkeypatch.setattr(settings, "api_key", "test-serper-key")
    return "test-serper-key"


@pytest.fixture
def missing_api_key(monkeypatch):
    """Clear the API key on the global settings instance."""
    from serper_mcp.config import settings

    monkeypatch.setattr(settings, "api_key", None)


# ─── HTTP Mocking ────────────────────────────────────────────────


@pytest.fixture
def mock_http():
    """RESPX mock router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


# ─── Client Fixtures ─────────────────────────────────────────────


@pytest.fixture
def serper_client(mock_settings):
    """Serper client pointed at the default endpoints."""
    from serper_mcp.services.serper_client import SerperClient

    return SerperClient(api_key=mock_settings.api_key)


# ─── Sample Data Fixtures ────────────────────────────────────────


@pytest.fixture
def sample_search_response() -> dict:
    """Sample Serper search response for mocking."""
    return {
        "searchParameters": {
            "q": "python programming",
            "gl": "us",
            "hl": "en",
            "type": "search",
            "engine": "google",
        },
        "knowledgeGraph": {
            "title": "Python",
            "type": "Programming language",
            "website": "https://www.python.org/",
        },
        "organic": [
            {
                "title": "Welcome to Python.org",
                "link": "https://www.python.org/",
                "snippet": "The official home of the Python Programming Language.",
                "position": 1,
            },
            {
                "title": "Python Tutorial",
                "link": "https://docs.python.org/3/tutorial/",
                "snippet": "Python is an easy to learn, powerful programming language.",
                "position": 2,
            },
        ],
        "peopleAlsoAsk": [
            {
                "question": "Is Python easy to learn?",
                "snippet": "Python is considered one of the easiest languages to learn.",
                "title": "Python for beginners",
                "link": "https://www.python.org/about/gettingstarted/",
            }
        ],
        "relatedSearches": [{"query": "python download"}, {"query": "python tutorial"}],
    }


@pytest.fixture
def sample_scrape_response() -> dict:
    """Sample Serper scrape response for mocking."""
    return {
        "text": "Example Domain This domain is for use in illustrative examples.",
        "markdown": "# Example Domain\n\nThis domain is for use in illustrative examples.",
        "metadata": {
            "title": "Example Domain",
            "viewport": "width=device-width, initial-scale=1",
        },
        "jsonld": {},
        "credits": 1,
    }
