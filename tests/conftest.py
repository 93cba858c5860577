"""
Pytest Configuration and Shared Fixtures
Provides common test fixtures for the dashboard test suite
"""

import pytest
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))


# ============================================================================
# Fake aiohttp Session
# ============================================================================

class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with`"""

    def __init__(self, status=200, payload=None):
        self.status = status
        self.payload = payload

    async def json(self, content_type=None):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    Routes requests by URL.
    A route may be a FakeResponse, an exception to raise, or a callable
    taking the request kwargs and returning either.
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def _dispatch(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        route = self.routes[url]
        if callable(route) and not isinstance(route, FakeResponse):
            route = route(kwargs)
        if isinstance(route, Exception):
            raise route
        return route

    def get(self, url, **kwargs):
        return self._dispatch("GET", url, kwargs)

    def post(self, url, **kwargs):
        return self._dispatch("POST", url, kwargs)


@pytest.fixture
def fake_session_factory():
    """Build a FakeSession from a route table"""
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def dashboard_settings():
    from config import DashboardSettings

    return DashboardSettings(
        polygon_api_key="test-polygon-key",
        azure_api_key="test-azure-key",
        azure_endpoint="https://test.cognitiveservices.azure.com",
    )


# ============================================================================
# Polygon Payload Fixtures
# ============================================================================

POLYGON = "https://api.polygon.io"


@pytest.fixture
def polygon_urls():
    return {
        "details": f"{POLYGON}/v3/reference/tickers/AAPL",
        "news": f"{POLYGON}/v2/reference/news",
        "related": f"{POLYGON}/v1/related-companies/AAPL",
    }


@pytest.fixture
def sample_ticker_details():
    """Ticker details payload for AAPL"""
    return {
        "request_id": "31d59dda-80e5-4721-8496-d0d32a654afe",
        "status": "OK",
        "results": {
            "ticker": "AAPL",
            "name": "Apple Inc.",
            "market": "stocks",
            "market_cap": 3000000000000,
            "description": "Apple designs a wide variety of consumer electronic devices.",
            "homepage_url": "https://apple.com",
            "branding": {
                "logo_url": "https://api.polygon.io/v1/reference/company-branding/logo.svg",
                "icon_url": "https://api.polygon.io/v1/reference/company-branding/icon.png",
            },
        },
    }


@pytest.fixture
def sample_news():
    """News payload with two AAPL articles"""
    return {
        "status": "OK",
        "count": 2,
        "results": [
            {
                "id": "a1",
                "publisher": {"name": "Benzinga"},
                "title": "A",
                "author": "Benzinga Newsdesk",
                "published_utc": "2024-06-24T18:33:53Z",
                "article_url": "https://example.com/a",
                "tickers": ["AAPL"],
                "summary": "Apple beats estimates.",
            },
            {
                "id": "b2",
                "publisher": {"name": "MarketWatch"},
                "title": "B",
                "author": "Staff",
                "published_utc": "2024-06-24T12:00:00Z",
                "article_url": "https://example.com/b",
                "tickers": ["AAPL"],
                "summary": "Apple faces a lawsuit.",
            },
        ],
    }


@pytest.fixture
def sample_related_companies():
    return {
        "status": "OK",
        "stock_symbol": "AAPL",
        "results": [{"ticker": "MSFT"}, {"ticker": "GOOGL"}, {"ticker": "AMZN"}],
    }


# ============================================================================
# Sentiment Fixtures
# ============================================================================

def azure_sentiment_payload(positive, neutral, negative):
    """Azure Text Analytics v3.1 sentiment response for one document"""
    return {
        "documents": [
            {
                "id": "1",
                "sentiment": "mixed",
                "confidenceScores": {
                    "positive": positive,
                    "neutral": neutral,
                    "negative": negative,
                },
                "sentences": [],
                "warnings": [],
            }
        ],
        "errors": [],
        "modelVersion": "2022-11-01",
    }


@pytest.fixture
def azure_payload_factory():
    return azure_sentiment_payload
