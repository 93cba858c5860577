"""
Polygon.io Reference Data Provider
Company details, ticker news and related companies for the dashboard
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

from .base_provider import BaseDataProvider, ReferenceDataError

logger = logging.getLogger(__name__)


class PolygonProvider(BaseDataProvider):
    """
    Polygon.io reference data provider
    Every request carries the API key as the `apiKey` query parameter
    """

    BASE_URL = "https://api.polygon.io"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        news_limit: Optional[int] = None
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.news_limit = news_limit
        super().__init__("Polygon.io", api_key)

    def _check_availability(self) -> bool:
        """Polygon requires API key"""
        return bool(self.api_key)

    async def _get_json(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Dict[str, Any]
    ) -> Dict[str, Any]:
        """GET a Polygon endpoint; non-2xx statuses raise ReferenceDataError"""
        async with session.get(url, params=params) as response:
            if response.status < 200 or response.status >= 300:
                detail = None
                try:
                    body = await response.json(content_type=None)
                    if isinstance(body, dict):
                        detail = body.get("error") or body.get("message")
                except (aiohttp.ContentTypeError, ValueError):
                    pass
                logger.warning(f"Polygon API error {response.status} for {url}: {detail}")
                raise ReferenceDataError(f"Request failed with status code {response.status}")

            data = await response.json(content_type=None)
            if not isinstance(data, dict):
                raise ReferenceDataError(f"Unexpected response from {url}")
            return data

    async def get_ticker_details(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        url = f"{self.base_url}/v3/reference/tickers/{symbol}"
        return await self._get_json(session, url, {"apiKey": self.api_key})

    async def get_news(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        url = f"{self.base_url}/v2/reference/news"
        params = {"ticker": symbol, "apiKey": self.api_key}
        if self.news_limit:
            params["limit"] = self.news_limit
        return await self._get_json(session, url, params)

    async def get_related_companies(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        url = f"{self.base_url}/v1/related-companies/{symbol}"
        return await self._get_json(session, url, {"apiKey": self.api_key})


def get_polygon_provider(settings) -> PolygonProvider:
    """Factory function to create Polygon provider from dashboard settings"""
    return PolygonProvider(
        api_key=settings.polygon_api_key,
        base_url=settings.polygon_base_url,
        news_limit=settings.news_limit,
    )
