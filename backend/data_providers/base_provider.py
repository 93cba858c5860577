"""
Base Reference Data Provider Interface
Defines the contract for fetching company details, news and related companies
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import asyncio
import logging

import aiohttp

from utils.concurrency import gather_all_or_nothing

logger = logging.getLogger(__name__)


DEFAULT_FETCH_ERROR = "Error fetching stock data or news"


class ReferenceDataError(Exception):
    """Raised when any of the reference-data requests for a ticker fails"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or DEFAULT_FETCH_ERROR)

    @property
    def message(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True)
class ReferenceData:
    """Raw upstream payloads for one ticker, unmodified"""
    ticker_details: Dict[str, Any]
    news: Dict[str, Any]
    related_companies: Dict[str, Any]

    def first_error(self) -> Optional[str]:
        """First upstream-reported error, checked in details/news/related order"""
        for payload in (self.ticker_details, self.news, self.related_companies):
            error = payload.get("error")
            if error:
                return error
        return None


class BaseDataProvider(ABC):
    """
    Abstract base class for reference-data providers
    Each provider must implement the three ticker lookups
    """

    def __init__(self, name: str, api_key: Optional[str] = None):
        self.name = name
        self.api_key = api_key
        self.is_available = self._check_availability()

    @abstractmethod
    def _check_availability(self) -> bool:
        """
        Check if the provider is available (API key configured, etc.)

        Returns:
            True if provider can be used, False otherwise
        """
        pass

    @abstractmethod
    async def get_ticker_details(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        """
        Get company reference data for a symbol

        Args:
            symbol: Normalized ticker symbol
            session: Open HTTP session

        Returns:
            Raw JSON payload
        """
        pass

    @abstractmethod
    async def get_news(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        """Get recent news for a symbol as the raw JSON payload"""
        pass

    @abstractmethod
    async def get_related_companies(self, symbol: str, session: aiohttp.ClientSession) -> Dict[str, Any]:
        """Get related companies for a symbol as the raw JSON payload"""
        pass

    def normalize_symbol(self, symbol: str) -> str:
        """
        Normalize a user-entered symbol for this provider's API

        Args:
            symbol: Free-text ticker

        Returns:
            Upper-cased, stripped symbol
        """
        return symbol.upper().strip()

    async def fetch_reference_data(
        self,
        symbol: str,
        session: Optional[aiohttp.ClientSession] = None
    ) -> ReferenceData:
        """
        Fetch ticker details, news and related companies concurrently

        The three requests succeed or fail together. A transport failure or
        an `error` field in any body fails the whole fetch with one message,
        picked in details/news/related order.

        Args:
            symbol: Ticker symbol (normalized here)
            session: Optional shared HTTP session

        Returns:
            ReferenceData holding the three raw payloads

        Raises:
            ReferenceDataError: on any failure
        """
        symbol = self.normalize_symbol(symbol)

        if not self.is_available:
            logger.error(f"{self.name} API key not configured, cannot fetch {symbol}")
            raise ReferenceDataError(f"{self.name} API key is not configured")

        logger.info(f"Fetching reference data for {symbol} from {self.name}")

        try:
            if session is None:
                async with aiohttp.ClientSession() as own_session:
                    payloads = await self._fetch_all(symbol, own_session)
            else:
                payloads = await self._fetch_all(symbol, session)
        except ReferenceDataError as e:
            logger.error(f"{self.name} request failed for {symbol}: {e}")
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"{self.name} request failed for {symbol}: {e!r}")
            raise ReferenceDataError(str(e)) from e

        data = ReferenceData(*payloads)

        error = data.first_error()
        if error:
            logger.error(f"{self.name} reported an error for {symbol}: {error}")
            raise ReferenceDataError(error)

        return data

    async def _fetch_all(self, symbol: str, session: aiohttp.ClientSession) -> List[Dict[str, Any]]:
        return await gather_all_or_nothing(
            self.get_ticker_details(symbol, session),
            self.get_news(symbol, session),
            self.get_related_companies(symbol, session),
        )
