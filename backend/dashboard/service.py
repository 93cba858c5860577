"""
Dashboard Submission Pipeline
ticker -> reference data (all-or-nothing) -> news sentiment (all-settle)
-> annotate & select -> SubmissionResult
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import ValidationError

from config import DashboardSettings
from data_providers.base_provider import BaseDataProvider, ReferenceDataError
from data_providers.polygon_provider import get_polygon_provider
from news.aggregator import annotate_articles, find_most_significant
from news.sentiment import AzureSentimentScorer, BaseSentimentScorer

from .models import CompanyProfile, NewsArticle, RelatedCompany, SubmissionResult

logger = logging.getLogger(__name__)

EMPTY_TICKER_ERROR = "Ticker symbol is required"


class DashboardService:
    """
    Runs one ticker submission end to end.
    Holds no per-submission state; every call builds a fresh result.
    """

    def __init__(self, market_data: BaseDataProvider, scorer: BaseSentimentScorer):
        self.market_data = market_data
        self.scorer = scorer

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> "DashboardService":
        scorer = AzureSentimentScorer(
            endpoint=settings.azure_endpoint,
            api_key=settings.azure_api_key,
            language=settings.sentiment_language,
        )
        return cls(market_data=get_polygon_provider(settings), scorer=scorer)

    async def submit(self, raw_ticker: str) -> SubmissionResult:
        """
        Build the dashboard result for a user-entered ticker

        Args:
            raw_ticker: Free text, case-insensitive

        Returns:
            SubmissionResult; fetch-stage failures produce a result with only
            `error` set
        """
        ticker = self.market_data.normalize_symbol(raw_ticker or "")
        if not ticker:
            return SubmissionResult.failure(None, EMPTY_TICKER_ERROR)

        logger.info(f"Dashboard submission for {ticker}")

        try:
            data = await self.market_data.fetch_reference_data(ticker)
            profile = _parse_profile(ticker, data.ticker_details)
            articles = _parse_news(data.news)
            related = _parse_related(data.related_companies)
        except ReferenceDataError as e:
            logger.error(f"Submission for {ticker} failed: {e.message}")
            return SubmissionResult.failure(ticker, e.message)
        except ValidationError as e:
            logger.error(f"Unexpected reference data shape for {ticker}: {e}")
            return SubmissionResult.failure(ticker, f"Unexpected response for {ticker}")

        sentiments = await self.scorer.score_articles(articles)
        news = annotate_articles(articles, sentiments)
        selected = find_most_significant(news)

        scored = sum(1 for s in sentiments if s is not None)
        logger.info(f"{ticker}: {len(news)} articles, {scored} scored, {len(related)} related companies")

        return SubmissionResult(
            ticker=ticker,
            profile=profile,
            news=news,
            selected=selected,
            related_companies=related,
            submitted_at=datetime.now(timezone.utc),
        )


def _parse_profile(ticker: str, payload: Dict[str, Any]) -> CompanyProfile:
    results = payload.get("results")
    if not isinstance(results, dict) or not results:
        raise ReferenceDataError(f"No company details found for {ticker}")
    return CompanyProfile.from_ticker_details(results)


def _results_list(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    results = payload.get("results")
    return results if isinstance(results, list) else []


def _parse_news(payload: Dict[str, Any]) -> List[NewsArticle]:
    return [NewsArticle(**item) for item in _results_list(payload)]


def _parse_related(payload: Dict[str, Any]) -> List[RelatedCompany]:
    return [RelatedCompany(**item) for item in _results_list(payload)]

