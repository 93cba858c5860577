"""
Sentiment Scoring for Financial News
Scores each article through the Azure Text Analytics sentiment API
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import asyncio
import logging

import aiohttp
from pydantic import ValidationError

from dashboard.models import NewsArticle, SentimentScore
from utils.concurrency import gather_all_settled

logger = logging.getLogger(__name__)


class BaseSentimentScorer(ABC):
    """
    Scores a single piece of text.
    Implementations never raise: a failed lookup resolves to None.
    """

    @abstractmethod
    async def score(
        self,
        text: str,
        session: Optional[aiohttp.ClientSession] = None
    ) -> Optional[SentimentScore]:
        pass

    async def score_articles(
        self,
        articles: List[NewsArticle],
        session: Optional[aiohttp.ClientSession] = None
    ) -> List[Optional[SentimentScore]]:
        """
        Score every article concurrently, waiting for all of them to settle

        Args:
            articles: News articles, in display order
            session: Optional shared HTTP session

        Returns:
            One SentimentScore (or None) per article, index-aligned
        """
        if not articles:
            return []

        if session is None:
            async with aiohttp.ClientSession() as own_session:
                return await self._score_all(articles, own_session)
        return await self._score_all(articles, session)

    async def _score_all(self, articles, session):
        return await gather_all_settled(
            [self.score(article.article_url, session) for article in articles],
            fallback=None,
        )


class AzureSentimentScorer(BaseSentimentScorer):
    """
    Azure Cognitive Services Text Analytics (v3.1) sentiment scorer

    The article URL is sent as the full text of a one-document request.
    """

    SENTIMENT_PATH = "/text/analytics/v3.1/sentiment"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        language: str = "en"
    ):
        self.endpoint = (endpoint or "").rstrip("/")
        self.api_key = api_key
        self.language = language
        self.enabled = bool(self.endpoint and self.api_key)

        if not self.enabled:
            logger.warning("Azure Text Analytics not configured - sentiment scores will be empty")

    @property
    def url(self) -> str:
        return f"{self.endpoint}{self.SENTIMENT_PATH}"

    def _build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "documents": [
                {
                    "id": "1",
                    "language": self.language,
                    "text": text,
                }
            ]
        }

    async def score(
        self,
        text: str,
        session: Optional[aiohttp.ClientSession] = None
    ) -> Optional[SentimentScore]:
        """
        Get confidence scores for one document

        Args:
            text: Document text (the article URL)
            session: Optional shared HTTP session

        Returns:
            SentimentScore, or None if the request failed for any reason
        """
        if not self.enabled:
            return None

        try:
            if session is None:
                async with aiohttp.ClientSession() as own_session:
                    data = await self._post(own_session, text)
            else:
                data = await self._post(session, text)

            if data is None:
                return None

            return self._parse_scores(data)

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error analyzing sentiment for {text}: {e!r}")
            return None

    async def _post(self, session: aiohttp.ClientSession, text: str) -> Optional[Dict[str, Any]]:
        headers = {
            "Ocp-Apim-Subscription-Key": self.api_key,
            "Content-Type": "application/json",
        }

        async with session.post(self.url, json=self._build_payload(text), headers=headers) as response:
            if response.status < 200 or response.status >= 300:
                logger.warning(f"Azure sentiment error {response.status} for {text}")
                return None

            return await response.json(content_type=None)

    def _parse_scores(self, data: Any) -> Optional[SentimentScore]:
        documents = data.get("documents") if isinstance(data, dict) else None

        if not documents:
            errors = data.get("errors") if isinstance(data, dict) else None
            logger.warning(f"Azure sentiment returned no documents: {errors or data}")
            return None

        first = documents[0] if isinstance(documents, list) else None
        scores = first.get("confidenceScores") if isinstance(first, dict) else None
        if not scores:
            logger.warning("Azure sentiment document has no confidenceScores")
            return None

        try:
            return SentimentScore(**scores)
        except (TypeError, ValidationError) as e:
            logger.warning(f"Malformed confidenceScores {scores}: {e}")
            return None

