"""
Dashboard Data Models
Request-scoped snapshots of one ticker submission
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CompanyProfile(BaseModel):
    """Company summary taken from the ticker details endpoint"""
    model_config = ConfigDict(frozen=True)

    ticker: str
    name: str
    market_cap: Optional[float] = None
    description: Optional[str] = None
    homepage_url: Optional[str] = None
    icon_url: Optional[str] = None

    @classmethod
    def from_ticker_details(cls, results: Dict[str, Any]) -> "CompanyProfile":
        branding = results.get("branding") or {}
        return cls(
            ticker=results.get("ticker", ""),
            name=results.get("name", ""),
            market_cap=results.get("market_cap"),
            description=results.get("description"),
            homepage_url=results.get("homepage_url"),
            icon_url=branding.get("icon_url"),
        )


class SentimentScore(BaseModel):
    """Confidence distribution returned by the text-analytics service"""
    model_config = ConfigDict(frozen=True)

    positive: float = Field(ge=0.0, le=1.0)
    neutral: float = Field(ge=0.0, le=1.0)
    negative: float = Field(ge=0.0, le=1.0)


class NewsArticle(BaseModel):
    """News item passed through verbatim from the news endpoint"""
    model_config = ConfigDict(frozen=True, extra="allow")

    article_url: str
    title: str
    summary: Optional[str] = None
    published_utc: Optional[datetime] = None


class AnnotatedArticle(NewsArticle):
    """News item with its sentiment (None when scoring failed)"""

    sentiment: Optional[SentimentScore] = None

    @classmethod
    def annotate(cls, article: NewsArticle, sentiment: Optional[SentimentScore]) -> "AnnotatedArticle":
        data = article.model_dump()
        data["sentiment"] = sentiment
        return cls(**data)


class RelatedCompany(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    ticker: str


class SubmissionResult(BaseModel):
    """
    Everything the presentation layer needs for one submission.
    Replaced wholesale by the next submission.
    """
    model_config = ConfigDict(frozen=True)

    ticker: Optional[str] = None
    profile: Optional[CompanyProfile] = None
    news: List[AnnotatedArticle] = Field(default_factory=list)
    selected: Optional[AnnotatedArticle] = None
    related_companies: List[RelatedCompany] = Field(default_factory=list)
    error: Optional[str] = None
    submitted_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.profile is not None

    @classmethod
    def empty(cls) -> "SubmissionResult":
        return cls()

    @classmethod
    def failure(cls, ticker: Optional[str], message: str) -> "SubmissionResult":
        return cls(
            ticker=ticker,
            error=message,
            submitted_at=datetime.now(timezone.utc),
        )
