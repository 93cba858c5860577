"""
Dashboard View Model
Shapes a SubmissionResult into the panels the browser renders
"""

from typing import Any, Dict, List, Optional

from .models import AnnotatedArticle, CompanyProfile, SentimentScore, SubmissionResult

HIGHLIGHT_HEADING = "Most Significant Sentiment"

SENTIMENT_LABELS = ["Positive", "Neutral", "Negative"]
SENTIMENT_COLORS = ["#4caf50", "#ffeb3b", "#f44336"]  # green / yellow / red


def sentiment_chart_data(sentiment: Optional[SentimentScore]) -> Optional[Dict[str, Any]]:
    """Doughnut chart data for a sentiment distribution (None when unscored)"""
    if sentiment is None:
        return None

    return {
        "labels": list(SENTIMENT_LABELS),
        "datasets": [
            {
                "data": [sentiment.positive, sentiment.neutral, sentiment.negative],
                "backgroundColor": list(SENTIMENT_COLORS),
            }
        ],
    }


def _company_panel(profile: CompanyProfile) -> Dict[str, Any]:
    return profile.model_dump()


def _highlight_panel(article: AnnotatedArticle) -> Dict[str, Any]:
    published = article.published_utc
    return {
        "heading": HIGHLIGHT_HEADING,
        "title": article.title,
        "published_utc": published.isoformat() if published else None,
        "published_display": published.strftime("%Y-%m-%d %H:%M:%S %Z").strip() if published else None,
        "summary": article.summary,
        "article_url": article.article_url,
        "sentiment": article.sentiment.model_dump() if article.sentiment else None,
        "chart": sentiment_chart_data(article.sentiment),
    }


def _related_tickers(result: SubmissionResult) -> List[str]:
    return [company.ticker for company in result.related_companies]


def build_dashboard_view(result: SubmissionResult) -> Dict[str, Any]:
    """
    Build the JSON payload for the dashboard page

    An error result clears every panel; only the message is shown.
    """
    if result.error:
        return {
            "ticker": result.ticker,
            "company": None,
            "highlight": None,
            "related_companies": None,
            "error": result.error,
            "submitted_at": result.submitted_at.isoformat() if result.submitted_at else None,
        }

    return {
        "ticker": result.ticker,
        "company": _company_panel(result.profile) if result.profile else None,
        "highlight": _highlight_panel(result.selected) if result.selected else None,
        "related_companies": _related_tickers(result) if result.profile else None,
        "error": None,
        "submitted_at": result.submitted_at.isoformat() if result.submitted_at else None,
    }
