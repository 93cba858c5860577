"""
Stock Sentiment Dashboard
Ticker submission pipeline, view state and presentation view model
"""

from .models import (
    AnnotatedArticle,
    CompanyProfile,
    NewsArticle,
    RelatedCompany,
    SentimentScore,
    SubmissionResult,
)

__all__ = [
    'AnnotatedArticle',
    'CompanyProfile',
    'NewsArticle',
    'RelatedCompany',
    'SentimentScore',
    'SubmissionResult',
]
