"""
News & Sentiment Analysis System
Scores ticker news and selects the most significant article
"""

from .sentiment import AzureSentimentScorer, BaseSentimentScorer
from .aggregator import annotate_articles, find_most_significant, significance

__all__ = [
    'AzureSentimentScorer',
    'BaseSentimentScorer',
    'annotate_articles',
    'find_most_significant',
    'significance'
]
