"""
News Sentiment Aggregation
Merges per-article sentiment onto the news list and picks the most
sentiment-extreme article
"""

import logging
import math
from typing import List, Optional, Sequence

from dashboard.models import AnnotatedArticle, NewsArticle, SentimentScore

logger = logging.getLogger(__name__)


def annotate_articles(
    articles: Sequence[NewsArticle],
    sentiments: Sequence[Optional[SentimentScore]]
) -> List[AnnotatedArticle]:
    """
    Zip articles with their sentiment results by index

    Args:
        articles: News articles in upstream order
        sentiments: Index-aligned sentiment results (None where scoring failed)

    Returns:
        One AnnotatedArticle per input article, same order
    """
    if len(articles) != len(sentiments):
        raise ValueError(
            f"Got {len(sentiments)} sentiment results for {len(articles)} articles"
        )

    return [
        AnnotatedArticle.annotate(article, sentiment)
        for article, sentiment in zip(articles, sentiments)
    ]


def significance(article: AnnotatedArticle) -> float:
    """
    How extreme an article's sentiment is, in either direction

    Returns:
        max(positive, negative); -inf when the article has no sentiment
    """
    if article.sentiment is None:
        return -math.inf
    return max(article.sentiment.positive, article.sentiment.negative)


def find_most_significant(articles: Sequence[AnnotatedArticle]) -> Optional[AnnotatedArticle]:
    """
    Pick the article with the highest significance

    The first article is the starting candidate even without sentiment.
    Ties keep the earliest article.

    Returns:
        The selected article, or None for an empty list
    """
    selected = None
    best = -math.inf

    for article in articles:
        if selected is None:
            selected = article
            best = significance(article)
            continue

        score = significance(article)
        if score > best:
            selected = article
            best = score

    if selected is not None:
        logger.info(f"Most significant article: {selected.title!r} (significance={best})")

    return selected
