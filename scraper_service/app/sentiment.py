"""
sentiment.py - keyword-count sentiment heuristic.
Fetchers take any `text -> Sentiment` callable; this is the default one.
"""
from typing import Callable
from .models import Sentiment

SentimentScorer = Callable[[str], Sentiment]

POSITIVE_WORDS = (
    "great", "good", "excellent", "amazing", "love", "perfect",
    "best", "awesome", "fantastic", "outstanding", "superb", "brilliant",
)
NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "hate", "worst", "disappointed",
    "poor", "horrible", "useless", "waste", "regret", "avoid",
)


def _count_matches(content: str, words: tuple[str, ...]) -> int:
    # Each listed word counts once, however often it appears
    return sum(1 for word in words if word in content)


def keyword_sentiment(text: str) -> Sentiment:
    """More positive words -> positive, more negative -> negative, tie -> neutral."""
    content = (text or "").lower()
    positive = _count_matches(content, POSITIVE_WORDS)
    negative = _count_matches(content, NEGATIVE_WORDS)

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
