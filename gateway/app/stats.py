"""
stats.py - review aggregate statistics.
Math only, no AI. Shared by the HTTP gateway and the MCP tools.
"""
from pydantic import BaseModel
from .models import Review

SENTIMENT_LABELS = ("positive", "neutral", "negative")


class ReviewStats(BaseModel):
    average_rating: float
    total_reviews: int
    sentiment_breakdown: dict[str, int]
    rating_distribution: dict[int, int]

    @property
    def average_display(self) -> str:
        return f"{self.average_rating:.1f}"


def compute_stats(reviews: list[Review]) -> ReviewStats:
    if not reviews:
        raise ValueError("no reviews to summarize")

    sentiment_counts = {label: 0 for label in SENTIMENT_LABELS}
    distribution: dict[int, int] = {}
    for r in reviews:
        sentiment_counts[r.sentiment] = sentiment_counts.get(r.sentiment, 0) + 1
        distribution[r.rating] = distribution.get(r.rating, 0) + 1

    return ReviewStats(
        average_rating=sum(r.rating for r in reviews) / len(reviews),
        total_reviews=len(reviews),
        sentiment_breakdown=sentiment_counts,
        rating_distribution=dict(sorted(distribution.items())),
    )


def format_rating_distribution(distribution: dict[int, int]) -> str:
    """{5: 2, 4: 1} -> '4★: 1, 5★: 2'"""
    return ", ".join(f"{rating}★: {count}" for rating, count in sorted(distribution.items()))


def format_sentiment_breakdown(breakdown: dict[str, int]) -> str:
    return ", ".join(f"{breakdown.get(label, 0)} {label}" for label in SENTIMENT_LABELS)


def format_review_lines(reviews: list[Review]) -> str:
    return "\n".join(
        f"Rating: {r.rating}/5 - {r.text} (Source: {r.source})"
        for r in reviews
    )
