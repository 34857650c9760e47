import logging
import os
from datetime import date, datetime, timezone
from curl_cffi.requests import AsyncSession
from ..errors import SourceUnavailable
from ..models import Review
from .base import ReviewFetcher

logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.reddit.com/search.json"
RESULT_LIMIT = 10
MIN_TEXT_LENGTH = 50
REQUEST_TIMEOUT = float(os.getenv("REDDIT_TIMEOUT", "30"))

# curl_cffi's "impersonate" supplies a User-Agent matching Chrome's TLS fingerprint,
# so we only add headers that look like organic browsing.
EXTRA_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.google.com/",
}


def score_to_rating(score: int) -> int:
    """Upvote score -> 1..5 stars."""
    if score > 100:
        return 5
    if score > 50:
        return 4
    if score > 10:
        return 3
    if score < -10:
        return 1
    if score < 0:
        return 2
    return 3


def _post_date(created_utc) -> date:
    if not created_utc:
        return datetime.now(timezone.utc).date()
    return datetime.fromtimestamp(float(created_utc), tz=timezone.utc).date()


class RedditFetcher(ReviewFetcher):
    """Reddit public search JSON; one request, top 10 posts."""

    source = "Reddit"

    async def _fetch(self, product_name: str) -> list[Review]:
        params = {
            "q": product_name,
            "type": "link",
            "sort": "relevance",
            "t": "year",
            "limit": RESULT_LIMIT,
        }
        async with AsyncSession(impersonate="chrome", headers=EXTRA_HEADERS, timeout=REQUEST_TIMEOUT) as client:
            resp = await client.get(SEARCH_URL, params=params)

        if resp.status_code != 200:
            raise SourceUnavailable(self.source, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise SourceUnavailable(self.source, f"invalid JSON: {e}") from e

        return self.parse_listing(data)

    def parse_listing(self, data: dict) -> list[Review]:
        """Turn a search listing into reviews, dropping short posts as noise."""
        posts = (data or {}).get("data", {}).get("children", []) or []
        reviews = []

        for post in posts[:RESULT_LIMIT]:
            p = post.get("data", {}) or {}
            title = p.get("title") or ""
            body = p.get("selftext") or ""
            text = f"{title}\n\n{body}"

            if len(text) <= MIN_TEXT_LENGTH:
                continue

            try:
                score = int(p.get("ups") or 0) - int(p.get("downs") or 0)
                reviews.append(Review(
                    text=text,
                    rating=score_to_rating(score),
                    sentiment=self.scorer(f"{title} {body}"),
                    source=self.source,
                    date=_post_date(p.get("created_utc")),
                ))
            except (TypeError, ValueError, OverflowError) as e:
                logger.warning(f"[Reddit] Skipping malformed post: {e}")
                continue

        return reviews
