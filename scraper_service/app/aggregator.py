"""
aggregator.py - multi-source review acquisition.

Runs every fetcher concurrently, waits for all of them to settle, and
concatenates results in registration order. Falls back to the synthetic
review set when nothing live comes back, so callers always get reviews.
"""
import asyncio
import logging
from typing import Optional, Sequence

from .browser import BrowserSession
from .errors import NoReviewsFound
from .fallback import mock_reviews
from .models import Review
from .scrapers.base import ReviewFetcher
from .scrapers.producthunt_scraper import ProductHuntFetcher
from .scrapers.reddit_scraper import RedditFetcher
from .scrapers.trustpilot_scraper import TrustpilotFetcher
from .sentiment import SentimentScorer, keyword_sentiment

logger = logging.getLogger(__name__)


class ReviewAggregator:

    def __init__(self, fetchers: Sequence[ReviewFetcher], browser: Optional[BrowserSession] = None):
        self.fetchers = tuple(fetchers)
        self.browser = browser

    async def fetch_live_reviews(self, product_name: str) -> list[Review]:
        """All-settled fan-out. A failed fetcher contributes nothing."""
        results = await asyncio.gather(
            *(f.fetch(product_name) for f in self.fetchers),
            return_exceptions=True,
        )

        all_reviews: list[Review] = []
        for fetcher, result in zip(self.fetchers, results):
            if isinstance(result, BaseException):
                logger.warning(f"[Aggregator] {fetcher.source} failed: {result}")
                continue
            if result:
                all_reviews.extend(result)

        logger.info(f"[Aggregator] Found {len(all_reviews)} total live reviews for {product_name}")
        return all_reviews

    async def fetch_reviews(self, product_name: str) -> list[Review]:
        """Never empty: live reviews if any, else the synthetic set."""
        try:
            reviews = await self.fetch_live_reviews(product_name)
            if not reviews:
                raise NoReviewsFound(product_name)
            return reviews
        except NoReviewsFound:
            logger.info(f"[Aggregator] No live reviews, using mock data for {product_name}")
        except Exception as e:
            logger.error(f"[Aggregator] Error fetching reviews for {product_name}: {e}")
        return mock_reviews(product_name)

    async def close(self) -> None:
        if self.browser is not None:
            await self.browser.close()


def build_default_aggregator(browser: Optional[BrowserSession] = None,
                             scorer: SentimentScorer = keyword_sentiment) -> ReviewAggregator:
    """Reddit, then Trustpilot, then Product Hunt."""
    browser = browser or BrowserSession()
    fetchers = [
        RedditFetcher(scorer),
        TrustpilotFetcher(browser, scorer),
        ProductHuntFetcher(scorer),
    ]
    return ReviewAggregator(fetchers, browser=browser)
