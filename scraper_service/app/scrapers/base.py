import logging
from abc import ABC, abstractmethod
from ..models import Review
from ..sentiment import SentimentScorer, keyword_sentiment

logger = logging.getLogger(__name__)


class ReviewFetcher(ABC):
    """
    One review source. `fetch` never raises: any failure inside `_fetch`
    is logged and reported as an empty result.
    """

    source: str = "unknown"

    def __init__(self, scorer: SentimentScorer = keyword_sentiment):
        self.scorer = scorer

    async def fetch(self, product_name: str) -> list[Review]:
        logger.info(f"[{self.source}] Fetching reviews for: {product_name}")
        try:
            reviews = await self._fetch(product_name)
        except Exception as e:
            logger.warning(f"[{self.source}] Failed for '{product_name}': {e}")
            return []
        logger.info(f"[{self.source}] Found {len(reviews)} reviews for {product_name}")
        return reviews

    @abstractmethod
    async def _fetch(self, product_name: str) -> list[Review]:
        ...
