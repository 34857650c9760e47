import logging
from ..models import Review
from .base import ReviewFetcher

logger = logging.getLogger(__name__)


class ProductHuntFetcher(ReviewFetcher):
    """Placeholder for the Product Hunt GraphQL API, which needs an auth token."""

    source = "Product Hunt"

    async def _fetch(self, product_name: str) -> list[Review]:
        # TODO: query the v2 GraphQL API once a developer token is provisioned
        logger.info(f"[{self.source}] API requires authentication token, skipping")
        return []
