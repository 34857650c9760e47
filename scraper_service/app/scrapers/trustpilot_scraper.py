import asyncio
import logging
import os
from datetime import date, datetime, timezone
from urllib.parse import quote_plus
from bs4 import BeautifulSoup
from ..browser import BrowserSession
from ..models import Review
from ..sentiment import SentimentScorer, keyword_sentiment
from .base import ReviewFetcher

logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.trustpilot.com/search?query={query}"
NAVIGATION_TIMEOUT_MS = int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000"))
SETTLE_DELAY_SEC = 3.0
MAX_CARDS = 10

CARD_SELECTOR = "[data-service-review-card-hermes-article]"
RATING_SELECTOR = "[data-service-review-rating]"
TEXT_SELECTOR = "[data-service-review-title-hermes]"


def _card_rating(raw) -> int:
    try:
        rating = int(raw)
    except (TypeError, ValueError):
        return 3
    return min(max(rating, 1), 5) if rating else 3


def _card_date(raw) -> date:
    if raw:
        try:
            return date.fromisoformat(str(raw).split("T")[0])
        except ValueError:
            pass
    return datetime.now(timezone.utc).date()


def parse_review_cards(html: str, scorer: SentimentScorer = keyword_sentiment,
                       source: str = "Trustpilot") -> list[Review]:
    """Extract up to MAX_CARDS review cards from rendered search HTML."""
    soup = BeautifulSoup(html or "", "html.parser")
    reviews = []

    for card in soup.select(CARD_SELECTOR)[:MAX_CARDS]:
        try:
            rating_el = card.select_one(RATING_SELECTOR)
            text_el = card.select_one(TEXT_SELECTOR)
            if rating_el is None or text_el is None:
                continue

            text = text_el.get_text(separator=" ", strip=True)
            time_el = card.find("time")
            reviews.append(Review(
                text=text,
                rating=_card_rating(rating_el.get("data-service-review-rating")),
                sentiment=scorer(text),
                source=source,
                date=_card_date(time_el.get("datetime") if time_el else None),
            ))
        except Exception as e:
            logger.warning(f"[Trustpilot] Skipping malformed review card: {e}")
            continue

    return reviews


class TrustpilotFetcher(ReviewFetcher):
    """Headless-browser scrape of Trustpilot search results."""

    source = "Trustpilot"

    def __init__(self, browser: BrowserSession, scorer: SentimentScorer = keyword_sentiment):
        super().__init__(scorer)
        self.browser = browser

    async def _fetch(self, product_name: str) -> list[Review]:
        url = SEARCH_URL.format(query=quote_plus(product_name))

        async with self.browser.page() as page:
            await page.goto(url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
            await asyncio.sleep(SETTLE_DELAY_SEC)
            html = await page.content()

        return parse_review_cards(html, self.scorer, self.source)
