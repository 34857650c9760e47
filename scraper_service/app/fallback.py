"""
Synthetic review sets used when every live source comes back empty.
Demo stub: the known-bad list only exists to exercise negative recommendations.
"""
import logging
from .models import Review, Sentiment

logger = logging.getLogger(__name__)

MOCK_SOURCE = "Mock Data"

KNOWN_BAD_PRODUCTS = [
    "juicero press", "theranos edison", "google glass",
    "microsoft zune", "blackberry storm", "nintendo virtual boy",
    "segway", "crystal pepsi", "microsoft bob", "webvan",
]

_NEGATIVE_SET = [
    ("This product was a complete disaster. Poor design, terrible functionality, "
     "and a waste of money. Avoid at all costs.", 1, Sentiment.NEGATIVE, "2024-01-15"),
    ("One of the worst products I've ever used. Nothing works as advertised "
     "and it's incredibly frustrating.", 1, Sentiment.NEGATIVE, "2024-01-10"),
    ("Terrible user experience. The product is poorly made and breaks easily. "
     "Not worth the money.", 2, Sentiment.NEGATIVE, "2024-01-05"),
    ("Disappointed with this purchase. The quality is subpar and it doesn't "
     "deliver on its promises.", 2, Sentiment.NEGATIVE, "2024-01-01"),
    ("Would not recommend. The product has many flaws and doesn't work as "
     "expected.", 2, Sentiment.NEGATIVE, "2023-12-28"),
]

_POSITIVE_SET = [
    ("Excellent product! Great quality and functionality. Highly recommend for "
     "anyone looking for this type of item.", 5, Sentiment.POSITIVE, "2024-01-15"),
    ("Very satisfied with this purchase. It works perfectly and exceeded my "
     "expectations. Great value for money.", 5, Sentiment.POSITIVE, "2024-01-10"),
    ("Good product overall. Some minor issues but nothing major. Would buy "
     "again.", 4, Sentiment.POSITIVE, "2024-01-05"),
    ("Decent quality and reasonable price. Meets my needs adequately. No major "
     "complaints.", 4, Sentiment.NEUTRAL, "2024-01-01"),
    ("Average product. Not amazing but not terrible either. Does what it's "
     "supposed to do.", 3, Sentiment.NEUTRAL, "2023-12-28"),
]


def is_known_bad(product_name: str) -> bool:
    name = (product_name or "").lower()
    return any(bad in name for bad in KNOWN_BAD_PRODUCTS)


def mock_reviews(product_name: str) -> list[Review]:
    """Fresh 5-record set: all-negative for known-bad products, positive/neutral otherwise."""
    template = _NEGATIVE_SET if is_known_bad(product_name) else _POSITIVE_SET
    logger.info(f"[Fallback] Generating mock reviews for: {product_name}")
    return [
        Review(text=text, rating=rating, sentiment=sentiment, source=MOCK_SOURCE, date=day)
        for text, rating, sentiment, day in template
    ]
