"""
pipeline.py — one product analysis.
Orchestrates review acquisition (scraper service or static catalog),
statistics, and the advisor call.
"""
import logging
import os
import httpx
from dotenv import load_dotenv
from .advisor import UpstreamAnalysisFailure, recommend
from .catalog import get_product
from .metadata import infer_metadata
from .models import AnalyzeResponse, ProductMetadata, Review
from .stats import compute_stats

load_dotenv()
logger = logging.getLogger(__name__)

SCRAPER_URL = os.getenv("SCRAPER_URL", "http://127.0.0.1:8001").rstrip("/") #"http://scraper_service:8001"
SCRAPER_TIMEOUT = float(os.getenv("SCRAPER_TIMEOUT", "120"))

NO_REAL_REVIEWS = "No real reviews found. Try using static data or a different product name."
NOT_IN_CATALOG = "Product not found in our database. Please try a different product or use real data mode."
ANALYSIS_FAILED = "Error analyzing product. Please try again."


def _scraper_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=SCRAPER_URL, timeout=SCRAPER_TIMEOUT)


async def fetch_live_reviews(product_name: str) -> list[Review]:
    """Ask the scraper service for reviews. Raises httpx.HTTPError on transport/status failure."""
    async with _scraper_client() as client:
        resp = await client.post("/scrape", json={"product_name": product_name})
        resp.raise_for_status()
        data = resp.json()

    return [Review.model_validate(r) for r in data.get("reviews", [])]


async def _load_reviews(product_name: str, use_real_data: bool) -> tuple[list[Review], ProductMetadata | None, str]:
    """Returns (reviews, metadata, message-if-not-found)."""
    if use_real_data:
        logger.info(f"[Pipeline] Fetching real reviews for: {product_name}")
        try:
            reviews = await fetch_live_reviews(product_name)
        except httpx.HTTPError as e:
            logger.error(f"[Pipeline] Scraper service failed for {product_name}: {e}")
            reviews = []
        if not reviews:
            return [], None, NO_REAL_REVIEWS
        return reviews, infer_metadata(product_name), ""

    product = get_product(product_name)
    if product is None or not product.reviews:
        return [], None, NOT_IN_CATALOG
    return product.reviews, product.metadata, ""


async def analyze_product(product_name: str, use_real_data: bool = False) -> AnalyzeResponse:
    reviews, metadata, message = await _load_reviews(product_name, use_real_data)
    if not reviews:
        return AnalyzeResponse(product=product_name, found=False, message=message)

    stats = compute_stats(reviews)

    try:
        recommendation = await recommend(product_name, metadata, reviews, stats)
    except UpstreamAnalysisFailure as e:
        logger.error(f"[Pipeline] Analysis failed for {product_name}: {e}")
        return AnalyzeResponse(product=product_name, found=False, message=ANALYSIS_FAILED)

    return AnalyzeResponse(
        product=product_name,
        found=True,
        average_rating=stats.average_display,
        total_reviews=stats.total_reviews,
        sentiment_breakdown=stats.sentiment_breakdown,
        rating_distribution=stats.rating_distribution,
        metadata=metadata,
        recommendation=recommendation,
        data_source="Real-time MCP" if use_real_data else "Static database",
        mcp_enabled=True,
    )
