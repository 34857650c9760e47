"""
MCP tool implementations.

Each tool returns a ToolResult (display text + error flag). The server module
only registers these with the SDK; everything testable lives here.
"""
import json
import logging
from typing import Any
from pydantic import BaseModel
from gateway.app.catalog import get_product
from gateway.app.models import Review
from gateway.app.stats import (
    compute_stats,
    format_rating_distribution,
    format_review_lines,
    format_sentiment_breakdown,
)
from scraper_service.app.aggregator import ReviewAggregator

logger = logging.getLogger(__name__)


class ToolResult(BaseModel):
    text: str
    is_error: bool = False


class UnknownToolError(Exception):
    pass


_REVIEWS_ARRAY = {"type": "array", "items": {"type": "object"}}

TOOL_DEFINITIONS = [
    {
        "name": "get_product_reviews",
        "description": "Fetch real-time product reviews from multiple sources",
        "inputSchema": {
            "type": "object",
            "properties": {
                "product_name": {"type": "string", "description": "Name of the product to search for"},
                "use_real_data": {
                    "type": "boolean",
                    "description": "Whether to fetch real-time data or use static data",
                    "default": True,
                },
            },
            "required": ["product_name"],
        },
    },
    {
        "name": "analyze_reviews",
        "description": "Analyze reviews and provide buying recommendation",
        "inputSchema": {
            "type": "object",
            "properties": {
                "reviews": {**_REVIEWS_ARRAY, "description": "Array of review objects to analyze"},
                "product_name": {"type": "string", "description": "Name of the product"},
            },
            "required": ["reviews", "product_name"],
        },
    },
    {
        "name": "get_review_summary",
        "description": "Get a summary of review statistics",
        "inputSchema": {
            "type": "object",
            "properties": {
                "reviews": {**_REVIEWS_ARRAY, "description": "Array of review objects to summarize"},
            },
            "required": ["reviews"],
        },
    },
]


def _parse_reviews(raw: Any) -> list[Review]:
    if not isinstance(raw, list):
        raise TypeError("reviews must be an array of review objects")
    return [Review.model_validate(r) for r in raw]


async def get_product_reviews(aggregator: ReviewAggregator, product_name: str,
                              use_real_data: bool = True) -> ToolResult:
    try:
        if use_real_data:
            reviews = [r.model_dump(mode="json") for r in await aggregator.fetch_reviews(product_name)]
        else:
            product = get_product(product_name)
            reviews = [r.model_dump(mode="json") for r in product.reviews] if product else []
    except Exception as e:
        logger.error(f"[MCP] get_product_reviews failed for {product_name}: {e}")
        return ToolResult(text=f"Error fetching reviews: {e}", is_error=True)

    text = f"Found {len(reviews)} reviews for {product_name}"
    if reviews:
        text += "\n\n" + json.dumps(reviews, indent=2)
    return ToolResult(text=text)


async def analyze_reviews(reviews: Any, product_name: str) -> ToolResult:
    try:
        parsed = _parse_reviews(reviews)
        stats = compute_stats(parsed)
    except (TypeError, ValueError) as e:
        return ToolResult(text=f"Error analyzing reviews: {e}", is_error=True)

    text = (
        f"Analysis for {product_name}:\n\n"
        f"Average Rating: {stats.average_display}/5\n"
        f"Total Reviews: {stats.total_reviews}\n"
        f"Sentiment: {format_sentiment_breakdown(stats.sentiment_breakdown)}\n\n"
        f"Review Data:\n{format_review_lines(parsed)}"
    )
    return ToolResult(text=text)


async def get_review_summary(reviews: Any) -> ToolResult:
    try:
        stats = compute_stats(_parse_reviews(reviews))
    except (TypeError, ValueError) as e:
        return ToolResult(text=f"Error summarizing reviews: {e}", is_error=True)

    text = (
        "Review Summary:\n"
        f"Average Rating: {stats.average_display}/5\n"
        f"Total Reviews: {stats.total_reviews}\n"
        f"Rating Distribution: {format_rating_distribution(stats.rating_distribution)}"
    )
    return ToolResult(text=text)


def _flag(value: Any, default: bool = True) -> bool:
    """JSON clients sometimes send booleans as strings."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ("false", "0", "no", "off", "")
    return bool(value)


_REQUIRED = {t["name"]: t["inputSchema"]["required"] for t in TOOL_DEFINITIONS}


async def call_tool(name: str, arguments: dict, aggregator: ReviewAggregator) -> ToolResult:
    if name not in _REQUIRED:
        raise UnknownToolError(f"Unknown tool: {name}")

    missing = [k for k in _REQUIRED[name] if k not in arguments]
    if missing:
        return ToolResult(text=f"Missing required argument(s) for {name}: {', '.join(missing)}", is_error=True)

    if name == "get_product_reviews":
        return await get_product_reviews(
            aggregator,
            arguments["product_name"],
            _flag(arguments.get("use_real_data")),
        )
    if name == "analyze_reviews":
        return await analyze_reviews(arguments["reviews"], arguments["product_name"])
    return await get_review_summary(arguments["reviews"])
