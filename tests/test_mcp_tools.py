"""Tests for the MCP tool implementations."""
import datetime
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from mcp_service.app.tools import TOOL_DEFINITIONS, UnknownToolError, call_tool
from scraper_service.app.models import Review, Sentiment

RAW_REVIEWS = [
    {"text": "Great sound", "rating": 5, "sentiment": "positive", "source": "Amazon"},
    {"text": "Okay", "rating": 3, "sentiment": "neutral", "source": "Reddit"},
    {"text": "Cracked", "rating": 1, "sentiment": "negative", "source": "Trustpilot"},
    {"text": "Nice", "rating": 5, "sentiment": "positive", "source": "Amazon"},
]


@pytest.fixture
def aggregator():
    agg = MagicMock()
    agg.fetch_reviews = AsyncMock(return_value=[
        Review(text="Solid", rating=4, sentiment=Sentiment.POSITIVE, source="Reddit",
               date=datetime.date(2024, 1, 15)),
    ])
    return agg


def test_tool_definitions():
    assert [t["name"] for t in TOOL_DEFINITIONS] == [
        "get_product_reviews", "analyze_reviews", "get_review_summary",
    ]
    assert TOOL_DEFINITIONS[0]["inputSchema"]["required"] == ["product_name"]


@pytest.mark.asyncio
async def test_unknown_tool(aggregator):
    with pytest.raises(UnknownToolError, match="Unknown tool: compare_prices"):
        await call_tool("compare_prices", {}, aggregator)


@pytest.mark.asyncio
async def test_missing_argument(aggregator):
    result = await call_tool("analyze_reviews", {"reviews": RAW_REVIEWS}, aggregator)
    assert result.is_error
    assert "product_name" in result.text


@pytest.mark.asyncio
async def test_get_product_reviews_live(aggregator):
    result = await call_tool("get_product_reviews", {"product_name": "Widget X"}, aggregator)

    assert not result.is_error
    header, payload = result.text.split("\n\n", 1)
    assert header == "Found 1 reviews for Widget X"
    assert json.loads(payload) == [{
        "text": "Solid", "rating": 4, "sentiment": "positive", "source": "Reddit", "date": "2024-01-15",
    }]
    aggregator.fetch_reviews.assert_awaited_once_with("Widget X")


@pytest.mark.asyncio
async def test_get_product_reviews_static(aggregator):
    result = await call_tool("get_product_reviews",
                             {"product_name": "iPhone 15 Pro", "use_real_data": False}, aggregator)

    assert result.text.startswith("Found 5 reviews for iPhone 15 Pro")
    aggregator.fetch_reviews.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("flag", ["false", "False", "0", 0, False])
async def test_use_real_data_false_forms_select_static(aggregator, flag):
    result = await call_tool("get_product_reviews",
                             {"product_name": "iPhone 15 Pro", "use_real_data": flag}, aggregator)

    assert result.text.startswith("Found 5 reviews for iPhone 15 Pro")
    aggregator.fetch_reviews.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("flag", ["true", "1", 1, True, None])
async def test_use_real_data_true_forms_select_live(aggregator, flag):
    await call_tool("get_product_reviews",
                    {"product_name": "Widget X", "use_real_data": flag}, aggregator)

    aggregator.fetch_reviews.assert_awaited_once_with("Widget X")


@pytest.mark.asyncio
async def test_get_product_reviews_static_unknown(aggregator):
    result = await call_tool("get_product_reviews",
                             {"product_name": "Nope", "use_real_data": False}, aggregator)
    assert result.text == "Found 0 reviews for Nope"
    assert not result.is_error


@pytest.mark.asyncio
async def test_get_product_reviews_error(aggregator):
    aggregator.fetch_reviews.side_effect = RuntimeError("browser crashed")
    result = await call_tool("get_product_reviews", {"product_name": "Widget X"}, aggregator)

    assert result.is_error
    assert result.text == "Error fetching reviews: browser crashed"


@pytest.mark.asyncio
async def test_analyze_reviews(aggregator):
    result = await call_tool("analyze_reviews",
                             {"reviews": RAW_REVIEWS, "product_name": "Headphones"}, aggregator)

    assert not result.is_error
    assert result.text.startswith("Analysis for Headphones:\n\nAverage Rating: 3.5/5\nTotal Reviews: 4\n")
    assert "Sentiment: 2 positive, 1 neutral, 1 negative" in result.text
    assert "Rating: 1/5 - Cracked (Source: Trustpilot)" in result.text


@pytest.mark.asyncio
async def test_analyze_reviews_empty(aggregator):
    result = await call_tool("analyze_reviews", {"reviews": [], "product_name": "Headphones"}, aggregator)
    assert result.is_error
    assert result.text.startswith("Error analyzing reviews:")


@pytest.mark.asyncio
async def test_analyze_reviews_not_a_list(aggregator):
    result = await call_tool("analyze_reviews", {"reviews": "lots", "product_name": "Headphones"}, aggregator)
    assert result.is_error


@pytest.mark.asyncio
async def test_review_summary(aggregator):
    result = await call_tool("get_review_summary", {"reviews": RAW_REVIEWS}, aggregator)

    assert result.text == (
        "Review Summary:\n"
        "Average Rating: 3.5/5\n"
        "Total Reviews: 4\n"
        "Rating Distribution: 1★: 1, 3★: 1, 5★: 2"
    )


@pytest.mark.asyncio
async def test_review_summary_invalid_review(aggregator):
    result = await call_tool("get_review_summary", {"reviews": [{"text": "no rating"}]}, aggregator)
    assert result.is_error
    assert result.text.startswith("Error summarizing reviews:")
