"""Tests for the MCP server wiring."""
from importlib.metadata import version
from unittest.mock import AsyncMock, MagicMock

import mcp.types as types
import pytest

from mcp_service.app.server import SERVER_NAME, create_server

RAW_REVIEWS = [
    {"text": "Great", "rating": 5, "sentiment": "positive", "source": "Amazon"},
    {"text": "Bad", "rating": 2, "sentiment": "negative", "source": "Reddit"},
]


@pytest.fixture
def server():
    aggregator = MagicMock()
    aggregator.fetch_reviews = AsyncMock(return_value=[])
    return create_server(aggregator)


def test_server_name(server):
    assert server.name == SERVER_NAME


@pytest.mark.asyncio
async def test_list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))

    names = [tool.name for tool in result.root.tools]
    assert names == ["get_product_reviews", "analyze_reviews", "get_review_summary"]


async def _call(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


@pytest.mark.asyncio
async def test_call_tool_returns_text(server):
    result = await _call(server, "get_review_summary", {"reviews": RAW_REVIEWS})

    assert not result.isError
    assert result.content[0].text.startswith("Review Summary:\nAverage Rating: 3.5/5")


@pytest.mark.asyncio
async def test_call_tool_error_sets_flag(server):
    result = await _call(server, "get_review_summary", {"reviews": []})

    assert result.isError
    assert "Error summarizing reviews" in result.content[0].text


def test_installed_sdk_has_decorator_handlers():
    # create_server registers handlers with Server.list_tools()/call_tool(), which 2.x removed
    assert int(version("mcp").split(".")[0]) < 2
