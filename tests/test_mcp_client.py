"""Tests for the MCP stdio client."""
from unittest.mock import AsyncMock, patch

import pytest

from mcp_service.app.client import ShoppingAdvisorClient


def _connected_client():
    client = ShoppingAdvisorClient()
    client.session = AsyncMock()
    return client


def test_default_server_command():
    client = ShoppingAdvisorClient()
    assert client.server_params.args == ["-m", "mcp_service.app.server"]
    assert client.session is None


@pytest.mark.asyncio
async def test_tool_calls_forward_arguments():
    client = _connected_client()
    reviews = [{"text": "Great", "rating": 5, "source": "Amazon"}]

    await client.get_product_reviews("Widget X", use_real_data=False)
    await client.analyze_reviews(reviews, "Widget X")
    await client.get_review_summary(reviews)

    calls = [c.args for c in client.session.call_tool.await_args_list]
    assert calls == [
        ("get_product_reviews", {"product_name": "Widget X", "use_real_data": False}),
        ("analyze_reviews", {"reviews": reviews, "product_name": "Widget X"}),
        ("get_review_summary", {"reviews": reviews}),
    ]


@pytest.mark.asyncio
async def test_call_failure_returns_none():
    client = _connected_client()
    client.session.call_tool.side_effect = RuntimeError("pipe closed")
    client.session.list_tools.side_effect = RuntimeError("pipe closed")

    assert await client.get_review_summary([]) is None
    assert await client.list_tools() is None


@pytest.mark.asyncio
async def test_calls_before_connect_return_none():
    client = ShoppingAdvisorClient()
    assert await client.get_product_reviews("Widget X") is None
    assert await client.list_tools() is None


@pytest.mark.asyncio
async def test_connect_failure():
    client = ShoppingAdvisorClient(command="does-not-exist")
    with patch("mcp_service.app.client.stdio_client", side_effect=OSError("no such file")):
        assert await client.connect() is False
    assert client.session is None


@pytest.mark.asyncio
async def test_disconnect_without_connect_is_noop():
    client = ShoppingAdvisorClient()
    await client.disconnect()
    assert client.session is None
