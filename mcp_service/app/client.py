"""Stdio client for the shopping-advisor MCP server."""
import logging
import sys
from contextlib import AsyncExitStack
from typing import Any, Optional
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
import mcp.types as types

logger = logging.getLogger(__name__)


class ShoppingAdvisorClient:
    """
    Spawns the server as a subprocess and talks to it over stdio.
    Call failures are logged and come back as None.
    """

    def __init__(self, command: str = sys.executable, args: Optional[list[str]] = None):
        self.server_params = StdioServerParameters(
            command=command,
            args=args if args is not None else ["-m", "mcp_service.app.server"],
        )
        self.session: Optional[ClientSession] = None
        self._stack: Optional[AsyncExitStack] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self) -> bool:
        stack = AsyncExitStack()
        try:
            read_stream, write_stream = await stack.enter_async_context(stdio_client(self.server_params))
            session = await stack.enter_async_context(ClientSession(read_stream, write_stream))
            await session.initialize()
        except Exception as e:
            logger.error(f"[MCP Client] Connection failed: {e}")
            await stack.aclose()
            return False

        self._stack = stack
        self.session = session
        logger.info("[MCP Client] Connected")
        return True

    async def disconnect(self) -> None:
        if self._stack is not None:
            await self._stack.aclose()
        self._stack = None
        self.session = None

    async def _call(self, name: str, arguments: dict[str, Any]) -> Optional[types.CallToolResult]:
        if self.session is None:
            logger.error(f"[MCP Client] {name} called before connect()")
            return None
        try:
            return await self.session.call_tool(name, arguments)
        except Exception as e:
            logger.error(f"[MCP Client] {name} error: {e}")
            return None

    async def get_product_reviews(self, product_name: str, use_real_data: bool = True):
        return await self._call("get_product_reviews", {
            "product_name": product_name,
            "use_real_data": use_real_data,
        })

    async def analyze_reviews(self, reviews: list[dict], product_name: str):
        return await self._call("analyze_reviews", {"reviews": reviews, "product_name": product_name})

    async def get_review_summary(self, reviews: list[dict]):
        return await self._call("get_review_summary", {"reviews": reviews})

    async def list_tools(self) -> Optional[types.ListToolsResult]:
        if self.session is None:
            logger.error("[MCP Client] list_tools called before connect()")
            return None
        try:
            return await self.session.list_tools()
        except Exception as e:
            logger.error(f"[MCP Client] list_tools error: {e}")
            return None
