"""
Stdio MCP server exposing the shopping-advisor tools.

Run with: python -m mcp_service.app.server
Logs go to stderr; stdout carries the protocol.
"""
import asyncio
import logging
import os
import sys
import mcp.types as types
from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from scraper_service.app.aggregator import ReviewAggregator, build_default_aggregator
from .tools import TOOL_DEFINITIONS, call_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "shopping-advisor-mcp"
SERVER_VERSION = "1.0.0"


class ToolFailure(Exception):
    """Raised so the SDK reports the tool result with isError set."""


def create_server(aggregator: ReviewAggregator) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=t["name"], description=t["description"], inputSchema=t["inputSchema"])
            for t in TOOL_DEFINITIONS
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
        result = await call_tool(name, arguments or {}, aggregator)
        if result.is_error:
            raise ToolFailure(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server


async def serve() -> None:
    aggregator = build_default_aggregator()
    server = create_server(aggregator)
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("[MCP] Server started")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        logger.info("[MCP] Shutting down, closing browser...")
        await aggregator.close()


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        stream=sys.stderr,
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    asyncio.run(serve())


if __name__ == "__main__":
    main()
