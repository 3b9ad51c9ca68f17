#!/usr/bin/env python3
"""
MCP server exposing the Figma REST API (files, comments, projects,
components, styles, version history, webhooks) as tools over stdio.

Usage:
    FIGMA_ACCESS_TOKEN=... python -m figma_mcp [--base-url=<url>] [--log-level=<level>]
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import httpx
import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .api import FIGMA_API_BASE, ConfigError, FigmaConfig, create_client, load_config
from .handlers import dispatch
from .tools import list_tools

logger = logging.getLogger("figma_mcp")

SERVER_NAME = "figma-mcp"

# ---------------------------------------------------------------------------
# Logging: ALL output goes to stderr to avoid polluting the MCP stdio transport
# ---------------------------------------------------------------------------


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Figma REST API MCP server")
    parser.add_argument(
        "--base-url",
        default=FIGMA_API_BASE,
        help=f"Root URL of the Figma REST API (default: {FIGMA_API_BASE})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level written to stderr (default: INFO)",
    )
    # parse_known_args so that the MCP SDK's own argv parsing doesn't cause errors
    args, _unknown = parser.parse_known_args(argv)
    return args


# ---------------------------------------------------------------------------
# MCP server instance
# ---------------------------------------------------------------------------


def create_server(client: httpx.AsyncClient) -> Server:
    """Build the MCP server; every tool call goes through *client*."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def _list_tools() -> List[types.Tool]:
        return list_tools()

    # Raw handler: @server.call_tool() turns McpError into an isError result,
    # but an unknown tool must reach the client as a JSON-RPC error.
    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatch(client, req.params.name, req.params.arguments or {})
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = _call_tool
    return server


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def serve(config: FigmaConfig) -> None:
    async with create_client(config) as client:
        server = create_server(client)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Figma MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def run(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(base_url=args.base_url)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Using Figma API at %s", config.base_url)
    if config.team_id:
        logger.info("Default team: %s", config.team_id)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    run()
