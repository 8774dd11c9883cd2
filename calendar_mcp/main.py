#!/usr/bin/env python3
"""
Calendar MCP Server

This module provides the main entry point for the Calendar MCP server.
"""

import sys
import traceback

from mcp.server.fastmcp import FastMCP

from calendar_mcp.utils.logger import get_logger, setup_logger
from calendar_mcp.utils.config import get_config
from calendar_mcp.mcp.tools import setup_tools

# Setup logger for calendar_mcp
setup_logger("calendar_mcp")
logger = get_logger("calendar_mcp")

# Get configuration
config = get_config()

# Create FastMCP application
mcp = FastMCP(
    name=config.get("mcp_server_name", "Google Calendar"),
    host=config.get("host", "127.0.0.1"),
    port=config.get("port", 3000),
    stateless_http=True,
    json_response=True,
)

setup_tools(mcp)


def main() -> None:
    """
    Main entry point for the Calendar MCP server.

    Runs over stdio by default; set server.transport (or MCP_TRANSPORT) to
    "http" to serve streamable HTTP on the configured host and port.
    """
    transport = config.get("transport", "stdio")
    try:
        if transport in ("http", "streamable-http"):
            logger.info(f"Starting Calendar MCP server on {config.get('host')}:{config.get('port')}")
            mcp.run(transport="streamable-http")
        else:
            logger.info("Starting Calendar MCP server on stdio")
            mcp.run()
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
