"""
MCP Tools Package

This package contains modular tool definitions for the Calendar MCP server.
Each module handles a specific domain of functionality.

Tools are organized into the following modules:
- calendars: Calendar lookups (list_calendars, list_colors, get_current_time)
- events: Event operations (list, search, get, create, update, delete) with
  conflict & duplicate detection on create and update
- freebusy: Availability queries (get_freebusy)

Every tool takes user_id and provider to select the stored OAuth tokens.
"""

from mcp.server.fastmcp import FastMCP

from calendar_mcp.mcp.tools.calendars import setup_calendar_tools
from calendar_mcp.mcp.tools.events import setup_event_tools
from calendar_mcp.mcp.tools.freebusy import setup_freebusy_tools


def setup_tools(mcp: FastMCP) -> None:
    """
    Set up all MCP tools on the FastMCP application.

    Args:
        mcp (FastMCP): The FastMCP application.
    """
    setup_calendar_tools(mcp)
    setup_event_tools(mcp)
    setup_freebusy_tools(mcp)


__all__ = [
    "setup_tools",
    "setup_calendar_tools",
    "setup_event_tools",
    "setup_freebusy_tools",
]
