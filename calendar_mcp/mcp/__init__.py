"""MCP surface of the Calendar MCP server."""
