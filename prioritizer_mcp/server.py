"""FastMCP server initialization for Prioritizer MCP."""

from mcp.server.fastmcp import FastMCP

from prioritizer_mcp.config import get_settings
from prioritizer_mcp.logging_setup import setup_logging

# Initialize the MCP server
mcp = FastMCP("prioritizer_mcp")


def run() -> None:
    """Run the MCP server with the configured transport."""
    settings = get_settings()
    setup_logging(settings.log_level)

    mcp.settings.host = settings.host
    mcp.settings.port = settings.port

    mcp.run(transport=settings.transport)
