"""MCP Server definition — registers all tools via FastMCP."""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    name="context7-docs",
    instructions=(
        "Context7 documentation MCP server. Provides the context7 tool, which fetches "
        "up-to-date documentation for a library identified as owner/repo and suggests "
        "matching libraries when the identifier is not found."
    ),
)

# Import tools module so @mcp.tool() decorators execute at import time.
import context7_docs.tools as _tools  # noqa: F401, E402
