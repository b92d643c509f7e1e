"""context7-docs: MCP server for Context7 library documentation lookup."""

import argparse
import logging
import os
import sys

__version__ = "0.1.0"

_DEFAULT_HTTP_PORT = 8808


def _default_port() -> int:
    try:
        return int(os.environ.get("MCP_HTTP_PORT", str(_DEFAULT_HTTP_PORT)))
    except ValueError:
        return _DEFAULT_HTTP_PORT


def _configure_logging() -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point — starts the MCP server (stdio by default)."""
    parser = argparse.ArgumentParser(
        prog="context7-docs",
        description="Context7 documentation lookup exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"context7-docs {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind for sse/streamable-http (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=_default_port(),
        help="Port to bind for sse/streamable-http (default: $MCP_HTTP_PORT or 8808)",
    )
    args = parser.parse_args()

    _configure_logging()
    log = logging.getLogger("context7-docs")

    from context7_docs.server import mcp

    if args.transport != "stdio":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
        log.info("Starting %s server on http://%s:%d", args.transport, args.host, args.port)

    try:
        mcp.run(transport=args.transport)
    except KeyboardInterrupt:
        pass
