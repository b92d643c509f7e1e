"""MCP tool implementation: context7 documentation lookup."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from context7_docs import formatting, resolver
from context7_docs.config import DEFAULT_LOCALE
from context7_docs.messages import get_messages
from context7_docs.models import MAX_PAGE, MIN_PAGE, DocRequest, ToolResult
from context7_docs.server import mcp

log = logging.getLogger("context7-docs")

LibraryId = Annotated[
    str,
    Field(
        description=(
            "Library identifier in owner/repo format "
            "(e.g. vercel/next.js, facebook/react, spring-projects/spring-framework)"
        ),
    ),
]
Topic = Annotated[
    Optional[str],
    Field(description="Optional topic to focus on (e.g. routing, authentication, core)"),
]
Version = Annotated[Optional[str], Field(description="Optional version (e.g. v15.1.8)")]
Page = Optional[
    Annotated[
        int,
        Field(ge=MIN_PAGE, le=MAX_PAGE, description="Optional page number (default 1, max 10)"),
    ]
]


@mcp.tool(name="context7")
async def context7(
    library: LibraryId,
    topic: Topic = None,
    version: Version = None,
    page: Page = None,
) -> CallToolResult:
    """Query up-to-date documentation for frameworks and libraries.

    Works for Next.js, React, Vue, Spring and other popular projects. Free to
    use without configuration; set CONTEXT7_API_KEY for a higher rate limit.
    If the library is not found, similar libraries are suggested.

    Args:
        library: Library identifier in owner/repo format.
        topic: Optional topic to focus the documentation on.
        version: Optional library version.
        page: Optional page number, 1 to 10.

    Returns:
        A tool result with the formatted documentation text; ``isError`` is set
        only when the documentation service could not be queried.
    """
    try:
        request = DocRequest(library=library, topic=topic, version=version, page=page)
    except ValueError as exc:
        log.warning("Rejected context7 arguments: %s", exc)
        text = formatting.format_invalid_request(str(exc), get_messages(DEFAULT_LOCALE))
        return ToolResult(text, is_error=True).to_call_result()

    result = await resolver.resolve(request)
    return result.to_call_result()
