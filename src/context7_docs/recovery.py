"""Not-found recovery: search for candidate libraries and suggest them.

Triggered when the docs endpoint answers 404. Nothing in this module
produces an error result; a failing search degrades to the plain
"not found" message.
"""

from __future__ import annotations

import json
import logging

import httpx

from context7_docs import formatting
from context7_docs.config import ServiceConfig
from context7_docs.errors import SearchFailure
from context7_docs.http_client import SEARCH_TIMEOUT, Success, fetch
from context7_docs.messages import Messages
from context7_docs.models import DocRequest, SearchResult

log = logging.getLogger("context7-docs")

MAX_SUGGESTIONS = 5


def derive_search_term(library: str) -> str:
    """Use the part after the last ``/``, or the whole identifier.

    ``"vercel/next.js"`` -> ``"next.js"``; ``"owner/"`` -> ``""``.
    """
    if "/" in library:
        return library.rsplit("/", 1)[1]
    return library


async def search_libraries(
    config: ServiceConfig,
    query: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[SearchResult]:
    """Query the search endpoint and return at most MAX_SUGGESTIONS results.

    Results keep the order the service returned them in.

    Raises:
        SearchFailure: transport error, non-2xx status, or an unparsable body.
    """
    outcome = await fetch(
        f"{config.base_url}/search",
        {"query": query},
        config.api_key,
        SEARCH_TIMEOUT,
        transport=transport,
    )
    if not isinstance(outcome, Success):
        raise SearchFailure(f"search request failed: {outcome!r}")

    try:
        items = json.loads(outcome.body).get("results") or []
        return [SearchResult.from_json(item) for item in items[:MAX_SUGGESTIONS]]
    except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as exc:
        raise SearchFailure(f"cannot parse search response: {exc}") from exc


async def recover(
    config: ServiceConfig,
    request: DocRequest,
    messages: Messages,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Build the not-found report for *request*, with suggestions when possible."""
    term = derive_search_term(request.library)
    log.debug("Search term for %r: %r", request.library, term)

    results: list[SearchResult] = []
    if not term:
        log.info("Empty search term for %r, skipping search", request.library)
    else:
        try:
            results = await search_libraries(config, term, transport=transport)
        except SearchFailure as exc:
            log.info("Search for %r failed, no suggestions: %s", term, exc)

    if not results:
        return formatting.format_not_found(request.library, messages)
    return formatting.format_suggestions(request.library, results, messages)
