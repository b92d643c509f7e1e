"""Documentation resolver: request -> fetch -> formatted ToolResult.

Every call ends in exactly one ToolResult. Terminal states:
    - formatted documentation (or the "no documentation" notice)
    - not-found report, with or without suggestions
    - error message for a failed docs fetch or missing configuration
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from context7_docs import formatting
from context7_docs.config import DEFAULT_LOCALE, ServiceConfig, load_config
from context7_docs.errors import ConfigurationError, ErrorKind
from context7_docs.http_client import (
    DOCS_TIMEOUT,
    ClientError,
    FetchOutcome,
    NotFound,
    ServerError,
    Success,
    TransportError,
    fetch,
)
from context7_docs.messages import Messages, get_messages
from context7_docs.models import DocRequest, ToolResult
from context7_docs.recovery import recover

log = logging.getLogger("context7-docs")


def docs_url(config: ServiceConfig, library: str) -> str:
    return f"{config.base_url}/docs/code/{library}"


async def resolve(
    request: DocRequest,
    *,
    config_loader: Callable[[], ServiceConfig] = load_config,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolResult:
    """Fetch and format documentation for *request*.

    Args:
        request: The validated lookup.
        config_loader: Supplies the ServiceConfig for this call.
        transport: Optional httpx transport shared by every request of the
            call (used by tests).

    Returns:
        A ToolResult. Failures are reported through ``is_error``, never raised.
    """
    log.info(
        "Context7 query: library=%s, topic=%s, version=%s, page=%s",
        request.library,
        request.topic,
        request.version,
        request.page,
    )

    try:
        config = config_loader()
    except ConfigurationError as exc:
        log.error("Configuration unavailable: %s", exc)
        messages = get_messages(DEFAULT_LOCALE)
        return ToolResult(formatting.format_config_error(exc, messages), is_error=True)

    messages = get_messages(config.locale)
    outcome = await fetch(
        docs_url(config, request.library),
        request.query_params(),
        config.api_key,
        DOCS_TIMEOUT,
        transport=transport,
    )
    return await _dispatch(outcome, config, request, messages, transport)


async def _dispatch(
    outcome: FetchOutcome,
    config: ServiceConfig,
    request: DocRequest,
    messages: Messages,
    transport: httpx.AsyncBaseTransport | None,
) -> ToolResult:
    if isinstance(outcome, Success):
        if not outcome.body.strip():
            log.info("Context7 returned an empty body for %s", request.library)
            return ToolResult(formatting.format_no_docs(request, messages))
        log.info("Context7 query succeeded for %s (%d chars)", request.library, len(outcome.body))
        return ToolResult(formatting.format_docs(outcome.body, request, messages))

    if isinstance(outcome, NotFound):
        log.info("Library %r not found, searching for candidates", request.library)
        return ToolResult(await recover(config, request, messages, transport=transport))

    if isinstance(outcome, (ClientError, ServerError)):
        kind = ErrorKind.from_status(outcome.status)
        text = formatting.format_error(
            kind, messages, status=outcome.status, detail=outcome.body
        )
    elif isinstance(outcome, TransportError):
        text = formatting.format_error(
            ErrorKind.TRANSPORT, messages, detail=outcome.describe()
        )
    else:
        raise TypeError(f"unexpected fetch outcome: {outcome!r}")

    log.warning("%s", text)
    return ToolResult(text, is_error=True)
