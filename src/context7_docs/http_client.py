"""Async HTTP client adapter for the Context7 API using httpx.

Features:
- One AsyncClient per request, no state shared between calls
- Optional bearer authentication
- Responses classified into FetchOutcome values instead of raised errors
- No retries: a single failed attempt is final
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import httpx

from context7_docs import __version__

log = logging.getLogger("context7-docs")

DOCS_TIMEOUT = 30.0
SEARCH_TIMEOUT = 15.0

_USER_AGENT = f"context7-docs/{__version__}"


@dataclass(frozen=True, slots=True)
class Success:
    body: str


@dataclass(frozen=True, slots=True)
class NotFound:
    body: str = ""


@dataclass(frozen=True, slots=True)
class ClientError:
    status: int
    body: str


@dataclass(frozen=True, slots=True)
class ServerError:
    status: int
    body: str


@dataclass(frozen=True, slots=True)
class TransportError:
    cause: BaseException

    def describe(self) -> str:
        text = str(self.cause).strip()
        name = type(self.cause).__name__
        return f"{name}: {text}" if text else name


FetchOutcome = Union[Success, NotFound, ClientError, ServerError, TransportError]


def _headers(api_key: str | None) -> dict[str, str]:
    headers: dict[str, str] = {"User-Agent": _USER_AGENT}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _make_client(
    api_key: str | None,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=_headers(api_key),
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    )


def classify_response(resp: httpx.Response) -> FetchOutcome:
    """Map an HTTP response onto a FetchOutcome by status code."""
    status = resp.status_code
    if 200 <= status <= 299:
        return Success(resp.text)
    if status == 404:
        return NotFound(resp.text)
    if 500 <= status <= 599:
        return ServerError(status, resp.text)
    return ClientError(status, resp.text)


async def fetch(
    url: str,
    params: dict[str, str] | None = None,
    api_key: str | None = None,
    timeout: float = DOCS_TIMEOUT,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchOutcome:
    """Issue one GET request and classify the result.

    Network, DNS, TLS and timeout failures come back as TransportError
    carrying the original exception; they are never raised.

    Args:
        url: Absolute URL to fetch.
        params: Query parameters; only the keys present are sent.
        api_key: Bearer credential, omitted from the request when None.
        timeout: Overall timeout in seconds.
        transport: Optional httpx transport (used by tests).
    """
    log.debug(
        "GET %s params=%s auth=%s timeout=%.0fs",
        url,
        params or {},
        "bearer" if api_key else "anonymous",
        timeout,
    )
    try:
        async with _make_client(api_key, timeout, transport) as client:
            resp = await client.get(url, params=params or None)
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
        log.warning("GET %s failed: %s (%s)", url, type(exc).__name__, exc)
        return TransportError(exc)

    log.debug("GET %s -> %d (%d chars)", url, resp.status_code, len(resp.text))
    return classify_response(resp)
