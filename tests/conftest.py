"""Shared pytest fixtures for context7-docs test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from context7_docs import config
from context7_docs.config import ServiceConfig

BASE_URL = "https://context7.test/api/v2"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's environment and config file out of every test."""
    for name in ("CONTEXT7_API_KEY", "CONTEXT7_BASE_URL", "CONTEXT7_LOCALE", "CONTEXT7_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_DEFAULT_CONFIG_FILE", tmp_path / "absent" / "config.json")


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(api_key=None, base_url=BASE_URL)


def routed_transport(docs: Handler, search: Handler | None = None) -> httpx.MockTransport:
    """MockTransport sending /search to *search* and everything else to *docs*."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/search"):
            if search is None:
                raise AssertionError(f"unexpected search request: {request.url}")
            return search(request)
        return docs(request)

    return httpx.MockTransport(handler)


def search_json(results: list[dict], status_code: int = 200) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"results": results})

    return handler


def text_response(body: str, status_code: int = 200) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return handler
