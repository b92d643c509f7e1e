"""Unit tests for the documentation resolver (end-to-end over MockTransport)."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from conftest import BASE_URL, routed_transport, search_json, text_response

from context7_docs.config import ServiceConfig
from context7_docs.errors import ConfigurationError
from context7_docs.models import DocRequest, ToolResult
from context7_docs.resolver import docs_url, resolve


def _loader(config: ServiceConfig):
    return lambda: config


async def _resolve(request: DocRequest, transport, config: ServiceConfig | None = None):
    config = config or ServiceConfig(base_url=BASE_URL)
    return await resolve(request, config_loader=_loader(config), transport=transport)


def _timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectTimeout("timed out", request=request)


class TestSuccess:
    @pytest.mark.asyncio
    async def test_formats_documentation(self) -> None:
        transport = routed_transport(text_response("# Hello"))
        result = await _resolve(DocRequest(library="vercel/next.js"), transport)
        assert isinstance(result, ToolResult)
        assert result.is_error is False
        assert "# Hello" in result.text
        assert "# vercel/next.js Documentation" in result.text

    @pytest.mark.asyncio
    async def test_request_without_optional_fields(self) -> None:
        transport = routed_transport(text_response("body"))
        result = await _resolve(DocRequest(library="facebook/react"), transport)
        for label in ("**Topic**", "**Version**", "**Page**"):
            assert label not in result.text
        assert "body" in result.text

    @pytest.mark.asyncio
    async def test_sends_docs_request(self) -> None:
        seen: list[httpx.Request] = []

        def docs(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="docs")

        config = ServiceConfig(api_key="ctx7sk-abc", base_url=BASE_URL)
        request = DocRequest(library="vercel/next.js", topic="routing", version="v15.1.8", page=2)
        await _resolve(request, routed_transport(docs), config)

        sent = seen[0]
        assert str(sent.url).startswith(f"{BASE_URL}/docs/code/vercel/next.js?")
        assert dict(sent.url.params) == {"topic": "routing", "version": "v15.1.8", "page": "2"}
        assert sent.headers["Authorization"] == "Bearer ctx7sk-abc"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   \n\t  "])
    async def test_empty_body(self, body) -> None:
        transport = routed_transport(text_response(body))
        result = await _resolve(DocRequest(library="a/b"), transport)
        assert result.is_error is False
        assert result.text.startswith("No documentation found for a/b")

    @pytest.mark.asyncio
    async def test_idempotent(self) -> None:
        transport = routed_transport(text_response("fixed content"))
        request = DocRequest(library="a/b", topic="core")
        first = await _resolve(request, transport)
        second = await _resolve(request, transport)
        assert first.text == second.text
        assert first == second


class TestNotFound:
    @pytest.mark.asyncio
    async def test_suggestions(self) -> None:
        transport = routed_transport(
            text_response("not found", 404),
            search_json([{"id": "/vercel/next.js", "stars": 5000, "trustScore": 9.2}]),
        )
        result = await _resolve(DocRequest(library="vercel/nextjs"), transport)
        assert result.is_error is False
        assert "1. **vercel/next.js** (Stars: 5.0K | Score: 9.2)" in result.text
        assert result.text.endswith(
            '```json\n{ "library": "vercel/next.js", "topic": "core" }\n```\n'
        )

    @pytest.mark.asyncio
    async def test_search_timeout_is_not_an_error(self) -> None:
        transport = routed_transport(text_response("", 404), _timeout)
        result = await _resolve(DocRequest(library="vercel/nextjs"), transport)
        assert result.is_error is False
        assert 'Library "vercel/nextjs" not found' in result.text
        assert "`owner/repo`" in result.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "search",
        [
            search_json([]),
            search_json([], status_code=500),
            text_response("<html>oops</html>"),
        ],
    )
    async def test_never_flagged_as_error(self, search) -> None:
        transport = routed_transport(text_response("", 404), search)
        result = await _resolve(DocRequest(library="x/y"), transport)
        assert result.is_error is False

    @pytest.mark.asyncio
    async def test_search_uses_last_segment(self) -> None:
        seen: list[str] = []

        def search(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.params["query"])
            return httpx.Response(200, json={"results": []})

        transport = routed_transport(text_response("", 404), search)
        await _resolve(DocRequest(library="vercel/next.js"), transport)
        assert seen == ["next.js"]


class TestErrors:
    @pytest.mark.asyncio
    async def test_rate_limited(self) -> None:
        transport = routed_transport(text_response("too many", 429))
        result = await _resolve(DocRequest(library="a/b"), transport)
        assert result.is_error is True
        assert "Rate limit" in result.text
        assert "API key" in result.text

    @pytest.mark.asyncio
    async def test_unauthorized(self) -> None:
        transport = routed_transport(text_response("bad key", 401))
        result = await _resolve(DocRequest(library="a/b"), transport)
        assert result.is_error is True
        assert "Invalid or expired API key" in result.text

    @pytest.mark.asyncio
    async def test_server_error(self) -> None:
        transport = routed_transport(text_response("database down", 503))
        result = await _resolve(DocRequest(library="a/b"), transport)
        assert result.is_error is True
        assert "service error: database down" in result.text

    @pytest.mark.asyncio
    async def test_other_client_error_uses_body(self) -> None:
        transport = routed_transport(text_response("invalid version", 400))
        result = await _resolve(DocRequest(library="a/b"), transport)
        assert result.is_error is True
        assert result.text.endswith("invalid version")

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        result = await _resolve(DocRequest(library="a/b"), routed_transport(_timeout))
        assert result.is_error is True
        assert "ConnectTimeout" in result.text

    @pytest.mark.asyncio
    async def test_invalid_url_characters_become_error_result(self) -> None:
        transport = routed_transport(text_response("docs"))
        result = await _resolve(DocRequest(library="a/b\nc"), transport)
        assert isinstance(result, ToolResult)
        assert result.is_error is True
        assert "InvalidURL" in result.text

    @pytest.mark.asyncio
    async def test_configuration_error(self) -> None:
        def broken() -> ServiceConfig:
            raise ConfigurationError("config file not found: /nowhere.json")

        def docs(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        result = await resolve(
            DocRequest(library="a/b"), config_loader=broken, transport=routed_transport(docs)
        )
        assert result.is_error is True
        assert result.text == "Configuration error: config file not found: /nowhere.json"


class TestLocale:
    @pytest.mark.asyncio
    async def test_chinese_messages(self) -> None:
        config = ServiceConfig(base_url=BASE_URL, locale="zh")
        transport = routed_transport(text_response("", 429))
        result = await _resolve(DocRequest(library="a/b"), transport, config)
        assert result.is_error is True
        assert "速率限制" in result.text


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancel_propagates_without_result(self) -> None:
        started = asyncio.Event()

        async def slow(request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200, text="late")

        task = asyncio.create_task(
            _resolve(DocRequest(library="a/b"), httpx.MockTransport(slow))
        )
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


def test_docs_url() -> None:
    assert docs_url(ServiceConfig(base_url=BASE_URL), "a/b") == f"{BASE_URL}/docs/code/a/b"
