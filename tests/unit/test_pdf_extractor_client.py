import asyncio
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import httpx
import pytest

from cedulas.documents.models import SourceDocument
from cedulas.proxy.client import PdfExtractorClient
from cedulas.proxy.exceptions import (
    ExtractorNetworkError,
    ExtractorResponseError,
    ExtractorStatusError,
    ExtractorTimeoutError,
)

_URL = "http://extractor.local/extract"


def _extract(
    handler: Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]],
    timeout_seconds: float = 30,
) -> dict[str, Any]:
    client = PdfExtractorClient(
        url=_URL,
        timeout_seconds=timeout_seconds,
        transport=httpx.MockTransport(handler),  # type: ignore[arg-type]
    )
    document = SourceDocument(content=b"%PDF-fake", filename="cedula.pdf")
    return asyncio.run(client.extract(document))


class TestConfigured:
    def test_configured_with_url(self) -> None:
        assert PdfExtractorClient(url=_URL).configured

    @pytest.mark.parametrize("url", ["", "   "])
    def test_not_configured_without_url(self, url: str) -> None:
        assert not PdfExtractorClient(url=url).configured


class TestExtract:
    def test_posts_multipart_file_once(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"caratula": "A C/ B", "juzgado": None})

        data = _extract(handler)

        assert data == {"caratula": "A C/ B", "juzgado": None}
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert b'name="file"; filename="cedula.pdf"' in seen[0].content
        assert b"%PDF-fake" in seen[0].content

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(ExtractorTimeoutError):
            _extract(handler)

    def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ExtractorNetworkError):
            _extract(handler)

    def test_non_success_status(self) -> None:
        with pytest.raises(ExtractorStatusError) as exc_info:
            _extract(lambda request: httpx.Response(500, text="boom"))
        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "boom"

    def test_invalid_json(self) -> None:
        with pytest.raises(ExtractorResponseError):
            _extract(lambda request: httpx.Response(200, text="<html>"))

    def test_non_object_json(self) -> None:
        with pytest.raises(ExtractorResponseError):
            _extract(lambda request: httpx.Response(200, json=["a"]))


class TestTotalDeadline:
    def test_slow_upstream_times_out_within_deadline(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(10)
            return httpx.Response(200, json={})

        started = time.monotonic()
        with pytest.raises(ExtractorTimeoutError):
            _extract(handler, timeout_seconds=0.3)
        assert time.monotonic() - started < 3

    def test_trickling_body_times_out_within_deadline(self) -> None:
        async def trickle() -> AsyncIterator[bytes]:
            for _ in range(100):
                await asyncio.sleep(0.05)
                yield b" "

        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=trickle())

        started = time.monotonic()
        with pytest.raises(ExtractorTimeoutError):
            _extract(handler, timeout_seconds=0.5)
        assert time.monotonic() - started < 3
