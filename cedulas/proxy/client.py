import asyncio
from typing import Any

import httpx

from cedulas.documents.models import PDF_MIME_TYPE, SourceDocument
from cedulas.proxy.exceptions import (
    ExtractorNetworkError,
    ExtractorResponseError,
    ExtractorStatusError,
    ExtractorTimeoutError,
)


class PdfExtractorClient:
    """Forwards a PDF to the extractor service; exactly one attempt per call."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._url.strip())

    async def extract(self, document: SourceDocument) -> dict[str, Any]:
        """POST the file as multipart field ``file`` and return the JSON body.

        Raises:
            ExtractorTimeoutError: when the whole call outlasts the timeout,
                however the upstream spreads out its answer.
            ExtractorNetworkError: when the service cannot be reached.
            ExtractorStatusError: on a non-2xx answer.
            ExtractorResponseError: when the body is not a JSON object.
        """
        files = {
            "file": (
                document.filename,
                document.content,
                document.mime_type or PDF_MIME_TYPE,
            )
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(
                    client.post(self._url, files=files),
                    timeout=self._timeout_seconds,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise ExtractorTimeoutError(
                f"PDF extractor timed out after {self._timeout_seconds}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractorNetworkError(f"PDF extractor network error: {exc}") from exc

        if not response.is_success:
            raise ExtractorStatusError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise ExtractorResponseError(f"Invalid JSON from PDF extractor: {exc}") from exc
        if not isinstance(data, dict):
            raise ExtractorResponseError("PDF extractor response must be an object")
        return data
