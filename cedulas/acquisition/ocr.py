"""OCR fallback for PDFs whose text layer is missing or too short.

Pages are rasterized with PyMuPDF and recognized with Tesseract, one page at
a time, up to a page cap and an optional deadline. A page that fails is
skipped so a single bad page does not lose the text of the others.
"""

import io
import time
from dataclasses import dataclass

import pymupdf
import pytesseract
from PIL import Image

from cedulas.acquisition.exceptions import OcrError
from cedulas.logging.logger import Log


@dataclass(frozen=True)
class OcrResult:
    """Recognized text plus page accounting for the debug payload."""

    text: str
    pages_processed: int
    total_pages: int


class TesseractOcrEngine:
    """Rasterizes PDF pages and runs Tesseract on each image."""

    def __init__(
        self,
        *,
        language: str = "spa",
        dpi: int = 150,
        page_timeout_seconds: int = 12,
    ) -> None:
        self._language = language
        self._dpi = dpi
        self._page_timeout_seconds = page_timeout_seconds

    def recognize(
        self,
        content: bytes,
        max_pages: int,
        deadline: float | None = None,
    ) -> OcrResult:
        """OCR the first `max_pages` pages of a PDF.

        When `deadline` (a `time.monotonic()` value) passes, remaining pages
        are left out and each page gets at most the time still available.

        Raises:
            OcrError: if the PDF cannot be opened.
        """
        try:
            doc = pymupdf.open(stream=content, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise OcrError(f"Cannot open PDF for OCR: {exc}") from exc

        texts: list[str] = []
        pages_processed = 0
        with doc:
            total_pages = doc.page_count
            for index in range(min(total_pages, max_pages)):
                timeout = self._page_timeout(deadline)
                if timeout <= 0:
                    Log.warning(f"OCR deadline reached before page {index + 1}, stopping")
                    break
                text = self._recognize_page(doc[index], index, timeout)
                if text is None:
                    continue
                pages_processed += 1
                if text.strip():
                    texts.append(text.strip())

        Log.info(
            f"OCR processed {pages_processed}/{total_pages} pages, "
            f"{sum(len(t) for t in texts)} chars recognized"
        )
        return OcrResult(
            text="\n".join(texts),
            pages_processed=pages_processed,
            total_pages=total_pages,
        )

    def _page_timeout(self, deadline: float | None) -> float:
        if deadline is None:
            return self._page_timeout_seconds
        return min(self._page_timeout_seconds, deadline - time.monotonic())

    def _recognize_page(self, page: pymupdf.Page, index: int, timeout: float) -> str | None:
        try:
            pixmap = page.get_pixmap(dpi=self._dpi)
            image = Image.open(io.BytesIO(pixmap.tobytes("png")))
            return str(
                pytesseract.image_to_string(
                    image,
                    lang=self._language,
                    config="--psm 6",
                    timeout=timeout,
                )
            )
        except (pytesseract.TesseractError, RuntimeError, OSError, ValueError) as exc:
            Log.warning(f"OCR failed on page {index + 1}: {exc}")
            return None
