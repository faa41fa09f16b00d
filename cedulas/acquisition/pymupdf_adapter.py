import pymupdf

from cedulas.acquisition.base import BaseTextExtractor
from cedulas.documents.exceptions import DocumentReadError
from cedulas.logging.logger import Log


class PyMuPdfTextExtractor(BaseTextExtractor):
    """Reads only the text layer embedded in the PDF.

    Scanned filings carry no text layer and come back as an empty string;
    recognizing them is left to the OCR fallback of the extractor service.
    """

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                page_count = doc.page_count
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise DocumentReadError(f"pymupdf extraction failed: {exc}") from exc

        text = "\n".join(pages).strip()
        if not text:
            Log.debug(f"No text layer in {page_count}-page PDF")
        return text
