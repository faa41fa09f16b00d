import io

import pdfplumber

from cedulas.acquisition.base import BaseTextExtractor
from cedulas.documents.exceptions import DocumentReadError


class PdfPlumberTextExtractor(BaseTextExtractor):
    """Joins each page's positioned words with spaces, one line per page."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [
                    " ".join(word["text"] for word in page.extract_words()) + "\n"
                    for page in pdf.pages
                ]
            return "".join(pages)
        except Exception as exc:
            raise DocumentReadError(f"pdfplumber extraction failed: {exc}") from exc
