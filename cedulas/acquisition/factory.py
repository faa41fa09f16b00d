from collections.abc import Iterable
from typing import ClassVar

from cedulas.acquisition.base import BaseTextExtractor
from cedulas.acquisition.docx_adapter import DocxTextExtractor
from cedulas.acquisition.pdfplumber_adapter import PdfPlumberTextExtractor
from cedulas.acquisition.pymupdf_adapter import PyMuPdfTextExtractor
from cedulas.documents.models import DocumentKind


class TextExtractorFactory:
    """Creates text extractors per document kind and PDF engine."""

    PDF_ENGINES: ClassVar[dict[str, type[BaseTextExtractor]]] = {
        "pdfplumber": PdfPlumberTextExtractor,
        "pymupdf": PyMuPdfTextExtractor,
    }

    @classmethod
    def create(cls, kind: DocumentKind, pdf_engine: str = "pdfplumber") -> BaseTextExtractor:
        if kind is DocumentKind.DOCX:
            return DocxTextExtractor()
        engine = pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()

    @classmethod
    def create_for(
        cls,
        kinds: Iterable[DocumentKind],
        pdf_engine: str = "pdfplumber",
    ) -> dict[DocumentKind, BaseTextExtractor]:
        """Build the extractor table a flow accepts; other kinds are unsupported."""
        return {kind: cls.create(kind, pdf_engine) for kind in kinds}
