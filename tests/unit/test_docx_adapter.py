from collections.abc import Callable

import pytest

from cedulas.acquisition.docx_adapter import DocxTextExtractor
from cedulas.documents.exceptions import DocumentReadError


class TestDocxTextExtractor:
    def test_extract_returns_paragraphs_in_order(self, make_docx: Callable[..., bytes]) -> None:
        content = make_docx(["Primera linea", "Segunda linea"])
        result = DocxTextExtractor().extract(content)
        assert result.index("Primera linea") < result.index("Segunda linea")
        assert "\n" in result

    def test_extract_includes_table_cells(self, make_docx: Callable[..., bytes]) -> None:
        content = make_docx(["Encabezado"], table_rows=[["Expte N° 123/2020", "Juzgado"]])
        result = DocxTextExtractor().extract(content)
        assert "Expte N° 123/2020" in result
        assert result.index("Encabezado") < result.index("Expte N° 123/2020")

    def test_extract_fixture_document(self, cedula_docx_bytes: bytes) -> None:
        result = DocxTextExtractor().extract(cedula_docx_bytes)
        assert result.startswith("CEDULA DE NOTIFICACION")
        assert "Expte N° 105662/2025" in result

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(DocumentReadError):
            DocxTextExtractor().extract(b"not a docx")
