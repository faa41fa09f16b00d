import io
from collections.abc import Callable

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def build_pdf(pages: list[list[str]]) -> bytes:
    """Render each inner list as the lines of one PDF page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


def build_docx(paragraphs: list[str], table_rows: list[list[str]] | None = None) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> Callable[[list[list[str]]], bytes]:
    return build_pdf


@pytest.fixture()
def make_docx() -> Callable[..., bytes]:
    return build_docx


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return build_pdf([["TRIBUNAL JUZGADO CIVIL 17 - Sito en Talcahuano 550"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return build_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return build_pdf([[]])


@pytest.fixture()
def cedula_docx_bytes() -> bytes:
    return build_docx(
        [
            "CEDULA DE NOTIFICACION",
            "Expediente caratulado: “PEREZ C/ GOMEZ S/ DAÑOS”",
            "que tramita ante el Juzgado Nacional en lo Civil N° 17, sito en Talcahuano 550.",
            "Expte N° 105662/2025",
        ]
    )
