import io
from collections.abc import Iterator

import docx
from docx.document import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from cedulas.acquisition.base import BaseTextExtractor
from cedulas.documents.exceptions import DocumentReadError


def _iter_block_texts(document: Document) -> Iterator[str]:
    """Yield paragraph texts in body order, descending into table cells."""
    for child in document.element.body.iterchildren():
        tag = child.tag.lower()
        if tag.endswith("}p"):
            yield Paragraph(child, document).text
        elif tag.endswith("}tbl"):
            yield from _iter_table_texts(Table(child, document))


def _iter_table_texts(table: Table) -> Iterator[str]:
    for row in table.rows:
        for cell in row.cells:
            for paragraph in cell.paragraphs:
                yield paragraph.text


class DocxTextExtractor(BaseTextExtractor):
    """Extracts raw paragraph text from a DOCX package using python-docx.

    Headers and footers live in separate parts of the package and are not read.
    """

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
            return "\n".join(_iter_block_texts(document))
        except Exception as exc:
            raise DocumentReadError(f"DOCX extraction failed: {exc}") from exc
