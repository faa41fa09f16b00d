from dataclasses import dataclass
from enum import Enum

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME_TYPE = "application/pdf"


class DocumentKind(str, Enum):
    """Text acquisition backend selected for a document."""

    DOCX = "docx"
    PDF = "pdf"


_KIND_BY_EXTENSION: dict[str, DocumentKind] = {
    "docx": DocumentKind.DOCX,
    "doc": DocumentKind.DOCX,
    "pdf": DocumentKind.PDF,
}

_KIND_BY_MIME_TYPE: dict[str, DocumentKind] = {
    DOCX_MIME_TYPE: DocumentKind.DOCX,
    PDF_MIME_TYPE: DocumentKind.PDF,
}


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded or downloaded file, consumed once per request."""

    content: bytes
    filename: str
    mime_type: str | None = None

    @property
    def extension(self) -> str:
        name = self.filename.lower()
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    @property
    def kind(self) -> DocumentKind | None:
        """Backend by extension; the MIME type only decides extension-less names."""
        if self.extension:
            return _KIND_BY_EXTENSION.get(self.extension)
        return _KIND_BY_MIME_TYPE.get(self.mime_type or "")
