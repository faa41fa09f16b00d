import re

from cedulas.extractors.models import DocumentType
from cedulas.normalization import normalize_for_type_detection

_CEDULA_WINDOW = 500
_OFICIO_WINDOW = 200

_CEDULA_RE = re.compile(r"\bCEDULA\b", re.IGNORECASE)
_CEDULA_NOTIFICACION_RE = re.compile(r"\bCEDULA\s+DE\s+NOTIFICACION\b", re.IGNORECASE)
_OFICIO_AT_START_RE = re.compile(r"^\s*OFICIO\b", re.IGNORECASE)
_OFICIO_RE = re.compile(r"\bOFICIO\b", re.IGNORECASE)

_FILENAME_OFICIO_RE = re.compile("OFICIO", re.IGNORECASE)
_FILENAME_CEDULA_RE = re.compile("CEDULA", re.IGNORECASE)


def detect_type_from_text(text: str) -> DocumentType | None:
    """Classify by content. OFICIO wins whenever both words are present."""
    normalized = normalize_for_type_detection(text)
    if not normalized:
        return None

    head = normalized[:_CEDULA_WINDOW]
    has_cedula = bool(_CEDULA_RE.search(head) or _CEDULA_NOTIFICACION_RE.search(head))
    has_oficio = bool(
        _OFICIO_AT_START_RE.search(normalized)
        or _OFICIO_RE.search(normalized[:_OFICIO_WINDOW])
    )

    if has_oficio:
        return DocumentType.OFICIO
    if has_cedula:
        return DocumentType.CEDULA
    return None


def detect_type_from_filename(filename: str) -> DocumentType | None:
    """Classify by substring of the filename, with the same OFICIO priority."""
    name = (filename or "").upper()
    if _FILENAME_OFICIO_RE.search(name):
        return DocumentType.OFICIO
    if _FILENAME_CEDULA_RE.search(name):
        return DocumentType.CEDULA
    return None


def detect_type(text: str, filename: str) -> DocumentType | None:
    """Use the text when there is any, otherwise fall back to the filename."""
    if normalize_for_type_detection(text):
        return detect_type_from_text(text)
    return detect_type_from_filename(filename)
