from cedulas.extractors.caratula import extract_caratula, extract_caratula_strict
from cedulas.extractors.document_type import (
    detect_type,
    detect_type_from_filename,
    detect_type_from_text,
)
from cedulas.extractors.expediente import extract_expediente
from cedulas.extractors.juzgado import extract_juzgado
from cedulas.extractors.models import DocumentType, ExpedienteRef

__all__ = [
    "DocumentType",
    "ExpedienteRef",
    "detect_type",
    "detect_type_from_filename",
    "detect_type_from_text",
    "extract_caratula",
    "extract_caratula_strict",
    "extract_expediente",
    "extract_juzgado",
]
