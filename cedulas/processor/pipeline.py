from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cedulas.acquisition.ocr import OcrResult
from cedulas.documents.models import SourceDocument
from cedulas.extractors.models import DocumentType, ExpedienteRef
from cedulas.processor.models import FailureKind, FieldResult


@dataclass(slots=True)
class ExtractionContext:
    document: SourceDocument
    raw_text: str = ""
    normalized_text: str = ""
    document_type: DocumentType | None = None
    caratula: str | None = None
    juzgado: str | None = None
    expediente: ExpedienteRef | None = None
    raw_preview: str | None = None
    ocr_result: OcrResult | None = None
    failure: FailureKind | None = None
    error_message: str = ""
    deadline: float | None = None

    @property
    def ocr_used(self) -> bool:
        return self.ocr_result is not None

    def outcome(self, field_name: str) -> FieldResult[Any]:
        value = getattr(self, field_name)
        if value is not None:
            return FieldResult(value=value)
        return FieldResult(failure=self.failure)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
