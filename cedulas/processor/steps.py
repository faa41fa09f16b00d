from collections.abc import Mapping

from cedulas.acquisition.base import BaseTextExtractor
from cedulas.acquisition.exceptions import OcrError
from cedulas.acquisition.ocr import TesseractOcrEngine
from cedulas.documents.exceptions import DocumentReadError, UnsupportedFormatError
from cedulas.documents.models import DocumentKind
from cedulas.extractors import (
    detect_type,
    extract_caratula,
    extract_caratula_strict,
    extract_expediente,
    extract_juzgado,
)
from cedulas.logging.logger import Log
from cedulas.normalization import normalize_text
from cedulas.processor.models import FailureKind
from cedulas.processor.pipeline import ExtractionContext, PipelineStep


class ExtractTextStep(PipelineStep):
    """Reads the document text with the extractor registered for its kind.

    With ``tolerate_errors`` an unreadable or unsupported file leaves an empty
    text and a recorded failure instead of raising, so later steps can fall
    back to filename heuristics.
    """

    def __init__(
        self,
        extractors: Mapping[DocumentKind, BaseTextExtractor],
        *,
        tolerate_errors: bool = False,
    ) -> None:
        self._extractors = extractors
        self._tolerate_errors = tolerate_errors

    def run(self, context: ExtractionContext) -> ExtractionContext:
        document = context.document
        kind = document.kind
        extractor = self._extractors.get(kind) if kind is not None else None
        try:
            if extractor is None:
                raise UnsupportedFormatError(
                    f"Unsupported file type '{document.extension or document.filename}'"
                )
            context.raw_text = extractor.extract(document.content)
        except UnsupportedFormatError:
            if not self._tolerate_errors:
                raise
            context.failure = FailureKind.UNSUPPORTED_FORMAT
            Log.debug(f"No text backend for '{document.filename}', using filename only")
            return context
        except DocumentReadError as exc:
            if not self._tolerate_errors:
                raise
            context.failure = FailureKind.ACQUISITION
            context.raw_text = ""
            Log.warning(f"Could not read '{document.filename}': {exc}")
            return context

        Log.info(f"Extracted {len(context.raw_text)} chars from '{document.filename}'")
        return context


class OcrFallbackStep(PipelineStep):
    def __init__(
        self,
        ocr_engine: TesseractOcrEngine,
        *,
        min_text_length: int,
        max_pages: int,
    ) -> None:
        self._ocr_engine = ocr_engine
        self._min_text_length = min_text_length
        self._max_pages = max_pages

    def run(self, context: ExtractionContext) -> ExtractionContext:
        native_length = len(context.raw_text.strip())
        if native_length >= self._min_text_length:
            return context

        Log.info(
            f"Native text too short ({native_length} chars) for "
            f"'{context.document.filename}', running OCR on up to {self._max_pages} pages"
        )
        try:
            result = self._ocr_engine.recognize(
                context.document.content,
                self._max_pages,
                deadline=context.deadline,
            )
        except OcrError as exc:
            Log.warning(f"OCR unavailable for '{context.document.filename}': {exc}")
            return context

        if len(result.text.strip()) > native_length:
            context.raw_text = result.text
            context.ocr_result = result
        else:
            Log.info(f"OCR did not improve on native text for '{context.document.filename}'")
        return context


class NormalizeStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.normalized_text = normalize_text(context.raw_text)
        return context


class DetectTypeStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.document_type = detect_type(context.normalized_text, context.document.filename)
        Log.debug(
            f"Type of '{context.document.filename}': "
            f"{context.document_type.value if context.document_type else 'unknown'}"
        )
        return context


class ExtractCaratulaStep(PipelineStep):
    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def run(self, context: ExtractionContext) -> ExtractionContext:
        if self._strict:
            context.caratula = extract_caratula_strict(
                context.normalized_text, context.document_type
            )
        else:
            context.caratula = extract_caratula(context.normalized_text)
        if context.caratula is None:
            Log.debug(f"No caratula found in '{context.document.filename}'")
        return context


class ExtractJuzgadoStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.juzgado = extract_juzgado(context.normalized_text)
        if context.juzgado is None:
            Log.debug(f"No juzgado found in '{context.document.filename}'")
        return context


class ExtractExpedienteStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.expediente = extract_expediente(context.normalized_text)
        if context.expediente is None:
            Log.debug(f"No expediente found in '{context.document.filename}'")
        return context


class BuildPreviewStep(PipelineStep):
    def __init__(self, length: int = 500) -> None:
        self._length = length

    def run(self, context: ExtractionContext) -> ExtractionContext:
        preview = context.raw_text[: self._length].replace("\n", " ").strip()
        context.raw_preview = preview or None
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        Log.error(
            f"Extraction failed for '{context.document.filename}': {context.error_message}"
        )
        return context
