from cedulas.acquisition.factory import TextExtractorFactory
from cedulas.acquisition.ocr import TesseractOcrEngine
from cedulas.config.settings import Settings
from cedulas.documents.models import DocumentKind, SourceDocument
from cedulas.logging.logger import Log
from cedulas.processor.pipeline import ExtractionContext, PipelineStep
from cedulas.processor.steps import (
    BuildPreviewStep,
    DetectTypeStep,
    ExtractCaratulaStep,
    ExtractExpedienteStep,
    ExtractJuzgadoStep,
    ExtractTextStep,
    LogFailureStep,
    NormalizeStep,
    OcrFallbackStep,
)


class Processor:
    """Runs extraction steps in order over one document.

    On failure the error is recorded on the context, the failure step runs and
    the exception propagates to the caller, which owns the response mapping.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep | None = None,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(
        self,
        document: SourceDocument,
        deadline: float | None = None,
    ) -> ExtractionContext:
        """Run every step; ``deadline`` is a ``time.monotonic()`` value that
        long-running steps stop at."""
        Log.info(f"Processing '{document.filename}' ({len(document.content)} bytes)")
        context = ExtractionContext(document=document, deadline=deadline)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            if self._failed_step is not None:
                self._failed_step.run(context)
            raise
        return context


_ALL_KINDS = (DocumentKind.DOCX, DocumentKind.PDF)


def build_type_processor(settings: Settings) -> Processor:
    """Type detection never fails: unreadable files fall back to the filename."""
    extractors = TextExtractorFactory.create_for(_ALL_KINDS, settings.pdf_engine)
    return Processor(
        steps=[
            ExtractTextStep(extractors, tolerate_errors=True),
            NormalizeStep(),
            DetectTypeStep(),
        ],
        failed_step=LogFailureStep(),
    )


def build_caratula_processor(settings: Settings) -> Processor:
    """DOCX only; no setting applies."""
    extractors = TextExtractorFactory.create_for([DocumentKind.DOCX])
    return Processor(
        steps=[ExtractTextStep(extractors), NormalizeStep(), ExtractCaratulaStep()],
        failed_step=LogFailureStep(),
    )


def build_juzgado_processor(settings: Settings) -> Processor:
    extractors = TextExtractorFactory.create_for(_ALL_KINDS, settings.pdf_engine)
    return Processor(
        steps=[ExtractTextStep(extractors), NormalizeStep(), ExtractJuzgadoStep()],
        failed_step=LogFailureStep(),
    )


def build_expediente_processor(settings: Settings) -> Processor:
    """PDFs are always read through their native text layer here."""
    extractors = TextExtractorFactory.create_for(_ALL_KINDS, "pymupdf")
    return Processor(
        steps=[ExtractTextStep(extractors), NormalizeStep(), ExtractExpedienteStep()],
        failed_step=LogFailureStep(),
    )


def build_ocr_processor(
    settings: Settings,
    ocr_engine: TesseractOcrEngine | None = None,
) -> Processor:
    """Native text layer, OCR fallback, then server-side caratula/juzgado."""
    if ocr_engine is None:
        ocr_engine = TesseractOcrEngine(
            language=settings.ocr_language,
            dpi=settings.ocr_dpi,
            page_timeout_seconds=settings.ocr_page_timeout_seconds,
        )
    extractors = TextExtractorFactory.create_for([DocumentKind.PDF], "pymupdf")
    return Processor(
        steps=[
            ExtractTextStep(extractors),
            OcrFallbackStep(
                ocr_engine,
                min_text_length=settings.ocr_min_text_length,
                max_pages=settings.ocr_max_pages,
            ),
            NormalizeStep(),
            DetectTypeStep(),
            ExtractCaratulaStep(strict=True),
            ExtractJuzgadoStep(),
            BuildPreviewStep(settings.raw_preview_length),
        ],
        failed_step=LogFailureStep(),
    )
