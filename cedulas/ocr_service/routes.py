import asyncio
import time
from typing import Any

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from cedulas.config.settings import Settings
from cedulas.documents.models import PDF_MIME_TYPE, SourceDocument
from cedulas.logging.logger import Log
from cedulas.processor.pipeline import ExtractionContext
from cedulas.processor.processor import Processor
from cedulas.proxy.mapping import MISSING_FILE_MESSAGE, PDF_ONLY_MESSAGE

router = APIRouter()

TIMEOUT_MESSAGE = (
    "El procesamiento del PDF tardó demasiado. "
    "Intenta con un PDF más pequeño o con texto seleccionable."
)


def _null_fields(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "caratula": None, "juzgado": None},
    )


def build_extract_payload(context: ExtractionContext) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "caratula": context.caratula,
        "juzgado": context.juzgado,
        "raw_preview": context.raw_preview,
    }
    if context.ocr_result is not None:
        payload["debug"] = {
            "ocr_used": True,
            "pages_processed": context.ocr_result.pages_processed,
            "total_pages": context.ocr_result.total_pages,
        }
    return payload


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": "pdf-extractor"}


@router.post("/extract", response_model=None)
async def extract(
    request: Request,
    file: UploadFile | None = File(None),
) -> dict[str, Any] | JSONResponse:
    settings: Settings = request.app.state.settings
    processor: Processor = request.app.state.processor

    if file is None:
        return JSONResponse(status_code=400, content={"error": MISSING_FILE_MESSAGE})
    filename = file.filename or ""
    if not filename.lower().endswith(".pdf"):
        return JSONResponse(status_code=400, content={"error": PDF_ONLY_MESSAGE})

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        return _null_fields(413, f"El archivo supera el máximo de {settings.max_upload_bytes} bytes")

    document = SourceDocument(
        content=content,
        filename=filename,
        mime_type=file.content_type or PDF_MIME_TYPE,
    )
    deadline = time.monotonic() + settings.ocr_endpoint_timeout_seconds
    try:
        context = await asyncio.wait_for(
            run_in_threadpool(processor.process, document, deadline),
            timeout=settings.ocr_endpoint_timeout_seconds,
        )
    except asyncio.TimeoutError:
        Log.error(
            f"Extraction of '{filename}' exceeded {settings.ocr_endpoint_timeout_seconds}s"
        )
        return _null_fields(504, TIMEOUT_MESSAGE)
    except Exception as exc:
        Log.exception(f"Extraction of '{filename}' failed: {exc}")
        return _null_fields(500, f"Error procesando PDF: {exc}")

    return build_extract_payload(context)
