"""Extraction endpoints called by the web application.

Upload-time type detection never fails: any problem yields ``{"tipo": null}``
so the form stays usable. The dedicated extractors answer 400 for files they
do not handle and 500 when the file cannot be read. The PDF proxy always
answers with null fields and an ``error`` message when the upstream service
is unavailable.
"""

from typing import Any

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from cedulas.api.services import Services
from cedulas.documents.exceptions import StorageError
from cedulas.documents.models import DocumentKind, SourceDocument
from cedulas.documents.storage_loader import split_storage_path
from cedulas.logging.logger import Log
from cedulas.processor.pipeline import ExtractionContext
from cedulas.processor.processor import Processor
from cedulas.proxy.exceptions import ExtractorClientError
from cedulas.proxy.mapping import (
    MISSING_FILE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    PDF_ONLY_MESSAGE,
    ProxyResponse,
    map_proxy_error,
    map_proxy_payload,
)

router = APIRouter(prefix="/api")

_MISSING_FILE = "Falta el archivo (campo: file)."


def get_services(request: Request) -> Services:
    services: Services = request.app.state.services
    return services


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _to_document(file: UploadFile) -> SourceDocument:
    return SourceDocument(
        content=file.file.read(),
        filename=file.filename or "",
        mime_type=file.content_type,
    )


def _field_value(context: ExtractionContext, name: str) -> Any:
    """Field value for the response; a failure and a plain no-match both give None."""
    outcome = context.outcome(name)
    if outcome.failure is not None:
        Log.warning(f"No {name} for '{context.document.filename}': {outcome.failure.value}")
    elif not outcome.matched:
        Log.debug(f"No {name} matched in '{context.document.filename}'")
    return outcome.value


def _tipo_payload(context: ExtractionContext) -> dict[str, Any]:
    tipo = _field_value(context, "document_type")
    return {"tipo": tipo.value if tipo is not None else None}


def _run(processor: Processor, document: SourceDocument) -> ExtractionContext | JSONResponse:
    try:
        return processor.process(document)
    except Exception as exc:
        return _error(str(exc) or "Error leyendo archivo.", 500)


@router.post("/detect-type-upload")
def detect_type_upload(
    file: UploadFile | None = File(None),
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    if file is None:
        return {"tipo": None}
    try:
        context = services.type_processor.process(_to_document(file))
    except Exception as exc:
        Log.error(f"Type detection failed for upload: {exc}")
        return {"tipo": None}
    return _tipo_payload(context)


@router.get("/detect-type", response_model=None)
def detect_type_stored(
    path: str | None = None,
    services: Services = Depends(get_services),
) -> dict[str, Any] | JSONResponse:
    if not path:
        return _error("Falta el parámetro 'path'.", 400)
    try:
        split_storage_path(path)
    except ValueError:
        return _error("Path inválido.", 400)

    try:
        document = services.storage_loader.load(path)
    except StorageError as exc:
        Log.warning(f"Could not download '{path}': {exc}")
        return {"tipo": None}

    try:
        context = services.type_processor.process(document)
    except Exception as exc:
        return _error(str(exc) or "Error detectando tipo.", 500)
    return _tipo_payload(context)


@router.post("/extract-caratula", response_model=None)
def extract_caratula(
    file: UploadFile | None = File(None),
    services: Services = Depends(get_services),
) -> dict[str, Any] | JSONResponse:
    if file is None:
        return _error(_MISSING_FILE, 400)
    document = _to_document(file)
    if document.kind is not DocumentKind.DOCX:
        return _error("Formato inválido. Solo DOCX.", 400)

    result = _run(services.caratula_processor, document)
    if isinstance(result, JSONResponse):
        return result
    return {"caratula": _field_value(result, "caratula")}


@router.post("/extract-juzgado", response_model=None)
def extract_juzgado(
    file: UploadFile | None = File(None),
    services: Services = Depends(get_services),
) -> dict[str, Any] | JSONResponse:
    if file is None:
        return _error(_MISSING_FILE, 400)
    document = _to_document(file)
    if document.kind is None:
        return _error("Formato inválido. Solo PDF o DOCX.", 400)

    result = _run(services.juzgado_processor, document)
    if isinstance(result, JSONResponse):
        return result
    return {"juzgado": _field_value(result, "juzgado")}


@router.post("/extract-expediente", response_model=None)
def extract_expediente(
    file: UploadFile | None = File(None),
    services: Services = Depends(get_services),
) -> dict[str, Any] | JSONResponse:
    if file is None:
        return _error(_MISSING_FILE, 400)
    document = _to_document(file)
    if document.kind is None:
        return _error("Formato inválido. Solo DOCX y PDF.", 400)

    result = _run(services.expediente_processor, document)
    if isinstance(result, JSONResponse):
        return result
    ref = _field_value(result, "expediente")
    return {
        "expediente": ref.expediente if ref else None,
        "numero": ref.numero if ref else None,
        "anio": ref.anio if ref else None,
    }


def _proxy_json(response: ProxyResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.to_payload())


@router.post("/extract-pdf")
async def extract_pdf(
    file: UploadFile | None = File(None),
    services: Services = Depends(get_services),
) -> JSONResponse:
    client = services.pdf_extractor_client
    if not client.configured:
        Log.error("PDF_EXTRACTOR_URL is not configured")
        return _proxy_json(ProxyResponse(status_code=503, error=NOT_CONFIGURED_MESSAGE))

    try:
        if file is None:
            return _proxy_json(ProxyResponse(status_code=400, error=MISSING_FILE_MESSAGE))
        document = SourceDocument(
            content=await file.read(),
            filename=file.filename or "",
            mime_type=file.content_type,
        )
        if document.extension != "pdf":
            return _proxy_json(ProxyResponse(status_code=400, error=PDF_ONLY_MESSAGE))

        try:
            data = await client.extract(document)
        except ExtractorClientError as exc:
            response = map_proxy_error(exc)
            kind = response.failure.value if response.failure else "error"
            Log.error(f"PDF extractor call failed for '{document.filename}' ({kind}): {exc}")
            return _proxy_json(response)
        return _proxy_json(map_proxy_payload(data))
    except Exception as exc:
        Log.exception(f"Unexpected error in /api/extract-pdf: {exc}")
        return _proxy_json(map_proxy_error(exc))
