"""Single boundary mapping from extractor-service outcomes to the wire shape.

Every outcome, including every error, becomes ``{caratula, juzgado}`` with
nullable values plus an optional ``raw_preview`` or ``error``, so the upload
form can always continue with manual entry.
"""

from dataclasses import dataclass
from typing import Any

from cedulas.processor.models import FailureKind
from cedulas.proxy.exceptions import (
    ExtractorClientError,
    ExtractorNetworkError,
    ExtractorResponseError,
    ExtractorStatusError,
    ExtractorTimeoutError,
)

MANUAL_ENTRY_HINT = "Puedes completar los campos manualmente."

NOT_CONFIGURED_MESSAGE = (
    "El servicio de extracción de PDF no está configurado. "
    "Configura PDF_EXTRACTOR_URL en las variables de entorno. " + MANUAL_ENTRY_HINT
)
MISSING_FILE_MESSAGE = "Falta el archivo (campo: file)"
PDF_ONLY_MESSAGE = "Solo se aceptan archivos PDF"


@dataclass(frozen=True)
class ProxyResponse:
    status_code: int = 200
    caratula: str | None = None
    juzgado: str | None = None
    raw_preview: str | None = None
    error: str | None = None
    failure: FailureKind | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"caratula": self.caratula, "juzgado": self.juzgado}
        if self.raw_preview:
            payload["raw_preview"] = self.raw_preview
        if self.error:
            payload["error"] = self.error
        return payload


def _string_or_none(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def map_proxy_payload(data: dict[str, Any]) -> ProxyResponse:
    return ProxyResponse(
        caratula=_string_or_none(data.get("caratula")),
        juzgado=_string_or_none(data.get("juzgado")),
        raw_preview=_string_or_none(data.get("raw_preview")),
    )


def map_proxy_error(exc: Exception) -> ProxyResponse:
    if isinstance(exc, ExtractorTimeoutError):
        return ProxyResponse(
            status_code=504,
            error="El servicio de extracción de PDF tardó demasiado en responder. "
            + MANUAL_ENTRY_HINT,
            failure=FailureKind.UPSTREAM_TIMEOUT,
        )
    if isinstance(exc, ExtractorNetworkError):
        return ProxyResponse(
            status_code=502,
            error="No se pudo conectar al servicio de extracción de PDF. "
            "Verifica que el microservicio esté corriendo y que PDF_EXTRACTOR_URL "
            "esté correctamente configurada. " + MANUAL_ENTRY_HINT,
            failure=FailureKind.UPSTREAM_ERROR,
        )
    if isinstance(exc, ExtractorStatusError):
        return ProxyResponse(
            error=f"El servicio de extracción respondió con error ({exc.status_code}). "
            + MANUAL_ENTRY_HINT,
            failure=FailureKind.UPSTREAM_ERROR,
        )
    if isinstance(exc, (ExtractorResponseError, ExtractorClientError)):
        return ProxyResponse(
            error="Error procesando respuesta del servicio.",
            failure=FailureKind.UPSTREAM_ERROR,
        )
    return ProxyResponse(
        error=str(exc) or "Error inesperado procesando PDF.",
        failure=FailureKind.UPSTREAM_ERROR,
    )
