from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cedulas.config.settings import Settings
from cedulas.logging.logger import Log
from cedulas.ocr_service.routes import router
from cedulas.processor.processor import Processor, build_ocr_processor


def create_ocr_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the PDF extractor service (native text, OCR fallback, fields)."""
    if settings is None:
        settings = Settings()
    app = FastAPI(title="PDF extractor service", version="1.0.0")
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_ocr_processor(settings)
    app.include_router(router)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Error interno del servidor: {exc}"},
        )

    return app
