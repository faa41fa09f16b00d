import uvicorn

from cedulas.api.app import create_app
from cedulas.config.settings import Settings
from cedulas.logging.logger import Log
from cedulas.ocr_service.app import create_ocr_app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the extraction API."""
    settings = Settings()
    Log.configure(settings.log_level, service="api")
    Log.info(f"Starting extraction API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


def main_ocr_service() -> None:
    """Entry point for the standalone PDF extractor service."""
    settings = Settings()
    Log.configure(settings.log_level, service="pdf-extractor")
    Log.info(
        f"Starting PDF extractor on port {settings.ocr_service_port} "
        f"(OCR up to {settings.ocr_max_pages} pages, lang={settings.ocr_language})"
    )
    uvicorn.run(
        create_ocr_app(settings),
        host=settings.api_host,
        port=settings.ocr_service_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
