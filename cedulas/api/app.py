from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cedulas.api.routes import router
from cedulas.api.services import Services, build_services
from cedulas.config.settings import Settings
from cedulas.logging.logger import Log


def create_app(
    settings: Settings | None = None,
    services: Services | None = None,
) -> FastAPI:
    """Build the extraction API with its shared services."""
    if settings is None:
        settings = Settings()
    app = FastAPI(title="Cedulas extraction API", version="1.0.0")
    app.state.settings = settings
    app.state.services = services if services is not None else build_services(settings)
    app.include_router(router)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return app
