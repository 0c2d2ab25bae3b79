"""FastAPI application relaying conversions and running local PDF transforms."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pdfrelay import __version__
from pdfrelay.core.utils import configure_logging
from pdfrelay.engine import PdfTransformEngine
from pdfrelay.exceptions import PdfRelayError
from pdfrelay.render import GotenbergClient, Renderer
from pdfrelay.settings import Settings

from .dependencies import get_engine, get_renderer
from .routes import convert_router, pdf_router

LOGGER = logging.getLogger("pdfrelay.api")

API_PREFIX = "/api"

SUPPORTED_FORMATS = {
    "success": True,
    "formats": {
        "office": {
            "word": ["doc", "docx", "odt"],
            "excel": ["xls", "xlsx", "ods"],
            "powerpoint": ["ppt", "pptx", "odp"],
        },
        "images": ["jpg", "jpeg", "png", "webp", "tiff", "gif", "bmp"],
        "web": ["html", "url", "markdown"],
        "pdf": ["pdf", "pdfa"],
    },
    "conversions": {
        "office-to-pdf": "Convert Word, Excel, PowerPoint to PDF",
        "web-to-pdf": "Convert HTML, URLs, Markdown to PDF",
        "images-to-pdf": "Combine images into PDF",
        "pdf-utilities": "Merge, split, compress, rotate, encrypt, decrypt, watermark PDFs",
    },
}


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid {location}: {message}" if location else f"Invalid request: {message}"


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PdfRelayError)
    async def _relay_error(request: Request, exc: PdfRelayError) -> JSONResponse:
        if exc.status_code >= 500:
            LOGGER.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return _error_response(exc.status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(400, _describe_validation_error(exc))

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, str(exc) or exc.__class__.__name__)


def create_app(
    settings: Settings | None = None,
    renderer: Renderer | None = None,
    engine: PdfTransformEngine | None = None,
) -> FastAPI:
    """Build the API with its services constructed once and kept on ``app.state``."""

    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="pdfrelay API", version=__version__)
    app.state.settings = settings
    app.state.renderer = renderer or GotenbergClient(settings.gotenberg_url, timeout=settings.render_timeout)
    app.state.engine = engine or PdfTransformEngine()

    _register_exception_handlers(app)
    app.include_router(convert_router, prefix=API_PREFIX)
    app.include_router(pdf_router, prefix=API_PREFIX)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        """Lightweight liveness endpoint for keep-alive monitors."""
        return {"status": "ok", "timestamp": _timestamp()}

    @app.get(f"{API_PREFIX}/health")
    async def health(renderer: Renderer = Depends(get_renderer)) -> dict[str, object]:
        """Report API liveness and whether the renderer is reachable."""

        try:
            renderer_healthy = await renderer.health_check()
        except Exception:
            LOGGER.exception("Renderer health check raised")
            renderer_healthy = False
        return {
            "status": "ok",
            "timestamp": _timestamp(),
            "services": {
                "api": "healthy",
                "gotenberg": "healthy" if renderer_healthy else "unavailable",
            },
        }

    @app.get(f"{API_PREFIX}/formats")
    async def formats(engine: PdfTransformEngine = Depends(get_engine)) -> dict[str, object]:
        return {**SUPPORTED_FORMATS, "transforms": engine.tools.names()}

    LOGGER.info("pdfrelay API ready (renderer at %s)", settings.gotenberg_url)
    return app


app = create_app()

__all__ = ["app", "create_app"]
