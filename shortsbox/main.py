# shortsbox/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .catalog import ClipStore, InvalidClipError, catalog_router


logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _invalid_clip_handler(request: Request, exc: InvalidClipError) -> JSONResponse:
    logger.warning("Rejected clip payload: %s", exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only a body that is not valid JSON gets here; query values are strings.
    errors = exc.errors()
    message = "Invalid body"
    if errors and errors[0].get("loc", ("body",))[0] != "body":
        message = "; ".join(str(e.get("msg")) for e in errors)
    return JSONResponse(status_code=400, content={"error": message})


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("API %s %s error", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or "Internal error"})


def create_app(store: Optional[ClipStore] = None) -> FastAPI:
    """Build the API around ``store`` (a fresh seeded store by default)."""
    app = FastAPI(
        title="Shortsbox",
        description=(
            "Backend for a short-video browsing page: lists, searches and "
            "filters a catalogue of clips and accepts new ones."
        ),
        version="1.0.0",
    )
    app.state.store = store if store is not None else ClipStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidClipError, _invalid_clip_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    # Basic route for quick liveness checks
    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(catalog_router)
    return app


app = create_app()
