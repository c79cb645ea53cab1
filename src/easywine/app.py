from __future__ import annotations

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from easywine.shared.config.settings import settings
from easywine.shared.logging.logger import setup_logging

from easywine.shared.api.health import router as health_router
from easywine.features.pairing.api.routes import router as pairing_router

log = logging.getLogger("app")

METHOD_NOT_ALLOWED = "Método não permitido."
INVALID_REQUEST = "Requisição inválida."
INTERNAL_ERROR = "Erro interno."


def _split_or_star(value: str | None) -> list[str]:
    if value and value != "*":
        return [v.strip() for v in value.split(",") if v.strip()]
    return ["*"]


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        message = METHOD_NOT_ALLOWED if exc.status_code == 405 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        log.warning("invalid request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"error": INVALID_REQUEST})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        log.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="EasyWine", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_or_star(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split_or_star(settings.CORS_ALLOW_METHODS),
        allow_headers=_split_or_star(settings.CORS_ALLOW_HEADERS),
    )

    _install_error_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(pairing_router, prefix="/api")

    @app.on_event("startup")
    async def _on_startup():
        if not settings.GOOGLE_API_KEY:
            log.warning("GOOGLE_API_KEY is empty; pairing requests will fail until it is set")
        log.info("Startup complete. model=%s", settings.GEMINI_MODEL)

    return app

# Uvicorn/Gunicorn entry point
app = create_app()
