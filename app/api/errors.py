"""Traducción de errores del dominio y de FastAPI a respuestas {"error": ...}."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def request_error_message(exc: RequestValidationError) -> str:
    """Mensaje para el primer parámetro que FastAPI no pudo interpretar."""
    for error in exc.errors():
        loc = error.get("loc", ())
        if not loc:
            continue
        if loc[0] == "path":
            return "Invalid ID"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Item inválido en %s %s: %s", request.method, request.url.path, exc.message)
        return error_response(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Error de almacenamiento en %s %s: %r", request.method, request.url.path, exc.__cause__)
        return error_response(500, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = request_error_message(exc)
        logger.info("Petición rechazada en %s %s: %s", request.method, request.url.path, message)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))
