"""
Global exception handlers.

Every error leaves the API as {"error": "<message>"}:
    HTTPException          -> its own status (404 unknown session, 409 closed)
    RequestValidationError -> 500, the body could not be parsed
    StoreError / OSError   -> 500, the data file could not be read or written
    anything else          -> 500
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from store import StoreError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        logger.error("Unreadable request body on %s: %s", request.url.path, exc.errors())
        return error_response(500, "Invalid request body")

    @app.exception_handler(StoreError)
    @app.exception_handler(OSError)
    async def storage_error_handler(request: Request, exc: Exception):
        logger.error("Storage failure on %s: %s", request.url.path, exc, exc_info=exc)
        return error_response(500, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return error_response(500, str(exc))
