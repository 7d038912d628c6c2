"""
Response envelope and exception handlers.

Every API response has the shape {"success": bool, "message": str, "data"?: any}.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from foodsupply.config.settings import settings

logger = logging.getLogger(__name__)

_NO_DATA = object()


class Envelope(BaseModel):
    success: bool
    message: str
    data: Optional[Any] = None


def envelope(message: str, data: Any = _NO_DATA, success: bool = True) -> Dict[str, Any]:
    """Build a response envelope; `data` is left out unless given (None is kept as null)."""
    body: Dict[str, Any] = {"success": success, "message": message}
    if data is not _NO_DATA:
        body["data"] = data
    return body


def error_envelope(message: str) -> Dict[str, Any]:
    return envelope(message, success=False)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content=error_envelope("Invalid request body"))


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content=error_envelope("Internal server error"))
    return JSONResponse(status_code=500, content=error_envelope(str(exc) or "Internal server error"))


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
