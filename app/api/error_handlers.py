from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": ...} for the chat widget."""
    logger.warning("HTTP %s on %s", exc.status_code, request.url.path, extra={"reason": exc.detail})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    reason = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "invalid value")
    logger.warning("Invalid request on %s", request.url.path, extra={"reason": reason})
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {reason}"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
