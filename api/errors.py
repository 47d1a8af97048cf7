"""Error responses for the HTTP layer"""

from typing import Any, Dict, Iterable, List
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.config import settings

logger = logging.getLogger(__name__)


def error_details(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe loc/msg/type entries"""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
            "type": str(err.get("type", "")),
        }
        for err in errors
    ]


def bad_request(message: str, errors: Iterable[Dict[str, Any]] = ()) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"message": message, "errors": error_details(errors)},
    )


def internal_error(message: str, exc: Exception) -> HTTPException:
    """500 response; exception text is only exposed in DEBUG"""
    detail = f"{message}: {exc}" if settings.DEBUG else message
    return HTTPException(status_code=500, detail=detail)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests are 400, not FastAPI's default 422"""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": {"message": "Invalid request", "errors": error_details(exc.errors())}},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    detail = str(exc) if settings.DEBUG else "Internal Server Error"
    return JSONResponse(status_code=500, content={"detail": detail})
