from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import AppException
from app.schemas.response import ErrorResponse, ErrorDetail
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging
import uuid

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_SERVER_ERROR",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _error_body(request: Request, request_id: str, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    error_response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=request.url.path,
        request_id=request_id
    )
    return jsonable_encoder(error_response)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    logger.warning(f"[{request_id}] Validation error: {errors}")
    body = _error_body(request, request_id, "VALIDATION_ERROR", "Request validation failed", {"validation_errors": errors})
    return JSONResponse(status_code=422, content=body)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    request_id = _request_id(request)
    code = exc.code if isinstance(exc, AppException) else _get_error_code(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    logger.warning(f"[{request_id}] HTTP {exc.status_code}: {message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, request_id, code, message),
        headers=getattr(exc, "headers", None)
    )

async def global_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, StarletteHTTPException):
        return await http_exception_handler(request, exc)

    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=_error_body(request, request_id, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")
    )
