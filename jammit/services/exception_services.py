"""
Jammit.exception_services
-------------------------
This module provides exception handling services

Key Features:
    - Logs endpoint failures and hides unexpected errors behind a 500
    - Adds envelope-producing exception handlers to the FastAPI app

Dependencies:
    - fastapi
"""

# Basics
from functools import wraps
from logging import ERROR
from traceback import format_exc
# FastAPI
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
# Models
from jammit.models.common_models import CommonResponse
# Services
from jammit.services.logging_services import logger_service as logger


def handle_exceptions(logging_service):
    """Handle FastAPI Endpoint Exceptions."""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException as e:
                logging_service.log(
                    getattr(e, 'log_level', ERROR),
                    f"HTTPException {e.status_code}: {e.detail}")
                raise e
            except Exception as e:
                logging_service.error(
                    (f"Unhandled exception: {format_exc()}"))
                raise HTTPException(
                    status_code=500, detail="Internal Server Error") from e
        return wrapper
    return decorator


def _failure(code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=jsonable_encoder(CommonResponse.failure(code, message)),
        headers=headers)


async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
    """Wrap HTTP errors into the failure envelope."""
    return _failure(exc.status_code, str(exc.detail),
                    headers=getattr(exc, 'headers', None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 in the failure envelope."""
    reasons = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors())
    logger.info(f"Rejected request to '{request.url.path}': {reasons}")
    return _failure(status.HTTP_400_BAD_REQUEST, reasons)


def register_exception_handlers(app: FastAPI):
    """Attach the envelope exception handlers to the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError,
                              validation_exception_handler)
