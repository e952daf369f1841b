"""
Maps service errors to HTTP responses.

Every error body has the shape {"timestamp", "message", "path"}.
"""

from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from logging_config import get_logger
from services.exceptions import (
    ExternalServiceError,
    TransactionNotFoundException,
    TransferFailedException,
    ValidationError,
)

logger = get_logger("transaction_service.api.errors")

STATUS_BY_ERROR = {
    TransactionNotFoundException: 404,
    TransferFailedException: 422,
    ExternalServiceError: 503,
    ValidationError: 400,
}


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "message": message,
            "path": request.url.path,
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def handle_service_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for error_cls, code in STATUS_BY_ERROR.items() if isinstance(exc, error_cls)),
        500,
    )
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc)
    return error_response(request, status_code, str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _format_validation_errors(exc)
    logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
    return error_response(request, 400, message)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, 500, str(exc) or exc.__class__.__name__)


def register_exception_handlers(app: FastAPI) -> None:
    for error_cls in STATUS_BY_ERROR:
        app.add_exception_handler(error_cls, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    # PersistenceError and anything unclassified
    app.add_exception_handler(Exception, handle_unexpected)
