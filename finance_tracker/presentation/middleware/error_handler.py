"""Error handling middleware and exception handlers."""

from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from finance_tracker.domain.exceptions import (
    AuthenticationRequiredException,
    DomainException,
    InvalidTransactionException,
    NoTransactionsToExportException,
    TransactionNotFoundException,
    TransactionStoreException,
    TransactionStoreTimeoutException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

# Checked in order; the first matching class wins
STATUS_BY_EXCEPTION: Dict[Type[DomainException], int] = {
    TransactionNotFoundException: 404,
    AuthenticationRequiredException: 401,
    InvalidTransactionException: 400,
    NoTransactionsToExportException: 400,
    TransactionStoreTimeoutException: 503,
    TransactionStoreException: 503,
}

STORE_UNAVAILABLE_MESSAGES = {
    TransactionStoreTimeoutException: "Service temporarily unavailable. Please try again.",
    TransactionStoreException: "Unable to process request. Please try again later.",
}


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception; unlisted ones are client errors."""
    for exc_type, status_code in STATUS_BY_EXCEPTION.items():
        if isinstance(exc, exc_type):
            return status_code
    return 400


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(TransactionStoreException)
    async def store_error_handler(
        request: Request,
        exc: TransactionStoreException,
    ) -> JSONResponse:
        """Store failures become 503 without leaking backend details."""
        logger.error(
            "transaction_store_unavailable",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
        )
        message = next(
            text
            for exc_type, text in STORE_UNAVAILABLE_MESSAGES.items()
            if isinstance(exc, exc_type)
        )
        return _error_response(503, exc.code, message)

    @app.exception_handler(AuthenticationRequiredException)
    async def authentication_required_handler(
        request: Request,
        exc: AuthenticationRequiredException,
    ) -> JSONResponse:
        response = _error_response(401, exc.code, exc.message)
        response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle not-found, validation and other domain errors."""
        status_code = status_for(exc)
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
            status_code=status_code,
        )
        return _error_response(status_code, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
