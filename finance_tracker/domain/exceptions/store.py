"""Errors raised by transaction store adapters."""

from .base import DomainException


class TransactionStoreException(DomainException):
    """The transaction store rejected a request or could not be reached."""

    code = "TRANSACTION_STORE_ERROR"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransactionStoreTimeoutException(TransactionStoreException):
    code = "TRANSACTION_STORE_TIMEOUT"

    def __init__(self):
        super().__init__("Transaction store request timed out")
