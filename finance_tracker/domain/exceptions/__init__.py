"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .auth import AuthenticationRequiredException
from .store import (
    TransactionStoreException,
    TransactionStoreTimeoutException,
)
from .transaction import (
    InvalidTransactionException,
    NoTransactionsToExportException,
    TransactionNotFoundException,
)

__all__ = [
    "DomainException",
    "AuthenticationRequiredException",
    "InvalidTransactionException",
    "NoTransactionsToExportException",
    "TransactionNotFoundException",
    "TransactionStoreException",
    "TransactionStoreTimeoutException",
]
