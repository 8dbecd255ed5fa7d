"""Repository implementations."""

from .http_transaction_repository import HttpTransactionRepository
from .transaction_repository import PostgresTransactionRepository

__all__ = [
    "HttpTransactionRepository",
    "PostgresTransactionRepository",
]
