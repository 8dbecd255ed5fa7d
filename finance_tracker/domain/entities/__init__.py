"""Domain Entities - Core business objects."""

from .result import OperationResult
from .transaction import Category, Transaction, TransactionType

__all__ = [
    "Category",
    "OperationResult",
    "Transaction",
    "TransactionType",
]
