"""Pydantic schemas for API request/response validation."""

from .dashboard import (
    CategoryShareSchema,
    DashboardSchema,
    MonthlyTotalsSchema,
    TotalsSchema,
)
from .error import ErrorResponseSchema
from .transaction import (
    TransactionCreateSchema,
    TransactionListSchema,
    TransactionSchema,
)

__all__ = [
    "CategoryShareSchema",
    "DashboardSchema",
    "ErrorResponseSchema",
    "MonthlyTotalsSchema",
    "TotalsSchema",
    "TransactionCreateSchema",
    "TransactionListSchema",
    "TransactionSchema",
]
