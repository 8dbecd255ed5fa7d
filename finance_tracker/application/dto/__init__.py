"""Data Transfer Objects for application layer."""

from .dashboard import (
    CategoryShareDTO,
    DashboardResponse,
    MonthlyTotalsDTO,
    TotalsDTO,
)
from .transaction import (
    CreateTransactionRequest,
    CsvExport,
    TransactionDTO,
    TransactionListResponse,
)

__all__ = [
    "CategoryShareDTO",
    "CreateTransactionRequest",
    "CsvExport",
    "DashboardResponse",
    "MonthlyTotalsDTO",
    "TotalsDTO",
    "TransactionDTO",
    "TransactionListResponse",
]
