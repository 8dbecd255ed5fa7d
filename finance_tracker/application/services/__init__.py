"""Application services (use cases)."""

from .dashboard_service import DashboardService
from .export_service import ExportService
from .transaction_service import TransactionService

__all__ = [
    "DashboardService",
    "ExportService",
    "TransactionService",
]
