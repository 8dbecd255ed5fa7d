"""Export service - CSV download of a user's transactions."""

from datetime import date

import structlog

from finance_tracker.domain.exceptions import NoTransactionsToExportException
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.application.dto import CsvExport
from finance_tracker.service.csv_export import export_filename, transactions_to_csv

logger = structlog.get_logger(__name__)


class ExportService:
    """Application service for transaction exports."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    async def export_csv(self, user_id: str, today: date | None = None) -> CsvExport:
        """
        Export all of a user's transactions as CSV, newest first.

        Args:
            user_id: The user's identifier
            today: Date used in the download filename (defaults to today)

        Returns:
            CsvExport with filename, content and row count

        Raises:
            NoTransactionsToExportException: If the user has no transactions
        """
        transactions = (await self._transaction_repo.list_by_user(user_id)).unwrap()

        if not transactions:
            logger.warning("export_empty", user_id=user_id)
            raise NoTransactionsToExportException(user_id)

        export = CsvExport(
            filename=export_filename(today),
            content=transactions_to_csv(transactions),
            row_count=len(transactions),
        )

        logger.info("transactions_exported", user_id=user_id, count=export.row_count)

        return export
