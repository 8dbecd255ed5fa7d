"""Transaction errors."""

from .base import DomainException


class TransactionNotFoundException(DomainException):
    """No transaction with this ID belongs to the current user."""

    code = "TRANSACTION_NOT_FOUND"

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class InvalidTransactionException(DomainException):
    """A transaction failed business validation."""

    code = "INVALID_TRANSACTION"


class NoTransactionsToExportException(DomainException):
    """An export was requested for an empty transaction list."""

    code = "NO_TRANSACTIONS"

    def __init__(self, user_id: str):
        super().__init__("No data to export. Add some transactions first.")
        self.user_id = user_id
