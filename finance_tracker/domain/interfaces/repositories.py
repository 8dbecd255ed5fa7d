"""Repository interfaces for transaction persistence."""

from abc import ABC, abstractmethod
from typing import List

from finance_tracker.domain.entities import OperationResult, Transaction


class TransactionRepository(ABC):
    """
    Abstract repository for Transaction persistence.

    Implementations may use a SQL database, a hosted REST backend, etc.
    Expected backend failures are returned as failed results rather than
    raised.
    """

    @abstractmethod
    async def create(self, transaction: Transaction) -> OperationResult[Transaction]:
        """
        Persist a new transaction.

        Args:
            transaction: The transaction to store

        Returns:
            Result carrying the stored transaction, or a
            TransactionStoreException on failure
        """
        ...

    @abstractmethod
    async def create_many(
        self,
        transactions: List[Transaction],
    ) -> OperationResult[List[Transaction]]:
        """
        Persist several transactions in one operation.

        Args:
            transactions: The transactions to store

        Returns:
            Result carrying the stored transactions
        """
        ...

    @abstractmethod
    async def delete(self, user_id: str, transaction_id: str) -> OperationResult[bool]:
        """
        Delete a transaction owned by a user.

        Args:
            user_id: The owner's identifier
            transaction_id: The transaction's identifier

        Returns:
            Result carrying True on deletion, or a
            TransactionNotFoundException if no such row belongs to the user
        """
        ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> OperationResult[List[Transaction]]:
        """
        Retrieve every transaction for a user.

        Args:
            user_id: The owner's identifier

        Returns:
            Result carrying transactions ordered by date descending
        """
        ...
