"""Transaction service - record, list and delete use cases."""

from typing import List

import structlog

from finance_tracker.domain.exceptions import InvalidTransactionException
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.application.dto import (
    CreateTransactionRequest,
    TransactionDTO,
    TransactionListResponse,
)

from .sample_data import build_sample_transactions

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.
    """

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    async def create_transaction(self, request: CreateTransactionRequest) -> TransactionDTO:
        """
        Record a new transaction.

        Args:
            request: The transaction details submitted by the user

        Returns:
            The stored transaction

        Raises:
            InvalidTransactionException: If request validation fails
            TransactionStoreException: If the store rejects the write
        """
        errors = request.validate()
        if errors:
            raise InvalidTransactionException("; ".join(errors))

        transaction = request.to_entity()
        stored = (await self._transaction_repo.create(transaction)).unwrap()

        logger.info(
            "transaction_created",
            user_id=stored.user_id,
            transaction_id=stored.id,
            type=stored.type.value,
            category=stored.category.value,
        )

        return TransactionDTO.from_entity(stored)

    async def list_transactions(
        self,
        user_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> TransactionListResponse:
        """
        List a user's transactions, newest first.

        Args:
            user_id: The user's identifier
            limit: Maximum number of transactions to return
            offset: Number of transactions to skip

        Returns:
            TransactionListResponse with the requested page and total count
        """
        transactions = (await self._transaction_repo.list_by_user(user_id)).unwrap()

        logger.info("transactions_listed", user_id=user_id, count=len(transactions))

        return TransactionListResponse.from_entities(user_id, transactions, limit, offset)

    async def delete_transaction(self, user_id: str, transaction_id: str) -> None:
        """
        Delete one of the user's transactions.

        Raises:
            TransactionNotFoundException: If the user has no such transaction
        """
        (await self._transaction_repo.delete(user_id, transaction_id)).unwrap()

        logger.info("transaction_deleted", user_id=user_id, transaction_id=transaction_id)

    async def seed_sample_data(self, user_id: str) -> List[TransactionDTO]:
        """
        Insert the starter transactions for a user.

        Returns:
            The inserted transactions
        """
        samples = build_sample_transactions(user_id)
        stored = (await self._transaction_repo.create_many(samples)).unwrap()

        logger.info("sample_data_seeded", user_id=user_id, count=len(stored))

        return [TransactionDTO.from_entity(t) for t in stored]
