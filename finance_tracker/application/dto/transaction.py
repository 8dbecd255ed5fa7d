"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from finance_tracker.domain.entities import Category, Transaction, TransactionType


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Input data for recording a transaction."""
    user_id: str
    amount: Decimal
    category: Category
    type: TransactionType
    date: date
    description: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.user_id or not self.user_id.strip():
            errors.append("user_id is required")

        if not self.amount.is_finite():
            errors.append("amount must be a finite number")
        elif self.amount < 0:
            errors.append("amount must not be negative")
        elif self.amount.as_tuple().exponent < -2:
            errors.append("amount must have at most two decimal places")

        return errors

    def to_entity(self) -> Transaction:
        description = self.description.strip() if self.description else None
        return Transaction(
            user_id=self.user_id,
            amount=self.amount,
            category=self.category,
            type=self.type,
            date=self.date,
            description=description or None,
        )


@dataclass(frozen=True)
class TransactionDTO:
    """A single transaction in responses."""

    id: str
    amount: Decimal
    category: str
    type: str
    date: str
    description: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionDTO":
        return cls(
            id=transaction.id,
            amount=transaction.amount,
            category=transaction.category.value,
            type=transaction.type.value,
            date=transaction.date.isoformat(),
            description=transaction.description,
            created_at=transaction.created_at.isoformat() + "Z",
        )


@dataclass(frozen=True)
class TransactionListResponse:
    """A page of a user's transactions, newest first."""

    user_id: str
    transactions: List[TransactionDTO]
    total_count: int

    @classmethod
    def from_entities(
        cls,
        user_id: str,
        transactions: List[Transaction],
        limit: int,
        offset: int = 0,
    ) -> "TransactionListResponse":
        page = transactions[offset:offset + limit]
        return cls(
            user_id=user_id,
            transactions=[TransactionDTO.from_entity(t) for t in page],
            total_count=len(transactions),
        )


@dataclass(frozen=True)
class CsvExport:
    """Serialized CSV export ready for download."""

    filename: str
    content: str
    row_count: int
