"""Transaction entity representing a recorded income or expense."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "Income"
    EXPENSE = "Expense"


class Category(str, Enum):
    """Closed set of transaction categories."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    SALARY = "Salary"
    INVESTMENT = "Investment"
    BUSINESS = "Business"
    OTHER = "Other"


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of a single income or expense event.

    Attributes:
        user_id: Owner of the transaction
        amount: Magnitude of the transaction; the sign comes from `type`
        category: Spending or income category
        type: Whether money came in or went out
        date: Calendar date of the transaction
        description: Optional free-text note
        id: Opaque unique identifier
        created_at: When the record was stored
    """

    user_id: str
    amount: Decimal
    category: Category
    type: TransactionType
    date: date
    description: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_income(self) -> bool:
        """Check if this is an income transaction."""
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        """Check if this is an expense transaction."""
        return self.type == TransactionType.EXPENSE
