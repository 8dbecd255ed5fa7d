"""Transaction-related Pydantic schemas."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from finance_tracker.domain.entities import Category, TransactionType


class TransactionCreateSchema(BaseModel):
    """Schema for POST /v1/transactions request."""

    amount: Decimal = Field(
        ...,
        ge=0,
        max_digits=12,
        decimal_places=2,
        description="Transaction amount (magnitude, two decimals)",
        examples=["1200.00"],
    )
    category: Category = Field(
        ...,
        description="Transaction category",
        examples=["Food"],
    )
    type: TransactionType = Field(
        ...,
        description="Income or Expense",
        examples=["Expense"],
    )
    date: dt.date = Field(
        default_factory=dt.date.today,
        description="Transaction date (YYYY-MM-DD), defaults to today",
        examples=["2024-01-10"],
    )
    description: Optional[str] = Field(
        None,
        max_length=1000,
        description="Optional note about the transaction",
        examples=["Groceries and dining"],
    )

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class TransactionSchema(BaseModel):
    """Schema for a single transaction in responses."""

    id: str = Field(..., description="UUID of the transaction")
    amount: float = Field(..., ge=0, description="Transaction amount", examples=[1200.0])
    category: str = Field(..., description="Transaction category", examples=["Food"])
    type: str = Field(..., description="Income or Expense", examples=["Expense"])
    date: str = Field(
        ...,
        description="Transaction date in ISO 8601 format (YYYY-MM-DD)",
        examples=["2024-01-10"],
    )
    description: Optional[str] = Field(None, description="Optional note")
    created_at: str = Field(..., description="Creation timestamp (ISO 8601)")


class TransactionListSchema(BaseModel):
    """Schema for GET /v1/transactions response."""

    user_id: str = Field(..., description="Owner of the transactions")
    total_count: int = Field(..., ge=0, description="Number of transactions the user has")
    transactions: list[TransactionSchema] = Field(
        ...,
        description="Requested page of transactions, newest first",
    )
