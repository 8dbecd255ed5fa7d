"""Dashboard Pydantic schemas."""

from pydantic import BaseModel, Field

from .transaction import TransactionSchema


class TotalsSchema(BaseModel):
    """Overall income, spending and balance."""

    total_income: float = Field(..., description="Sum of income", examples=[3500.0])
    total_expenses: float = Field(..., description="Sum of expenses", examples=[1700.0])
    balance: float = Field(
        ...,
        description="Income minus expenses (may be negative)",
        examples=[1800.0],
    )


class CategoryShareSchema(BaseModel):
    """Share of total spending for one category."""

    category: str = Field(..., examples=["Food"])
    amount: float = Field(..., ge=0, examples=[1200.0])
    percentage: float = Field(
        ...,
        ge=0,
        description="Share of total expenses, in percent",
        examples=[70.59],
    )


class MonthlyTotalsSchema(BaseModel):
    """Income and expenses for one calendar month."""

    month: str = Field(..., description="Month key (YYYY-MM)", examples=["2024-01"])
    label: str = Field(..., description="Display label", examples=["Jan 2024"])
    income: float = Field(..., ge=0, examples=[3500.0])
    expenses: float = Field(..., ge=0, examples=[2700.0])
    net: float = Field(..., description="Income minus expenses", examples=[800.0])


class DashboardSchema(BaseModel):
    """Schema for GET /v1/dashboard response."""

    user_id: str
    totals: TotalsSchema
    transaction_count: int = Field(..., ge=0)
    category_breakdown: list[CategoryShareSchema] = Field(
        ...,
        description="Expense share per category, first-seen order",
    )
    monthly_series: list[MonthlyTotalsSchema] = Field(
        ...,
        description="Most recent months, oldest first",
    )
    recent_transactions: list[TransactionSchema] = Field(
        ...,
        description="Newest transactions",
    )
