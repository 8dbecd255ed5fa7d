"""
Data models for dashboard statistics.

These are the derived views computed from a snapshot of a user's
transactions. They are recomputed on every request and never stored.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from finance_tracker.domain.entities import Category

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class Totals:
    """
    Overall income, spending and the resulting balance.

    Attributes:
        total_income: Sum of all income amounts
        total_expenses: Sum of all expense amounts
        balance: total_income - total_expenses (may be negative)
    """
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryShare:
    """
    Share of total spending attributed to one category.

    Attributes:
        category: The expense category
        amount: Summed expense amount for the category
        percentage: amount / total expenses * 100, unrounded
    """
    category: Category
    amount: Decimal
    percentage: float


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and spending within a single calendar month."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal

    @property
    def key(self) -> str:
        """Sortable month key, e.g. "2024-01"."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        """Display label, e.g. "Jan 2024"."""
        return f"{MONTH_ABBREVIATIONS[self.month - 1]} {self.year}"

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class DashboardSummary:
    """All derived views for one snapshot of transactions."""

    totals: Totals
    transaction_count: int
    category_breakdown: List[CategoryShare] = field(default_factory=list)
    monthly_series: List[MonthlyTotals] = field(default_factory=list)
