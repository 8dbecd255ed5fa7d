"""Data transfer objects for dashboard statistics."""

from dataclasses import dataclass
from typing import List

from finance_tracker.domain.entities import Transaction
from finance_tracker.service.statistics import (
    CategoryShare,
    DashboardSummary,
    MonthlyTotals,
    Totals,
)

from .transaction import TransactionDTO


@dataclass(frozen=True)
class TotalsDTO:
    total_income: float
    total_expenses: float
    balance: float

    @classmethod
    def from_totals(cls, totals: Totals) -> "TotalsDTO":
        return cls(
            total_income=float(totals.total_income),
            total_expenses=float(totals.total_expenses),
            balance=float(totals.balance),
        )


@dataclass(frozen=True)
class CategoryShareDTO:
    category: str
    amount: float
    percentage: float

    @classmethod
    def from_share(cls, share: CategoryShare, decimals: int = 2) -> "CategoryShareDTO":
        return cls(
            category=share.category.value,
            amount=float(share.amount),
            percentage=round(share.percentage, decimals),
        )


@dataclass(frozen=True)
class MonthlyTotalsDTO:
    month: str
    label: str
    income: float
    expenses: float
    net: float

    @classmethod
    def from_month(cls, month: MonthlyTotals) -> "MonthlyTotalsDTO":
        return cls(
            month=month.key,
            label=month.label,
            income=float(month.income),
            expenses=float(month.expenses),
            net=float(month.net),
        )


@dataclass(frozen=True)
class DashboardResponse:
    """Everything the dashboard page renders for one user."""

    user_id: str
    totals: TotalsDTO
    transaction_count: int
    category_breakdown: List[CategoryShareDTO]
    monthly_series: List[MonthlyTotalsDTO]
    recent_transactions: List[TransactionDTO]

    @classmethod
    def from_summary(
        cls,
        user_id: str,
        summary: DashboardSummary,
        recent: List[Transaction],
        decimals: int = 2,
    ) -> "DashboardResponse":
        return cls(
            user_id=user_id,
            totals=TotalsDTO.from_totals(summary.totals),
            transaction_count=summary.transaction_count,
            category_breakdown=[
                CategoryShareDTO.from_share(share, decimals)
                for share in summary.category_breakdown
            ],
            monthly_series=[
                MonthlyTotalsDTO.from_month(month) for month in summary.monthly_series
            ],
            recent_transactions=[TransactionDTO.from_entity(t) for t in recent],
        )
