"""Per-month income and expense series."""

from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from finance_tracker.domain.entities import Transaction

from .models import MonthlyTotals
from .settings import StatisticsSettings, statistics_settings


def month_key(txn: Transaction) -> Tuple[int, int]:
    """Return the (year, month) a transaction belongs to."""
    return txn.date.year, txn.date.month


def compute_monthly_series(
    transactions: Iterable[Transaction],
    window: int | None = None,
    settings: StatisticsSettings = statistics_settings,
) -> List[MonthlyTotals]:
    """
    Build the chronological income/expense series for the latest months.

    Algorithm:
        1. Group all transactions by (year, month) of their date
        2. Within a month, sum amounts into income or expenses by type
        3. Sort months ascending by (year, month), never by display label
        4. Keep only the last `window` months, still ascending

    Args:
        transactions: Snapshot of a user's transactions
        window: Number of months to keep (defaults to settings.monthly_window)
        settings: Statistics settings (uses defaults if not provided)

    Returns:
        At most `window` MonthlyTotals, oldest first
    """
    if window is None:
        window = settings.monthly_window

    sums: Dict[Tuple[int, int], List[Decimal]] = {}

    for txn in transactions:
        bucket = sums.setdefault(month_key(txn), [Decimal("0"), Decimal("0")])
        if txn.is_income:
            bucket[0] += txn.amount
        else:
            bucket[1] += txn.amount

    series = [
        MonthlyTotals(year=year, month=month, income=income, expenses=expenses)
        for (year, month), (income, expenses) in sorted(sums.items())
    ]

    return series[-window:] if window > 0 else []
