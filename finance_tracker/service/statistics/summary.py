"""One-shot computation of every dashboard view."""

from typing import Sequence

from finance_tracker.domain.entities import Transaction

from .categories import compute_category_breakdown
from .models import DashboardSummary
from .monthly import compute_monthly_series
from .settings import StatisticsSettings, statistics_settings
from .totals import compute_totals


def summarize(
    transactions: Sequence[Transaction],
    settings: StatisticsSettings = statistics_settings,
) -> DashboardSummary:
    """
    Compute totals, category breakdown and monthly series together.

    Args:
        transactions: Snapshot of a user's transactions
        settings: Statistics settings (uses defaults if not provided)

    Returns:
        DashboardSummary for the snapshot
    """
    return DashboardSummary(
        totals=compute_totals(transactions),
        transaction_count=len(transactions),
        category_breakdown=compute_category_breakdown(transactions),
        monthly_series=compute_monthly_series(transactions, settings=settings),
    )
