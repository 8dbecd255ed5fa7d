"""
Dashboard Statistics Module for the Finance Tracker
"""

from .models import CategoryShare, DashboardSummary, MonthlyTotals, Totals
from .settings import StatisticsSettings, statistics_settings
from .totals import compute_totals
from .categories import compute_category_breakdown
from .monthly import compute_monthly_series, month_key
from .summary import summarize

__all__ = [
    # Settings
    "StatisticsSettings",
    "statistics_settings",
    # Models
    "Totals",
    "CategoryShare",
    "MonthlyTotals",
    "DashboardSummary",
    # Aggregations
    "compute_totals",
    "compute_category_breakdown",
    "compute_monthly_series",
    "month_key",
    "summarize",
]
