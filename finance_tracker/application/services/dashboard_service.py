"""Dashboard service - derives statistics from the user's transactions."""

from typing import List

import structlog

from finance_tracker.domain.entities import Transaction
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.application.dto import (
    CategoryShareDTO,
    DashboardResponse,
    MonthlyTotalsDTO,
    TotalsDTO,
)
from finance_tracker.service.statistics import (
    StatisticsSettings,
    compute_category_breakdown,
    compute_monthly_series,
    compute_totals,
    statistics_settings,
    summarize,
)

from .sample_data import build_sample_transactions

logger = structlog.get_logger(__name__)


class DashboardService:
    """
    Application service for dashboard statistics.

    Each call fetches a fresh snapshot from the repository and hands it to
    the statistics functions; nothing is kept between calls.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        recent_limit: int = 10,
        seed_on_empty: bool = False,
        settings: StatisticsSettings = statistics_settings,
    ):
        self._transaction_repo = transaction_repository
        self._recent_limit = recent_limit
        self._seed_on_empty = seed_on_empty
        self._settings = settings

    async def get_dashboard(self, user_id: str) -> DashboardResponse:
        """
        Compute the full dashboard for a user.

        When sample seeding is enabled and the user has no transactions,
        the starter set is inserted and the dashboard is computed from it.

        Args:
            user_id: The user's identifier

        Returns:
            DashboardResponse with totals, breakdown, series and recent items
        """
        transactions = await self._snapshot(user_id)

        if not transactions and self._seed_on_empty:
            samples = build_sample_transactions(user_id)
            (await self._transaction_repo.create_many(samples)).unwrap()
            logger.info("sample_data_seeded", user_id=user_id, count=len(samples))
            transactions = await self._snapshot(user_id)

        summary = summarize(transactions, settings=self._settings)

        logger.info(
            "dashboard_computed",
            user_id=user_id,
            transaction_count=summary.transaction_count,
            categories=len(summary.category_breakdown),
            months=len(summary.monthly_series),
        )

        return DashboardResponse.from_summary(
            user_id=user_id,
            summary=summary,
            recent=transactions[:self._recent_limit],
            decimals=self._settings.percentage_decimals,
        )

    async def get_totals(self, user_id: str) -> TotalsDTO:
        transactions = await self._snapshot(user_id)
        return TotalsDTO.from_totals(compute_totals(transactions))

    async def get_category_breakdown(self, user_id: str) -> List[CategoryShareDTO]:
        transactions = await self._snapshot(user_id)
        return [
            CategoryShareDTO.from_share(share, self._settings.percentage_decimals)
            for share in compute_category_breakdown(transactions)
        ]

    async def get_monthly_series(
        self,
        user_id: str,
        months: int | None = None,
    ) -> List[MonthlyTotalsDTO]:
        transactions = await self._snapshot(user_id)
        series = compute_monthly_series(transactions, window=months, settings=self._settings)
        return [MonthlyTotalsDTO.from_month(month) for month in series]

    async def _snapshot(self, user_id: str) -> List[Transaction]:
        return (await self._transaction_repo.list_by_user(user_id)).unwrap()
