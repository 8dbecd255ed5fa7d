"""Dashboard API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from finance_tracker.application.services import DashboardService
from finance_tracker.core.dependencies import CurrentUserId, get_dashboard_service
from finance_tracker.core.metrics import track_dashboard_latency
from finance_tracker.presentation.schemas import (
    CategoryShareSchema,
    DashboardSchema,
    ErrorResponseSchema,
    MonthlyTotalsSchema,
    TotalsSchema,
)

dashboard_router = APIRouter(
    prefix="/dashboard",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identity"},
        503: {"model": ErrorResponseSchema, "description": "Transaction store unavailable"},
    },
)


@dashboard_router.get(
    "",
    response_model=DashboardSchema,
    summary="Get Dashboard",
    description="""
    Statistics for the current user's dashboard: totals and balance,
    transaction count, expense breakdown by category, the income vs
    expenses series for the most recent months, and the newest
    transactions.
    """,
)
async def get_dashboard(
    user_id: CurrentUserId,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> DashboardSchema:
    with track_dashboard_latency():
        response = await dashboard_service.get_dashboard(user_id)

    return DashboardSchema.model_validate(response, from_attributes=True)


@dashboard_router.get(
    "/totals",
    response_model=TotalsSchema,
    summary="Get Totals",
)
async def get_totals(
    user_id: CurrentUserId,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> TotalsSchema:
    totals = await dashboard_service.get_totals(user_id)
    return TotalsSchema.model_validate(totals, from_attributes=True)


@dashboard_router.get(
    "/categories",
    response_model=list[CategoryShareSchema],
    summary="Get Expense Breakdown",
    description="Expense totals per category with their share of all expenses.",
)
async def get_category_breakdown(
    user_id: CurrentUserId,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> list[CategoryShareSchema]:
    shares = await dashboard_service.get_category_breakdown(user_id)
    return [CategoryShareSchema.model_validate(s, from_attributes=True) for s in shares]


@dashboard_router.get(
    "/monthly",
    response_model=list[MonthlyTotalsSchema],
    summary="Get Monthly Series",
    description="Income and expenses per month, oldest first, for the most recent months.",
)
async def get_monthly_series(
    user_id: CurrentUserId,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    months: Annotated[
        Optional[int],
        Query(ge=1, le=24, description="Number of recent months (defaults to 6)"),
    ] = None,
) -> list[MonthlyTotalsSchema]:
    series = await dashboard_service.get_monthly_series(user_id, months)
    return [MonthlyTotalsSchema.model_validate(m, from_attributes=True) for m in series]
