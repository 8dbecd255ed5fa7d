"""Dependency injection for FastAPI."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header

from finance_tracker.core.config import settings
from finance_tracker.domain.exceptions import AuthenticationRequiredException
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.infrastructure.database import db_manager
from finance_tracker.infrastructure.repositories import (
    HttpTransactionRepository,
    PostgresTransactionRepository,
)
from finance_tracker.application.services import (
    DashboardService,
    ExportService,
    TransactionService,
)


# Identity
async def get_current_user_id(
    x_user_id: Annotated[str | None, Header(description="Authenticated user ID")] = None,
) -> str:
    """Resolve the calling user from the X-User-ID header."""
    if x_user_id is None or not x_user_id.strip():
        raise AuthenticationRequiredException()
    return x_user_id.strip()


# Repository dependencies
async def get_transaction_repository() -> AsyncGenerator[TransactionRepository, None]:
    """Get a TransactionRepository for the configured storage backend."""
    if settings.storage_backend == "rest":
        yield HttpTransactionRepository()
        return

    async with db_manager.session() as session:
        yield PostgresTransactionRepository(session)


# Service dependencies
async def get_transaction_service(
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> TransactionService:
    """Get a TransactionService instance."""
    return TransactionService(transaction_repository=repo)


async def get_dashboard_service(
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> DashboardService:
    """Get a DashboardService instance."""
    return DashboardService(
        transaction_repository=repo,
        recent_limit=settings.recent_transactions_limit,
        seed_on_empty=settings.seed_sample_data_on_empty,
    )


async def get_export_service(
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> ExportService:
    """Get an ExportService instance."""
    return ExportService(transaction_repository=repo)


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
