"""
Integration tests for the SQL transaction store.

These tests verify:
1. Database URL normalization picks the async drivers
2. The session scope commits on success and rolls back on error
3. The request repository dependency follows the storage_backend setting
4. Timestamps read back from the database are naive UTC
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from finance_tracker.application.dto import TransactionDTO
from finance_tracker.core.config import settings
from finance_tracker.core.dependencies import get_transaction_repository
from finance_tracker.domain.entities import Category, Transaction, TransactionType
from finance_tracker.infrastructure.database import (
    DatabaseSessionManager,
    TransactionModel,
    normalize_database_url,
)
from finance_tracker.infrastructure.repositories import (
    HttpTransactionRepository,
    PostgresTransactionRepository,
)


def make_transaction(**overrides) -> Transaction:
    fields = dict(
        user_id="user_test",
        amount=Decimal("1200.00"),
        category=Category.FOOD,
        type=TransactionType.EXPENSE,
        date=date(2024, 1, 10),
        description="Groceries and dining",
    )
    fields.update(overrides)
    return Transaction(**fields)


@pytest_asyncio.fixture
async def manager(tmp_path):
    """Session manager over a file-backed SQLite database with the schema created."""
    db = DatabaseSessionManager()
    db.init(f"sqlite:///{tmp_path / 'finance.db'}")
    await db.create_all()

    yield db

    await db.close()


async def count_rows(db: DatabaseSessionManager) -> int:
    async with db.session() as session:
        return (await session.execute(select(func.count()).select_from(TransactionModel))).scalar_one()


# =============================================================================
# URL Normalization
# =============================================================================

class TestNormalizeDatabaseUrl:

    @pytest.mark.parametrize("url,expected", [
        ("postgres://u:p@db:5432/finance", "postgresql+asyncpg://u:p@db:5432/finance"),
        ("postgresql://u:p@db:5432/finance", "postgresql+asyncpg://u:p@db:5432/finance"),
        ("sqlite:///./finance.db", "sqlite+aiosqlite:///./finance.db"),
        ("postgresql+psycopg://u:p@db/finance", "postgresql+psycopg://u:p@db/finance"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ])
    def test_normalize(self, url: str, expected: str):
        assert normalize_database_url(url) == expected


# =============================================================================
# Session Lifecycle
# =============================================================================

class TestSessionScope:

    @pytest.mark.asyncio
    async def test_session_requires_init(self):
        with pytest.raises(RuntimeError):
            async with DatabaseSessionManager().session():
                pass

    @pytest.mark.asyncio
    async def test_write_is_committed(self, manager: DatabaseSessionManager):
        txn = make_transaction()

        async with manager.session() as session:
            result = await PostgresTransactionRepository(session).create(txn)
            assert result.ok

        async with manager.session() as session:
            stored = (await PostgresTransactionRepository(session).list_by_user("user_test")).unwrap()

        assert [t.id for t in stored] == [txn.id]
        assert stored[0].amount == Decimal("1200.00")
        assert stored[0].description == "Groceries and dining"

    @pytest.mark.asyncio
    async def test_error_rolls_back_write(self, manager: DatabaseSessionManager):
        with pytest.raises(ValueError):
            async with manager.session() as session:
                await PostgresTransactionRepository(session).create(make_transaction())
                raise ValueError("handler failed")

        assert await count_rows(manager) == 0

    @pytest.mark.asyncio
    async def test_delete_is_committed(self, manager: DatabaseSessionManager):
        txn = make_transaction()
        async with manager.session() as session:
            await PostgresTransactionRepository(session).create(txn)

        async with manager.session() as session:
            assert (await PostgresTransactionRepository(session).delete("user_test", txn.id)).ok

        assert await count_rows(manager) == 0


# =============================================================================
# Repository Dependency
# =============================================================================

class TestRepositoryDependency:

    @pytest.mark.asyncio
    async def test_rest_backend_yields_http_repository(self, monkeypatch):
        monkeypatch.setattr(settings, "storage_backend", "rest")

        dependency = get_transaction_repository()
        repo = await dependency.__anext__()

        assert isinstance(repo, HttpTransactionRepository)
        await dependency.aclose()

    @pytest.mark.asyncio
    async def test_database_backend_commits_when_request_ends(
        self,
        monkeypatch,
        manager: DatabaseSessionManager,
    ):
        monkeypatch.setattr(settings, "storage_backend", "database")
        monkeypatch.setattr("finance_tracker.core.dependencies.db_manager", manager)

        dependency = get_transaction_repository()
        repo = await dependency.__anext__()
        assert isinstance(repo, PostgresTransactionRepository)

        await repo.create(make_transaction())
        # Resuming past the yield is what FastAPI does after the response
        with pytest.raises(StopAsyncIteration):
            await dependency.__anext__()

        assert await count_rows(manager) == 1


# =============================================================================
# Timestamps
# =============================================================================

class TestCreatedAt:

    def test_aware_timestamp_becomes_naive_utc(self):
        model = TransactionModel(
            id="6f1c2a7e-0000-4000-8000-000000000001",
            user_id="user_test",
            amount=Decimal("1200.00"),
            category="Food",
            type="Expense",
            date=date(2024, 1, 10),
            description=None,
            created_at=datetime(2024, 1, 10, 11, 30, tzinfo=timezone(timedelta(hours=2))),
        )

        txn = PostgresTransactionRepository(session=None)._to_entity(model)

        assert txn.created_at == datetime(2024, 1, 10, 9, 30)
        assert TransactionDTO.from_entity(txn).created_at == "2024-01-10T09:30:00Z"

    @pytest.mark.asyncio
    async def test_round_trip_serializes_as_utc(self, manager: DatabaseSessionManager):
        txn = make_transaction(created_at=datetime(2024, 1, 10, 9, 30))
        async with manager.session() as session:
            await PostgresTransactionRepository(session).create(txn)

        async with manager.session() as session:
            stored = (await PostgresTransactionRepository(session).list_by_user("user_test")).unwrap()

        assert TransactionDTO.from_entity(stored[0]).created_at == "2024-01-10T09:30:00Z"
