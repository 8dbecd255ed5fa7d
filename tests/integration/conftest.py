"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- In-memory SQLite database behind the SQL transaction repository
- Failing repository for store outage scenarios
"""

from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from finance_tracker.main import app
from finance_tracker.core.dependencies import get_transaction_repository
from finance_tracker.domain.entities import OperationResult, Transaction
from finance_tracker.domain.exceptions import (
    TransactionStoreException,
    TransactionStoreTimeoutException,
)
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.infrastructure.database import Base
from finance_tracker.infrastructure.repositories import PostgresTransactionRepository




# =============================================================================
# Mock Repository
# =============================================================================

class FailingTransactionRepository(TransactionRepository):
    """Repository whose every operation fails like an unreachable store."""

    def __init__(self, timeout: bool = False):
        self.timeout = timeout
        self.call_count = 0

    def _failure(self) -> OperationResult:
        self.call_count += 1
        if self.timeout:
            return OperationResult.failure(TransactionStoreTimeoutException())
        return OperationResult.failure(
            TransactionStoreException(message="Transaction store unavailable", status_code=500)
        )

    async def create(self, transaction: Transaction) -> OperationResult[Transaction]:
        return self._failure()

    async def create_many(self, transactions: List[Transaction]) -> OperationResult[List[Transaction]]:
        return self._failure()

    async def delete(self, user_id: str, transaction_id: str) -> OperationResult[bool]:
        return self._failure()

    async def list_by_user(self, user_id: str) -> OperationResult[List[Transaction]]:
        return self._failure()


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_for(repository: TransactionRepository) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_transaction_repository():
        return repository

    app.dependency_overrides[get_transaction_repository] = override_get_transaction_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    All requests of one test share the same session, so writes made by
    one request are visible to the next.
    """
    async for ac in _client_for(PostgresTransactionRepository(test_session)):
        yield ac


@pytest.fixture
def failing_repository() -> FailingTransactionRepository:
    return FailingTransactionRepository()


@pytest_asyncio.fixture
async def client_with_failing_store(
    failing_repository: FailingTransactionRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the transaction store always fails."""
    async for ac in _client_for(failing_repository):
        yield ac


@pytest_asyncio.fixture
async def client_with_store_timeout() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the transaction store always times out."""
    async for ac in _client_for(FailingTransactionRepository(timeout=True)):
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def expense_body() -> dict:
    return {
        "amount": "1200",
        "category": "Food",
        "type": "Expense",
        "date": "2024-01-10",
        "description": "Groceries and dining",
    }


@pytest.fixture
def income_body() -> dict:
    return {
        "amount": "3500",
        "category": "Salary",
        "type": "Income",
        "date": "2024-01-15",
        "description": "Monthly salary",
    }
