"""Async engine and session lifecycle for the SQL transaction store."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finance_tracker.core.config import settings

logger = structlog.get_logger(__name__)

_ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


def normalize_database_url(url: str) -> str:
    """
    Pick the async driver for URLs that name only a dialect.

    ``postgres://`` and ``postgresql://`` (as handed out by hosting
    providers) become ``postgresql+asyncpg://``; ``sqlite://`` becomes
    ``sqlite+aiosqlite://``. URLs that already name a driver are kept.
    """
    scheme, sep, rest = url.partition("://")
    if not sep or "+" in scheme:
        return url
    return f"{_ASYNC_DRIVERS.get(scheme, scheme)}://{rest}"


class DatabaseSessionManager:
    """
    Owns the engine used by the SQL transaction repository.

    ``init`` is called once from the application lifespan; every request
    then borrows a session through ``session()``, which commits when the
    request handler returns and rolls back when it raises.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    def init(self, database_url: str | None = None) -> None:
        url = normalize_database_url(database_url or settings.database_url)

        options = {"echo": settings.debug}
        if make_url(url).get_backend_name() != "sqlite":
            options.update(
                pool_pre_ping=True,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
            )

        self._engine = create_async_engine(url, **options)
        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info("database_initialized", backend=make_url(url).get_backend_name())

    async def create_all(self) -> None:
        """Create the transactions table and its indexes if missing."""
        from .models import Base

        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session wrapped in a single transaction."""
        self._require_engine()

        async with self._sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def _require_engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._engine


db_manager = DatabaseSessionManager()
