"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager, normalize_database_url
from .models import Base, TransactionModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "normalize_database_url",
    "Base",
    "TransactionModel",
]
