"""
Domain Interfaces (Ports)
"""

from .repositories import TransactionRepository

__all__ = [
    "TransactionRepository",
]
