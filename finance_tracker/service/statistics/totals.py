"""Income, expense and balance totals."""

from decimal import Decimal
from typing import Iterable

from finance_tracker.domain.entities import Transaction, TransactionType

from .models import Totals


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    """
    Sum income and expenses and derive the balance.

    Order of the input is irrelevant. An empty input yields all zeros.

    Args:
        transactions: Snapshot of a user's transactions

    Returns:
        Totals with balance = total_income - total_expenses
    """
    total_income = Decimal("0")
    total_expenses = Decimal("0")

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        else:
            total_expenses += txn.amount

    return Totals(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )
