"""
Per-category expense breakdown.

Each category's percentage is measured against total spending across all
categories, so the percentages of a non-empty breakdown add up to 100.
"""

from decimal import Decimal
from typing import Dict, Iterable, List

from finance_tracker.domain.entities import Category, Transaction

from .models import CategoryShare


def compute_category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryShare]:
    """
    Group expense transactions by category.

    Algorithm:
        1. Keep only expense transactions
        2. Sum amounts per category, in order of first occurrence
        3. Divide each category sum by the sum of all expenses

    Income transactions never contribute. When there are no expenses the
    grouping is empty, so no division happens and the result is empty.

    Args:
        transactions: Snapshot of a user's transactions

    Returns:
        One CategoryShare per expense category, first-seen order
    """
    by_category: Dict[Category, Decimal] = {}
    total_expenses = Decimal("0")

    for txn in transactions:
        if not txn.is_expense:
            continue
        by_category[txn.category] = by_category.get(txn.category, Decimal("0")) + txn.amount
        total_expenses += txn.amount

    shares = []
    for category, amount in by_category.items():
        # Zero-amount expenses can leave the total at zero
        percentage = float(amount / total_expenses * 100) if total_expenses else 0.0
        shares.append(
            CategoryShare(
                category=category,
                amount=amount,
                percentage=percentage,
            )
        )

    return shares
