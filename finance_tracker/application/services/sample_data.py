"""Starter transactions offered to new users."""

from datetime import date
from decimal import Decimal
from typing import List

from finance_tracker.domain.entities import Category, Transaction, TransactionType

SAMPLE_TRANSACTIONS = (
    (Decimal("3500"), Category.SALARY, TransactionType.INCOME, date(2024, 1, 15), "Monthly salary"),
    (Decimal("1200"), Category.FOOD, TransactionType.EXPENSE, date(2024, 1, 10), "Groceries and dining"),
    (Decimal("500"), Category.TRANSPORT, TransactionType.EXPENSE, date(2024, 1, 8), "Gas and car maintenance"),
    (Decimal("200"), Category.ENTERTAINMENT, TransactionType.EXPENSE, date(2024, 1, 5), "Movies and games"),
    (Decimal("800"), Category.BILLS, TransactionType.EXPENSE, date(2024, 1, 1), "Rent and utilities"),
    (Decimal("2800"), Category.SALARY, TransactionType.INCOME, date(2023, 12, 15), "Previous month salary"),
    (Decimal("300"), Category.SHOPPING, TransactionType.EXPENSE, date(2023, 12, 20), "Clothing and accessories"),
)


def build_sample_transactions(user_id: str) -> List[Transaction]:
    """Create fresh sample transactions owned by `user_id`."""
    return [
        Transaction(
            user_id=user_id,
            amount=amount,
            category=category,
            type=txn_type,
            date=txn_date,
            description=description,
        )
        for amount, category, txn_type, txn_date, description in SAMPLE_TRANSACTIONS
    ]
