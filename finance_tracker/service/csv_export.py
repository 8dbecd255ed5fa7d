"""CSV serialization of transaction lists."""

import csv
import io
from datetime import date
from typing import Iterable

from finance_tracker.domain.entities import Transaction

CSV_HEADERS = ("Date", "Type", "Category", "Amount", "Description")


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """
    Serialize transactions to CSV text.

    The header row is written as-is; every data field is double-quoted.
    Rows are separated by "\\n" with no trailing newline. Row order follows
    the input order.

    Args:
        transactions: Transactions to serialize

    Returns:
        CSV document as a string
    """
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADERS) + "\n")

    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(
        [
            txn.date.isoformat(),
            txn.type.value,
            txn.category.value,
            f"{txn.amount:.2f}",
            txn.description or "",
        ]
        for txn in transactions
    )

    # Every row ends with the terminator; the last one is dropped
    return buffer.getvalue()[:-1]


def export_filename(today: date | None = None) -> str:
    """Download filename for an export made on `today`."""
    return f"transactions-{(today or date.today()).isoformat()}.csv"
