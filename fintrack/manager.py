"""A collection of transactions with totals, filters and CSV export."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .transaction import Transaction, TransactionType

_CSV_HEADER = "Type,Amount,Label,Date,Category\n"


def _format_amount(amount: float) -> str:
    return f"{amount:g}"


class TransactionManager:
    """Holds a list of transactions in insertion order."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []

    def add(self, transaction: Transaction) -> None:
        """Append a transaction."""
        self._transactions.append(transaction)

    def clear(self) -> None:
        """Remove every transaction."""
        self._transactions.clear()

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def transactions(self) -> tuple[Transaction, ...]:
        """All transactions, in the order they were added."""
        return tuple(self._transactions)

    def balance(self) -> float:
        """Incomes minus expenses."""
        return sum((tx.signed_amount for tx in self._transactions), 0.0)

    def total_income(self) -> float:
        """Sum of all incomes."""
        return sum(
            (tx.amount for tx in self._transactions if tx.type is TransactionType.INCOME), 0.0
        )

    def total_expense(self) -> float:
        """Sum of all expenses."""
        return sum(
            (tx.amount for tx in self._transactions if tx.type is TransactionType.EXPENSE), 0.0
        )

    def by_month(self, year: int, month: int) -> list[Transaction]:
        """Transactions dated in the given year and month (1-12)."""
        return [
            tx for tx in self._transactions if tx.date.year == year and tx.date.month == month
        ]

    def by_category(self, category: str) -> list[Transaction]:
        """Transactions whose category equals the one given."""
        return [tx for tx in self._transactions if tx.category == category]

    def by_amount_range(self, min_amount: float, max_amount: float) -> list[Transaction]:
        """Transactions whose amount lies within the inclusive range."""
        return [tx for tx in self._transactions if min_amount <= tx.amount <= max_amount]

    def remove(self, index: int) -> Transaction:
        """Remove and return the transaction at index; raise IndexError if out of range."""
        if not 0 <= index < len(self._transactions):
            raise IndexError(f"transaction index out of range: {index}")
        return self._transactions.pop(index)

    def export_csv(self, path: str | os.PathLike[str]) -> None:
        """Write all transactions as CSV to path; raises OSError if it cannot be written."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(_CSV_HEADER)
            for tx in self._transactions:
                out.write(
                    ",".join(
                        (
                            tx.type.value,
                            _format_amount(tx.amount),
                            tx.label,
                            tx.date.strftime("%Y-%m-%d"),
                            tx.category,
                        )
                    )
                    + "\n"
                )