"""Financial transactions: incomes and expenses."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum


class TransactionType(Enum):
    """Whether a transaction brings money in or takes it out."""

    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Transaction:
    """A single financial operation, an income or an expense."""

    type: TransactionType
    amount: float
    label: str
    date: datetime.date = field(default_factory=datetime.date.today)
    category: str = ""

    @property
    def is_income(self) -> bool:
        """True when the transaction is an income."""
        return self.type is TransactionType.INCOME

    @property
    def signed_amount(self) -> float:
        """The amount, negative for expenses."""
        return self.amount if self.is_income else -self.amount