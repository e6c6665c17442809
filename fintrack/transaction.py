"""Income and expense records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def format_amount(value: float) -> str:
    """Render an amount with six significant digits, trailing zeros dropped."""
    return f"{value:g}"


@dataclass(frozen=True)
class Transaction:
    """A dated amount booked against a category."""

    amount: float
    category: str
    date: str

    kind: ClassVar[str] = ""

    def describe(self) -> str:
        return f"{self.date} | {self.category} | ${format_amount(self.amount)}"


class Income(Transaction):
    """Money coming in."""

    kind: ClassVar[str] = "Income"

    def describe(self) -> str:
        return f"[INCOME] {self.date} | {self.category} | +${format_amount(self.amount)}"


class Expense(Transaction):
    """Money going out."""

    kind: ClassVar[str] = "Expense"

    def describe(self) -> str:
        return f"[EXPENSE] {self.date} | {self.category} | -${format_amount(self.amount)}"