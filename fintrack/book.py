"""In-memory finance book with per-kind append logs, plus entry checks and display helpers."""

from __future__ import annotations

import os
from pathlib import Path

from fintrack.transaction import Expense, Income, Transaction, format_amount


class ValidationError(ValueError):
    """Raised when a new entry's fields are not acceptable."""


def validate_entry(category: str, amount: float) -> None:
    """Reject an empty category or a non-positive amount."""
    if not category:
        raise ValidationError("Please enter a category.")
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0.")


def format_summary(total_income: float, total_expenses: float) -> str:
    """Three-line summary of income, expenses and balance."""
    balance = total_income - total_expenses
    return (
        f"Total Income: ${total_income:.2f}\n"
        f"Total Expenses: ${total_expenses:.2f}\n"
        f"Balance: ${balance:.2f}"
    )


def format_row(transaction: Transaction) -> tuple[str, str, str, str]:
    """Table cells for a transaction: date, type, category, amount."""
    return (transaction.date, transaction.kind, transaction.category, f"{transaction.amount:.2f}")


class FinanceBook:
    """Keeps transactions in memory and appends each one to income.txt or expense.txt."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self._transactions: list[Transaction] = []
        self._total_income = 0.0
        self._total_expenses = 0.0

    def _save(self, transaction: Transaction) -> None:
        path = self.directory / f"{transaction.kind.lower()}.txt"
        with path.open("a") as handle:
            handle.write(f"{transaction.date},{transaction.category},{format_amount(transaction.amount)}\n")

    def add_income(self, amount: float, category: str, date: str) -> Income:
        income = Income(amount, category, date)
        self._transactions.append(income)
        self._total_income += amount
        self._save(income)
        return income

    def add_expense(self, amount: float, category: str, date: str) -> Expense:
        expense = Expense(amount, category, date)
        self._transactions.append(expense)
        self._total_expenses += amount
        self._save(expense)
        return expense

    def total_income(self) -> float:
        return self._total_income

    def total_expenses(self) -> float:
        return self._total_expenses

    def transactions(self) -> tuple[Transaction, ...]:
        """Transactions in the order they were added."""
        return tuple(self._transactions)