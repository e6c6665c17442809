"""File-backed finance ledger with budgets and a password."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from fintrack.transaction import Expense, Income, Transaction, format_amount

MAX_TRANSACTIONS = 100


class TransactionLimitError(Exception):
    """Raised when the session already holds the maximum number of transactions."""


@dataclass(frozen=True)
class Entry:
    """One stored record: category, amount and date."""

    category: str
    amount: float
    date: str


@dataclass(frozen=True)
class Summary:
    """Totals of all stored income and expenses."""

    income: float
    expenses: float
    net: float


def _check_token(name: str, value: str) -> None:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"{name} must be a single non-empty word")


def _tokens(path: Path) -> list[str]:
    try:
        return path.read_text().split()
    except FileNotFoundError:
        return []


def _read_entries(path: Path) -> Iterator[Entry]:
    words = iter(_tokens(path))
    for category, amount, date in zip(words, words, words):
        try:
            value = float(amount)
        except ValueError:
            return
        yield Entry(category, value, date)


def _read_limits(path: Path) -> Iterator[tuple[str, float]]:
    words = iter(_tokens(path))
    for category, limit in zip(words, words):
        try:
            value = float(limit)
        except ValueError:
            return
        yield category, value


def _line(category: str, amount: float, date: str) -> str:
    return f"{category} {format_amount(amount)} {date}\n"


class FinanceManager:
    """Keeps income, expenses, budgets and a password in text files in one directory."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self._transactions: list[Transaction] = []
        self.total_income = 0.0
        self.total_expenses = 0.0

    @property
    def _income_file(self) -> Path:
        return self.directory / "income.txt"

    @property
    def _expense_file(self) -> Path:
        return self.directory / "expense.txt"

    @property
    def _data_file(self) -> Path:
        return self.directory / "projectdata.txt"

    @property
    def _summary_file(self) -> Path:
        return self.directory / "summary.txt"

    @property
    def _budget_file(self) -> Path:
        return self.directory / "budget.txt"

    @property
    def _password_file(self) -> Path:
        return self.directory / "savedpass.txt"

    def _append(self, path: Path, text: str) -> None:
        with path.open("a") as handle:
            handle.write(text)

    def _ensure_room(self) -> None:
        if len(self._transactions) >= MAX_TRANSACTIONS:
            raise TransactionLimitError("Transaction limit reached!")

    def add_income(self, amount: float, category: str, date: str) -> Income:
        """Record income; raises TransactionLimitError when the session is full."""
        _check_token("category", category)
        _check_token("date", date)
        self._ensure_room()
        income = Income(amount, category, date)
        self._transactions.append(income)
        self.total_income += amount
        line = _line(category, amount, date)
        self._append(self._income_file, line)
        self._append(self._data_file, line)
        return income

    def add_expense(self, amount: float, category: str, date: str) -> bool:
        """Record an expense and report whether it breaks the category's budget."""
        _check_token("category", category)
        _check_token("date", date)
        self._ensure_room()
        exceeded = self.limit_exceeded(category, amount)
        self._transactions.append(Expense(amount, category, date))
        self.total_expenses += amount
        line = _line(category, amount, date)
        self._append(self._expense_file, line)
        self._append(self._data_file, line)
        return exceeded

    def entries(self) -> list[Entry]:
        """All stored records in the order they were added."""
        return list(_read_entries(self._data_file))

    def summary(self) -> Summary:
        """Total the stored income and expenses and save them to the summary file."""
        income = sum(entry.amount for entry in _read_entries(self._income_file))
        expenses = sum(entry.amount for entry in _read_entries(self._expense_file))
        result = Summary(float(income), float(expenses), float(income - expenses))
        self._summary_file.write_text(
            "".join(f"{format_amount(value)}\n" for value in (result.income, result.expenses, result.net))
        )
        return result

    def reset(self) -> None:
        """Empty every data file and forget this session's transactions."""
        for path in (self._income_file, self._expense_file, self._data_file, self._summary_file):
            path.write_text("")
        self._transactions.clear()
        self.total_income = 0.0
        self.total_expenses = 0.0

    def monthly(self, month: int) -> list[Entry]:
        """Records whose date (YYYY-MM-DD) falls in the given month."""
        if not 1 <= month <= 12:
            raise ValueError("month must be between 1 and 12")
        wanted = f"{month:02d}"
        return [entry for entry in self.entries() if entry.date[5:7] == wanted]

    def search(self, date: str) -> list[Entry]:
        """Records dated exactly `date`."""
        return [entry for entry in self.entries() if entry.date == date]

    def edit(self, number: int, category: str, amount: float, date: str) -> bool:
        """Replace record `number` (1-based); return whether one was replaced."""
        _check_token("category", category)
        _check_token("date", date)
        replaced = False
        lines = []
        for position, entry in enumerate(self.entries(), start=1):
            if position == number:
                lines.append(_line(category, amount, date))
                replaced = True
            else:
                lines.append(_line(entry.category, entry.amount, entry.date))
        temp = self.directory / "temp.txt"
        temp.write_text("".join(lines))
        os.replace(temp, self._data_file)
        return replaced

    def set_limit(self, category: str, limit: float) -> None:
        """Store a budget limit for a category."""
        _check_token("category", category)
        self._append(self._budget_file, f"{category} {format_amount(limit)}\n")

    def limit_exceeded(self, category: str, amount: float) -> bool:
        """Whether spending `amount` more in `category` would pass one of its limits."""
        spent = None
        for budget_category, limit in _read_limits(self._budget_file):
            if budget_category != category:
                continue
            if spent is None:
                spent = sum(
                    entry.amount for entry in _read_entries(self._expense_file) if entry.category == category
                )
            if spent + amount > limit:
                return True
        return False

    def set_password(self, password: str) -> None:
        """Save the access password (a single word)."""
        _check_token("password", password)
        self._password_file.write_text(password)

    def has_password(self) -> bool:
        """Whether a password has been saved."""
        return bool(_tokens(self._password_file))

    def check_password(self, password: str) -> bool:
        """Compare with the saved password; with none saved, access is granted."""
        saved = _tokens(self._password_file)
        if not saved:
            return True
        return password == saved[0]