"""Interactive text menu for the file-backed finance ledger."""

from __future__ import annotations

import argparse
import calendar
import sys
from collections.abc import Iterator
from typing import TextIO

from fintrack.ledger import FinanceManager, TransactionLimitError
from fintrack.transaction import format_amount

_MENU = (
    "\n1. Add Income\n"
    "2. Add Expense\n"
    "3. View Transactions\n"
    "4. View Summary\n"
    "5. View Monthly Report\n"
    "6. Search Transactions\n"
    "7. Edit Transaction\n"
    "8. Set Budget Limit\n"
    "9. Delete All Transactions\n"
    "10. Exit\n"
    "Enter your choice: "
)

_RULE = "----------------------------------------\n"


class _Session:
    """Reads whitespace-separated words from input and writes prompts and reports."""

    def __init__(self, manager: FinanceManager, stdin: TextIO, stdout: TextIO) -> None:
        self.manager = manager
        self.out = stdout
        self._words = self._split(stdin)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def write(self, text: str) -> None:
        self.out.write(text)

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError from None

    def ask_amount(self, prompt: str) -> float:
        return float(self.ask(prompt))

    def authenticate(self) -> bool:
        if not self.manager.has_password():
            self.manager.set_password(self.ask("Set your password: "))
            self.write("Password set successfully.\n")
        if self.manager.check_password(self.ask("Enter password: ")):
            self.write("Access granted.\n")
            return True
        self.write("Incorrect password. Exiting...\n")
        return False

    def _details(self, kind: str) -> tuple[float, str, str]:
        self.write(f"\nEnter {kind} details:\n")
        amount = self.ask_amount("Amount: $")
        category = self.ask("Category: ")
        date = self.ask("Date (YYYY-MM-DD): ")
        return amount, category, date

    def _limit_reached(self) -> None:
        self.write("Transaction limit reached!\n")
        if self.ask("To reset your data press 1: ") == "1":
            self._reset()

    def _reset(self) -> None:
        self.manager.reset()
        self.write("All transactions have been deleted.\n")

    def add_income(self) -> None:
        amount, category, date = self._details("income")
        try:
            self.manager.add_income(amount, category, date)
        except TransactionLimitError:
            self._limit_reached()

    def add_expense(self) -> None:
        amount, category, date = self._details("expense")
        try:
            exceeded = self.manager.add_expense(amount, category, date)
        except TransactionLimitError:
            self._limit_reached()
            return
        if exceeded:
            self.write(f"Warning: Budget limit exceeded for category: {category}\n")

    def show_all(self) -> int:
        entries = self.manager.entries()
        if not entries:
            self.write("No transactions found.\n")
            return 0
        self.write("\nNo.\tCategory\tAmount\t\tDate\n")
        self.write(_RULE)
        for number, entry in enumerate(entries, start=1):
            self.write(f"{number}.\t{entry.category}\t\t${format_amount(entry.amount)}\t\t{entry.date}\n")
        return len(entries)

    def show_transactions(self) -> None:
        self.write("\n--- TRANSACTION HISTORY ---\n")
        self.show_all()

    def show_summary(self) -> None:
        summary = self.manager.summary()
        self.write("\n=== FINANCIAL SUMMARY ===\n")
        self.write(f"Total Income: ${format_amount(summary.income)}\n")
        self.write(f"Total Expenses: ${format_amount(summary.expenses)}\n")
        self.write(f"Net Balance: ${format_amount(summary.net)}\n")

    def show_monthly(self) -> None:
        self.write("\n\n\n--- MONTHLY PROJECT DISPLAY ---\n")
        for month in range(1, 13):
            name = calendar.month_name[month]
            self.write(f"==== {name.upper()} ====\n")
            entries = self.manager.monthly(month)
            for entry in entries:
                self.write(f"{entry.category}    {format_amount(entry.amount)}    {entry.date}\n")
            if not entries:
                self.write(f"No Transactions In The Month Of {name}\n")

    def search(self) -> None:
        wanted = self.ask("Enter date to search (YYYY-MM-DD): ")
        self.write(f"\nTransactions on {wanted}:\n")
        self.write(_RULE)
        found = self.manager.search(wanted)
        for entry in found:
            self.write(f"{entry.category}\t${format_amount(entry.amount)}\t{entry.date}\n")
        if not found:
            self.write("No transactions found on this date.\n")

    def edit(self) -> None:
        count = self.show_all()
        number = int(self.ask("\nEnter the transaction number to edit: "))
        if not 1 <= number <= count:
            self.write("Transaction not found.\n")
            return
        category = self.ask("Enter new category: ")
        amount = self.ask_amount("Enter new amount: ")
        date = self.ask("Enter new date (YYYY-MM-DD): ")
        self.manager.edit(number, category, amount, date)
        self.write("Transaction updated successfully.\n")

    def set_limit(self) -> None:
        category = self.ask("Enter category for budget limit: ")
        limit = self.ask_amount("Enter budget limit amount: $")
        self.manager.set_limit(category, limit)
        self.write("Budget limit set successfully.\n")

    def delete_all(self) -> None:
        answer = self.ask("Are you sure you want to delete all transactions? (y/n): ")
        if answer[0] in "yY":
            self._reset()

    def loop(self) -> None:
        actions = {
            1: self.add_income,
            2: self.add_expense,
            3: self.show_transactions,
            4: self.show_summary,
            5: self.show_monthly,
            6: self.search,
            7: self.edit,
            8: self.set_limit,
            9: self.delete_all,
        }
        while True:
            word = self.ask(_MENU)
            try:
                choice = int(word)
            except ValueError:
                choice = 0
            if choice == 10:
                self.write("Thank you for using Personal Finance Tracker!\n")
                return
            action = actions.get(choice)
            if action is None:
                self.write("Invalid choice! Please try again.\n")
                continue
            try:
                action()
            except ValueError as error:
                self.write(f"Invalid input: {error}\n")


def run(manager: FinanceManager, stdin: TextIO, stdout: TextIO) -> int:
    """Drive the menu over the given streams; returns the exit status."""
    session = _Session(manager, stdin, stdout)
    session.write("\n=== PERSONAL FINANCE TRACKER ===\n")
    try:
        if not session.authenticate():
            return 0
        session.loop()
    except EOFError:
        session.write("\n")
    session.write("Exiting...\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fintrack", description="Personal finance tracker.")
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding the data files (default: current directory)",
    )
    args = parser.parse_args(argv)
    return run(FinanceManager(args.directory), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())