# fintrack

A small personal finance tracker for the terminal. It keeps income, expenses,
budget limits and a password in plain text files in one directory, so the data
stays readable and easy to back up.

## Installation

```
pip install .
```

## Usage

Start the interactive tracker:

```
fintrack
```

By default the data files are kept in the current directory. Use
`-d`/`--directory` to choose another one (it must already exist):

```
fintrack --directory my-finances
```

On first start you are asked to choose a password; after that you must enter
it each time. A wrong password ends the program. The menu then offers:

1. Add Income
2. Add Expense
3. View Transactions
4. View Summary
5. View Monthly Report
6. Search Transactions
7. Edit Transaction
8. Set Budget Limit
9. Delete All Transactions
10. Exit

Input is read as whitespace-separated words, so a category, a date and the
password must each be a single word. Dates are written as `YYYY-MM-DD`.

- Adding an expense prints a warning when it takes a category past a budget
  limit set for it; the expense is still recorded.
- Up to 100 transactions can be added per session; after that you are offered
  a reset of all data.
- The summary totals everything stored in `income.txt` and `expense.txt`, not
  only this session's entries, and saves the totals to `summary.txt`.
- The monthly report lists the stored transactions for each month from
  January to December.
- Editing replaces one numbered transaction in `projectdata.txt` only; the
  income and expense files, and so the summary, are left unchanged.
- Deleting all transactions empties the income, expense, transaction and
  summary files. Budget limits and the password are kept.

## Data files

Each record line holds `category amount date`:

- `income.txt` and `expense.txt`: income and expense records
- `projectdata.txt`: every transaction, in the order entered
- `summary.txt`: income, expenses and net balance from the last summary
- `budget.txt`: `category limit` lines
- `savedpass.txt`: the password, stored as plain text

## Library use

```python
from fintrack.ledger import FinanceManager

manager = FinanceManager("my-finances")
manager.add_income(2500, "Salary", "2024-01-31")
over_budget = manager.add_expense(900, "Rent", "2024-01-01")
print(manager.summary())          # Summary(income=..., expenses=..., net=...)
for entry in manager.search("2024-01-01"):
    print(entry)                  # Entry(category=..., amount=..., date=...)
```

`FinanceManager` also offers `entries()`, `monthly(month)`,
`edit(number, category, amount, date)`, `set_limit(category, limit)`,
`limit_exceeded(category, amount)`, `reset()`, and `set_password`,
`check_password` and `has_password`. Adding past the session limit raises
`TransactionLimitError`; a category or date that is empty or contains
whitespace raises `ValueError`.

`fintrack.transaction` defines the `Transaction`, `Income` and `Expense`
records, whose `describe()` gives a one-line description, and
`format_amount`, which prints amounts with up to six significant digits.

`fintrack.book.FinanceBook` keeps a simpler in-memory list of typed
transactions with running totals, appending each one to `income.txt` or
`expense.txt` as `date,category,amount`. Because that layout differs from the
one `FinanceManager` uses, do not point both at the same directory.
`validate_entry` rejects an empty category or a non-positive amount with
`ValidationError`; `format_summary` and `format_row` render totals and table
rows with two decimal places.

## What it does not do

There is no graphical window: `FinanceBook`, `validate_entry`,
`format_summary` and `format_row` provide the record keeping and text for one,
but the package itself only has the terminal menu. The password guards the
menu only; the data files are not encrypted.

## Running the tests

```
pip install ".[test]"
pytest
```