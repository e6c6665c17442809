import io

import pytest

from fintrack.cli import main, run
from fintrack.ledger import MAX_TRANSACTIONS, FinanceManager

password = "password"


def _run(manager, text):
    out = io.StringIO()
    code = run(manager, io.StringIO(text), out)
    return code, out.getvalue()


@pytest.fixture
def manager(tmp_path):
    fm = FinanceManager(tmp_path)
    fm.set_password(password)
    return fm


def test_first_run_sets_password(tmp_path):
    fm = FinanceManager(tmp_path)
    code, out = _run(fm, f"{password}\n{password}\n10\n")
    assert code == 0
    assert "Password set successfully." in out
    assert "Access granted." in out
    assert fm.check_password(password)
    assert out.endswith("Exiting...\n")


def test_wrong_password_stops(manager):
    code, out = _run(manager, "wrong\n1\n")
    assert code == 0
    assert "Incorrect password. Exiting..." in out
    assert "1. Add Income" not in out


def test_add_income_and_view(manager):
    _, out = _run(manager, f"{password}\n1\n500\nSalary\n2024-01-05\n3\n10\n")
    assert "--- TRANSACTION HISTORY ---" in out
    assert "1.\tSalary\t\t$500\t\t2024-01-05\n" in out
    assert [(e.category, e.amount, e.date) for e in manager.entries()] == [
        ("Salary", 500.0, "2024-01-05")
    ]
    assert "Thank you for using Personal Finance Tracker!" in out


def test_summary(manager):
    script = f"{password}\n1\n300\nSalary\n2024-01-01\n2\n100\nFood\n2024-01-02\n4\n10\n"
    _, out = _run(manager, script)
    assert "Total Income: $300\n" in out
    assert "Total Expenses: $100\n" in out
    assert "Net Balance: $200\n" in out


def test_budget_warning(manager):
    manager.set_limit("Food", 50)
    _, out = _run(manager, f"{password}\n2\n80\nFood\n2024-02-01\n10\n")
    assert "Warning: Budget limit exceeded for category: Food" in out
    assert len(manager.entries()) == 1


def test_budget_set_from_menu(manager):
    _, out = _run(manager, f"{password}\n8\nRent\n1000\n10\n")
    assert "Budget limit set successfully." in out
    assert manager.limit_exceeded("Rent", 1500)
    assert not manager.limit_exceeded("Rent", 500)


def test_limit_reached_and_reset(manager):
    for _ in range(MAX_TRANSACTIONS):
        manager.add_income(1, "Gift", "2024-03-03")
    _, out = _run(manager, f"{password}\n1\n5\nSalary\n2024-03-04\n1\n10\n")
    assert "Transaction limit reached!" in out
    assert "All transactions have been deleted." in out
    assert manager.entries() == []


def test_search(manager):
    manager.add_income(10, "Bonus", "2024-05-05")
    manager.add_expense(4, "Food", "2024-05-06")
    _, out = _run(manager, f"{password}\n6\n2024-05-06\n6\n1999-01-01\n10\n")
    assert "Food\t$4\t2024-05-06\n" in out
    assert "Bonus\t$10" not in out
    assert "No transactions found on this date." in out


def test_edit(manager):
    manager.add_income(10, "Bonus", "2024-05-05")
    manager.add_expense(4, "Food", "2024-05-06")
    _, out = _run(manager, f"{password}\n7\n2\nBills\n7\n2024-05-07\n10\n")
    assert "Transaction updated successfully." in out
    assert [(e.category, e.amount, e.date) for e in manager.entries()] == [
        ("Bonus", 10.0, "2024-05-05"),
        ("Bills", 7.0, "2024-05-07"),
    ]


def test_edit_out_of_range(manager):
    manager.add_income(10, "Bonus", "2024-05-05")
    _, out = _run(manager, f"{password}\n7\n5\n10\n")
    assert "Transaction not found." in out
    assert len(manager.entries()) == 1


def test_monthly(manager):
    manager.add_income(10, "Bonus", "2024-01-15")
    _, out = _run(manager, f"{password}\n5\n10\n")
    assert "==== JANUARY ====\nBonus    10    2024-01-15\n" in out
    assert "No Transactions In The Month Of February" in out
    assert "No Transactions In The Month Of January" not in out


def test_delete_all_confirmed(manager):
    manager.add_income(10, "Bonus", "2024-01-15")
    _, out = _run(manager, f"{password}\n9\ny\n10\n")
    assert "All transactions have been deleted." in out
    assert manager.entries() == []


def test_delete_all_declined(manager):
    manager.add_income(10, "Bonus", "2024-01-15")
    _run(manager, f"{password}\n9\nn\n10\n")
    assert len(manager.entries()) == 1


def test_invalid_choice(manager):
    _, out = _run(manager, f"{password}\n42\nabc\n10\n")
    assert out.count("Invalid choice! Please try again.") == 2


def test_invalid_amount_returns_to_menu(manager):
    _, out = _run(manager, f"{password}\n1\nlots\n10\n")
    assert "Invalid input" in out
    assert manager.entries() == []


def test_end_of_input_exits(manager):
    code, out = _run(manager, f"{password}\n1\n")
    assert code == 0
    assert out.endswith("Exiting...\n")


def test_main_uses_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{password}\n{password}\n1\n20\nGift\n2024-06-01\n10\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Access granted." in capsys.readouterr().out
    entries = FinanceManager(tmp_path).entries()
    assert [(e.category, e.amount) for e in entries] == [("Gift", 20.0)]