"""Personal finance tracker keeping income, expenses, budgets and a password in text files."""

__version__ = "0.1.0"
__all__ = ["book", "cli", "ledger", "transaction"]