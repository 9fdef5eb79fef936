"""
expense_ledger - personal expense tracker

Public entry points used by the Streamlit UI and the tests.
"""

from expense_ledger.ledger import ExpenseLedger
from expense_ledger.models import Expense
from expense_ledger.storage import FileStore, MemoryStore

__all__ = ["Expense", "ExpenseLedger", "FileStore", "MemoryStore"]
