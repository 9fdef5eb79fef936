import pytest

from expense_ledger.ledger import ExpenseLedger
from expense_ledger.storage import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ledger(store):
    return ExpenseLedger(store)


@pytest.fixture
def two_expenses(ledger):
    ledger.add("Coffee", 4.50, "Food", "2024-01-10")
    ledger.add("Bus", 2.00, "Travel", "2024-01-10")
    return ledger
