"""
ledger.py - core ledger logic and persistence

Responsibilities:
 - keep the in-memory, insertion-ordered list of Expense objects
 - load it from a KeyValueStore (fail soft) and save the full list after
   every mutation
 - provide derived views consumed by the UI: total, totals per category
"""

import datetime
import math
from typing import Dict, Iterator, List

from expense_ledger.exceptions import PersistenceReadError, RecordNotFoundError
from expense_ledger.logging_utils import get_logger
from expense_ledger.models import Expense
from expense_ledger.storage import KeyValueStore, deserialize_expenses, serialize_expenses

logger = get_logger(__name__)

DEFAULT_KEY = "expenses"


class ExpenseLedger:
    """
    Ordered collection of expenses bound to one store key.
    The UI builds one ledger at startup and hands it to the controller.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY):
        self.store = store
        self.key = key
        self._expenses: List[Expense] = []
        # ids are not reused within a session; after a reload the counter
        # restarts above the highest stored id
        self._next_id = 1
        self.load()

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(list(self._expenses))

    def load(self) -> List[Expense]:
        """
        Replace the in-memory list with what the store holds.
        Absent or unreadable data yields an empty ledger; nothing is raised.
        """
        raw = self.store.get(self.key)
        if raw is None or not raw.strip():
            expenses: List[Expense] = []
        else:
            try:
                expenses = deserialize_expenses(raw)
            except PersistenceReadError as exc:
                logger.warning("Ignoring stored expenses under %r: %s", self.key, exc)
                expenses = []
        self._expenses = expenses
        max_id = max((e.id for e in expenses), default=0)
        self._next_id = max(self._next_id, max_id + 1)
        logger.info("Loaded %d expenses from %r", len(expenses), self.key)
        return list(expenses)

    def save(self):
        """Persist the whole list under the ledger key."""
        logger.info("Saving %d expenses to %r", len(self._expenses), self.key)
        self.store.set(self.key, serialize_expenses(self._expenses))

    def add(self, title: str, amount: float, category: str, date: str) -> Expense:
        """
        Append a new expense and persist.
        Inputs are expected to be validated already (see expense_ledger.validation);
        violating the record invariants here is a programming error.
        """
        title = (title or "").strip()
        if not title:
            raise ValueError("expense title must not be empty")
        if isinstance(amount, bool) or not math.isfinite(float(amount)) or float(amount) <= 0:
            raise ValueError(f"expense amount must be positive, got {amount!r}")
        datetime.date.fromisoformat(date)

        exp = Expense(
            id=self._next_id,
            title=title,
            amount=float(amount),
            category=category,
            date=date,
        )
        self._next_id += 1
        self._expenses.append(exp)
        try:
            self.save()
        except Exception:
            self._expenses.pop()
            raise
        logger.info("Added expense id=%s (%s, %.2f)", exp.id, exp.category, exp.amount)
        return exp

    def get(self, expense_id: int) -> Expense:
        for e in self._expenses:
            if e.id == expense_id:
                return e
        raise RecordNotFoundError(f"Expense id={expense_id} not found")

    def list_expenses(self) -> List[Expense]:
        """Return a copy of the expenses in insertion order."""
        return list(self._expenses)

    def remove(self, expense_id: int) -> Expense:
        """Remove the expense with this id, keep the others in order, persist."""
        for i, e in enumerate(self._expenses):
            if e.id == expense_id:
                return self._pop(i)
        raise RecordNotFoundError(f"Expense id={expense_id} not found")

    def remove_at(self, index: int) -> Expense:
        """
        Remove by position. Requires 0 <= index < len(ledger); negative
        indexes are rejected rather than counted from the end.
        """
        if not 0 <= index < len(self._expenses):
            raise IndexError(f"expense position {index} out of range (size {len(self._expenses)})")
        return self._pop(index)

    def _pop(self, index: int) -> Expense:
        removed = self._expenses.pop(index)
        try:
            self.save()
        except Exception:
            # keep memory and store consistent when the write fails
            self._expenses.insert(index, removed)
            raise
        logger.info("Deleted expense id=%s. Remaining expenses=%d.", removed.id, len(self._expenses))
        return removed

    def clear(self):
        """Drop every expense and persist the empty list."""
        previous = self._expenses
        self._expenses = []
        try:
            self.save()
        except Exception:
            self._expenses = previous
            raise

    def total(self) -> float:
        """Sum of all amounts (0.0 when empty). Rounding is left to display code."""
        return math.fsum(e.amount for e in self._expenses)

    def group_by_category(self) -> Dict[str, float]:
        """
        Sum amounts per stored category, in order of first appearance.
        Unknown categories keep their own key.
        """
        grouped: Dict[str, List[float]] = {}
        for e in self._expenses:
            grouped.setdefault(e.category, []).append(e.amount)
        return {cat: math.fsum(amounts) for cat, amounts in grouped.items()}
