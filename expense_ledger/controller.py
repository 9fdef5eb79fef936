"""
controller.py - presentation logic independent of Streamlit

The controller sits between the UI widgets and the ledger:
 - submit(): validates the form, adds the expense, resets the form and
   returns the notification to show
 - mark_removed() / commit_removal(): the two steps of a delete; the UI shows
   the row as "removing" between them
 - total(), chart_series(), visible_expenses(): data for re-rendering
"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from expense_ledger.aggregation import ChartSlice, category_series
from expense_ledger.categories import CATEGORIES
from expense_ledger.exceptions import ValidationError
from expense_ledger.formatting import format_amount
from expense_ledger.ledger import ExpenseLedger
from expense_ledger.logging_utils import get_logger
from expense_ledger.models import Expense
from expense_ledger.validation import validate_expense

logger = get_logger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: str = "success"  # "success" | "error"


@dataclass
class FormState:
    """Values currently shown in the add-expense form."""
    title: str = ""
    amount: Any = None  # raw widget value, may be unparsed text
    category: str = CATEGORIES[0]
    date: Optional[datetime.date] = None


@dataclass(frozen=True)
class SubmissionResult:
    state: SubmissionState
    notification: Notification
    expense: Optional[Expense] = None
    field: Optional[str] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.state is SubmissionState.ACCEPTED


@dataclass(frozen=True)
class ExpenseRow:
    expense: Expense
    removing: bool = False


class ExpenseController:
    def __init__(
        self,
        ledger: ExpenseLedger,
        currency_symbol: str = "₹",
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self.ledger = ledger
        self.currency_symbol = currency_symbol
        self._today = today
        self.state = SubmissionState.IDLE
        self.form = FormState(date=today())
        self._pending: List[int] = []
        self._last_total = ledger.total()
        self._shown_total = self._last_total

    def submit(self, title: Any, amount: Any, category: Any, date: Any) -> SubmissionResult:
        """
        Run one submission attempt. A rejected attempt leaves the ledger and
        the form untouched; an accepted one adds the expense and resets the form.
        """
        self.state = SubmissionState.VALIDATING
        self.form = FormState(
            title=title if isinstance(title, str) else "",
            amount=amount,
            category=category or self.form.category,
            date=date,
        )
        try:
            valid = validate_expense(title, amount, category, date)
        except ValidationError as exc:
            self.state = SubmissionState.REJECTED
            logger.debug("Rejected expense (%s)", exc.reason)
            return SubmissionResult(
                state=self.state,
                notification=Notification(exc.message, kind="error"),
                field=exc.field,
                reason=exc.reason,
            )

        expense = self.ledger.add(valid.title, valid.amount, valid.category, valid.date)
        self.state = SubmissionState.ACCEPTED
        self.form = FormState(category=self.form.category, date=self._today())
        message = f'Added "{expense.title}" for {format_amount(expense.amount, self.currency_symbol)}'
        return SubmissionResult(state=self.state, notification=Notification(message), expense=expense)

    @property
    def pending_removals(self) -> List[int]:
        return list(self._pending)

    def mark_removed(self, expense_id: int) -> Expense:
        """First delete step: flag the row for display only. The ledger is unchanged."""
        expense = self.ledger.get(expense_id)
        if expense_id not in self._pending:
            self._pending.append(expense_id)
        return expense

    def commit_removal(self, expense_id: int) -> Expense:
        """Second delete step: remove from the ledger (and persist)."""
        removed = self.ledger.remove(expense_id)
        if expense_id in self._pending:
            self._pending.remove(expense_id)
        return removed

    def commit_pending(self) -> List[Expense]:
        return [self.commit_removal(expense_id) for expense_id in self.pending_removals]

    def clear(self):
        self._pending = []
        self.ledger.clear()

    def visible_expenses(self) -> List[ExpenseRow]:
        pending = set(self._pending)
        return [ExpenseRow(e, removing=e.id in pending) for e in self.ledger.list_expenses()]

    def total(self) -> float:
        return self.ledger.total()

    def total_change(self) -> Tuple[float, float]:
        """
        (previous, current) total across successive renders; the UI shows the
        difference as the metric delta.
        """
        current = self.ledger.total()
        if current != self._shown_total:
            self._last_total = self._shown_total
            self._shown_total = current
        return self._last_total, current

    def chart_series(self) -> List[ChartSlice]:
        return category_series(self.ledger)
