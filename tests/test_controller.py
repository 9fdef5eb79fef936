import datetime

import pytest

from expense_ledger.controller import ExpenseController, FormState, SubmissionState
from expense_ledger.exceptions import RecordNotFoundError

TODAY = datetime.date(2024, 1, 15)


@pytest.fixture
def controller(ledger):
    return ExpenseController(ledger, today=lambda: TODAY)


def test_starts_idle_with_todays_date(controller):
    assert controller.state is SubmissionState.IDLE
    assert controller.form == FormState(date=TODAY)


def test_accepted_submission(controller, ledger):
    result = controller.submit(" Coffee ", 4.5, "Food", datetime.date(2024, 1, 10))

    assert result.accepted
    assert controller.state is SubmissionState.ACCEPTED
    assert result.notification.kind == "success"
    assert result.notification.message == 'Added "Coffee" for ₹4.50'
    assert result.expense == ledger.list_expenses()[0]
    assert result.expense.date == "2024-01-10"
    # form is cleared, category kept, date back to today
    assert controller.form == FormState(title="", amount=None, category="Food", date=TODAY)


def test_currency_symbol_in_notification(ledger):
    controller = ExpenseController(ledger, currency_symbol="$", today=lambda: TODAY)
    result = controller.submit("Bus", "2", "Travel", TODAY)
    assert result.notification.message == 'Added "Bus" for $2.00'


@pytest.mark.parametrize(
    "title, amount, date, field, message",
    [
        ("", 4.5, TODAY, "title", "Please enter an expense title"),
        ("Coffee", 0, TODAY, "amount", "Please enter a valid amount"),
        ("Coffee", -3, TODAY, "amount", "Please enter a valid amount"),
        ("Coffee", "abc", TODAY, "amount", "Please enter a valid amount"),
        ("Coffee", 10**400, TODAY, "amount", "Please enter a valid amount"),
        ("Coffee", 4.5, None, "date", "Please select a date"),
    ],
)
def test_rejected_submission(controller, ledger, store, title, amount, date, field, message):
    result = controller.submit(title, amount, "Shopping", date)

    assert not result.accepted
    assert controller.state is SubmissionState.REJECTED
    assert result.field == field
    assert result.notification.kind == "error"
    assert result.notification.message == message
    assert result.expense is None
    assert len(ledger) == 0
    assert store.get("expenses") is None
    # typed values stay in the form
    assert controller.form.amount == amount
    assert controller.form.category == "Shopping"


def test_two_step_deletion(controller, two_expenses):
    coffee, bus = two_expenses.list_expenses()

    controller.mark_removed(coffee.id)
    assert controller.pending_removals == [coffee.id]
    assert len(two_expenses) == 2
    rows = controller.visible_expenses()
    assert [(r.expense.title, r.removing) for r in rows] == [("Coffee", True), ("Bus", False)]

    removed = controller.commit_removal(coffee.id)
    assert removed == coffee
    assert controller.pending_removals == []
    assert two_expenses.list_expenses() == [bus]
    assert controller.total() == 2.00


def test_mark_unknown_expense(controller):
    with pytest.raises(RecordNotFoundError):
        controller.mark_removed(42)
    assert controller.pending_removals == []


def test_commit_pending_removes_all_marked(controller, two_expenses):
    for e in two_expenses.list_expenses():
        controller.mark_removed(e.id)
        controller.mark_removed(e.id)
    removed = controller.commit_pending()
    assert [e.title for e in removed] == ["Coffee", "Bus"]
    assert len(two_expenses) == 0


def test_total_change_tracks_previous_total(controller):
    assert controller.total_change() == (0.0, 0.0)
    controller.submit("Coffee", 4.5, "Food", TODAY)
    assert controller.total_change() == (0.0, 4.5)
    # unchanged between renders
    assert controller.total_change() == (0.0, 4.5)
    controller.submit("Bus", 2, "Travel", TODAY)
    assert controller.total_change() == (4.5, 6.5)


def test_chart_series_follows_ledger(controller, two_expenses):
    assert [s.category for s in controller.chart_series()] == ["Food", "Travel"]
    controller.clear()
    assert controller.chart_series() == []
    assert controller.total() == 0
