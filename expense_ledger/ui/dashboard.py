"""
dashboard.py - Streamlit UI entrypoint and orchestration

This module wires the UI components (expense_ledger.ui.components) with the
controller (expense_ledger.controller). main() builds the page on every
Streamlit run.

Design notes:
 - One ExpenseController per browser session, kept in st.session_state and
   built once from Settings (FileStore + ExpenseLedger).
 - Deletion is two steps: the button callback marks the row, this run renders
   it as "removing", waits delete_delay seconds, then commits and reruns.
"""

import time

import streamlit as st

from expense_ledger.aggregation import series_frame
from expense_ledger.categories import CATEGORIES
from expense_ledger.controller import ExpenseController, Notification
from expense_ledger.ledger import ExpenseLedger
from expense_ledger.logging_utils import set_level
from expense_ledger.settings import Settings
from expense_ledger.storage import FileStore
from expense_ledger.ui import components

_CONTROLLER = "expense_controller"


def build_controller(settings: Settings) -> ExpenseController:
    store = FileStore(settings.data_dir)
    ledger = ExpenseLedger(store, key=settings.storage_key)
    return ExpenseController(ledger, currency_symbol=settings.currency_symbol)


def _get_controller(settings: Settings) -> ExpenseController:
    if _CONTROLLER not in st.session_state:
        st.session_state[_CONTROLLER] = build_controller(settings)
    return st.session_state[_CONTROLLER]


def _sidebar(controller: ExpenseController):
    store = controller.ledger.store
    if isinstance(store, FileStore):
        st.sidebar.caption(f"Data file: {store.path_for(controller.ledger.key)}")
    st.sidebar.write(f"{len(controller.ledger)} expenses recorded.")

    st.sidebar.markdown("---")
    confirm = st.sidebar.checkbox("I confirm I want to delete all expenses")
    if st.sidebar.button("Clear all expenses", disabled=not confirm):
        controller.clear()
        components.queue_notification(Notification("All expenses cleared."))
        st.rerun()


def main():
    """
    Page layout:
      - Add Expense form
      - running total
      - expense list with delete buttons
      - category breakdown chart
      - sidebar: storage info and "clear all"
    """
    st.set_page_config(page_title="Expense Tracker", page_icon="💸")
    settings = Settings.from_env()
    set_level(settings.log_level)
    controller = _get_controller(settings)
    symbol = settings.currency_symbol

    components.show_pending_notification()
    st.title("💸 Expense Tracker")
    _sidebar(controller)

    components.display_expense_form(controller.form, CATEGORIES, controller.submit, currency_symbol=symbol)

    previous, current = controller.total_change()
    components.display_total(previous, current, currency_symbol=symbol)

    components.display_expense_list(controller.visible_expenses(), controller.mark_removed, currency_symbol=symbol)
    components.display_category_chart(series_frame(controller.chart_series()), currency_symbol=symbol)

    if controller.pending_removals:
        # let the struck-through rows show before the ledger changes
        time.sleep(settings.delete_delay)
        controller.commit_pending()
        st.rerun()


if __name__ == "__main__":
    main()
