"""
components.py - reusable Streamlit components / forms / displays

This module contains pure-UI helpers used by the dashboard:
 - display_expense_form(form, categories, on_submit)
 - display_total / display_expense_list / display_category_chart
 - show_pending_notification (toasts queued before a rerun)

The form does not validate anything itself: it hands the raw widget values to
on_submit (ExpenseController.submit) and renders the returned notification.
After an accepted submission the widgets are recreated under a new key so the
form comes back empty; after a rejection the typed values stay in place.
"""

from typing import Callable, List

import altair as alt
import pandas as pd
import streamlit as st

from expense_ledger.categories import category_label
from expense_ledger.controller import ExpenseRow, FormState, Notification, SubmissionResult
from expense_ledger.formatting import format_amount, format_day

_FORM_GENERATION = "expense_form_generation"
_NOTIFICATION = "pending_notification"

_TOAST_ICONS = {"success": "✅", "error": "⚠️"}


def queue_notification(notification: Notification):
    """Keep a notification across st.rerun(); shown by show_pending_notification."""
    st.session_state[_NOTIFICATION] = notification


def show_pending_notification():
    notification = st.session_state.pop(_NOTIFICATION, None)
    if notification is not None:
        st.toast(notification.message, icon=_TOAST_ICONS.get(notification.kind))


def display_expense_form(
    form: FormState,
    categories: List[str],
    on_submit: Callable[..., SubmissionResult],
    currency_symbol: str = "₹",
):
    """
    Display the 'Add Expense' form.

    Parameters:
      - form: values to prefill (controller.form)
      - categories: options for the category dropdown
      - on_submit: callable(title, amount, category, date) -> SubmissionResult
    """
    st.header("Add Expense")
    gen = st.session_state.setdefault(_FORM_GENERATION, 0)
    cat_index = categories.index(form.category) if form.category in categories else 0

    # st.form submits on Enter as well as on the button
    with st.form(key=f"expense_form_{gen}"):
        title = st.text_input("Expense title", value=form.title, placeholder="e.g. Coffee")
        amount = st.number_input(
            f"Amount ({currency_symbol})",
            min_value=0.0,
            value=form.amount,
            step=0.01,
            format="%.2f",
            placeholder="0.00",
        )
        category = st.selectbox("Category", options=categories, index=cat_index, format_func=category_label)
        date_val = st.date_input("Date", value=form.date)
        submitted = st.form_submit_button("Add Expense")

        if submitted:
            result = on_submit(title, amount, category, date_val)
            if result.accepted:
                st.session_state[_FORM_GENERATION] = gen + 1
                queue_notification(result.notification)
                st.rerun()
            else:
                # point at the offending field; Streamlit cannot move keyboard focus
                st.error(f"{result.notification.message} ({result.field}).")
                st.toast(result.notification.message, icon=_TOAST_ICONS["error"])


def display_total(previous: float, current: float, currency_symbol: str = "₹"):
    diff = round(current - previous, 2)
    st.metric(
        "Total spent",
        format_amount(current, currency_symbol),
        delta=f"{diff:+.2f}" if diff else None,
        delta_color="inverse",
    )


def display_expense_list(
    rows: List[ExpenseRow],
    on_delete: Callable[[int], None],
    currency_symbol: str = "₹",
):
    """One line per expense with a delete button. Rows being removed are struck through."""
    st.header("Expenses")
    if not rows:
        st.info("No expenses yet. Add your first expense above!")
        return

    for row in rows:
        e = row.expense
        info_col, button_col = st.columns([8, 1])
        title = f"~~{e.title}~~ *(removing…)*" if row.removing else f"**{e.title}**"
        details = " · ".join(
            [format_amount(e.amount, currency_symbol), category_label(e.category), format_day(e.date)]
        )
        info_col.markdown(f"{title}  \n{details}")
        button_col.button(
            "🗑️",
            key=f"delete_{e.id}",
            help="Delete expense",
            on_click=on_delete,
            args=(e.id,),
            disabled=row.removing,
        )


def display_category_chart(frame: pd.DataFrame, currency_symbol: str = "₹"):
    """
    Donut chart of the category series (expense_ledger.aggregation.series_frame).
    Colors come from the category table; an empty frame shows a placeholder.
    The chart is rebuilt from scratch on every run.
    """
    st.header("Spending by category")
    if frame.empty:
        st.info("No data to display")
        return

    color_scale = alt.Scale(domain=list(frame["label"]), range=list(frame["color"]))
    donut = alt.Chart(frame).mark_arc(innerRadius=60, stroke="#fff", strokeWidth=3).encode(
        theta=alt.Theta(field="value", type="quantitative"),
        color=alt.Color(
            field="label",
            type="nominal",
            scale=color_scale,
            sort=list(frame["label"]),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("label:N", title="Category"),
            alt.Tooltip("value:Q", title=f"Amount ({currency_symbol})", format=".2f"),
            alt.Tooltip("percent:Q", title="Share (%)", format=".1f"),
        ],
    )
    st.altair_chart(donut, use_container_width=True)
