"""
validation.py - checks applied to the "Add expense" form

Rules, in order (the first failing rule wins):
 1. title, trimmed, must be non-empty            -> "missing title"
 2. amount must be a finite number greater than 0 -> "invalid amount"
 3. date must be given (date or ISO string)       -> "missing date"
"""

import datetime
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from expense_ledger.categories import DEFAULT_CATEGORY
from expense_ledger.exceptions import ValidationError

MISSING_TITLE = "missing title"
INVALID_AMOUNT = "invalid amount"
MISSING_DATE = "missing date"


@dataclass(frozen=True)
class ValidatedExpense:
    """Cleaned form values, ready for ExpenseLedger.add."""
    title: str
    amount: float
    category: str
    date: str  # ISO "YYYY-MM-DD"


def _parse_amount(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            number = float(Decimal(value.strip()))
        else:
            return None
    except (InvalidOperation, OverflowError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_date(value: Any) -> Optional[str]:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str) and value.strip():
        try:
            return datetime.date.fromisoformat(value.strip()).isoformat()
        except ValueError:
            return None
    return None


def validate_expense(title: Any, amount: Any, category: Any, date: Any) -> ValidatedExpense:
    """Return cleaned values or raise ValidationError for the first broken rule."""
    clean_title = title.strip() if isinstance(title, str) else ""
    if not clean_title:
        raise ValidationError("title", MISSING_TITLE, "Please enter an expense title")

    number = _parse_amount(amount)
    if number is None or number <= 0:
        raise ValidationError("amount", INVALID_AMOUNT, "Please enter a valid amount")

    iso_date = _parse_date(date)
    if iso_date is None:
        raise ValidationError("date", MISSING_DATE, "Please select a date")

    clean_category = category.strip() if isinstance(category, str) else ""
    return ValidatedExpense(
        title=clean_title,
        amount=number,
        category=clean_category or DEFAULT_CATEGORY,
        date=iso_date,
    )
