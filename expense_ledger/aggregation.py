"""
aggregation.py - category series for the breakdown chart

Turns the ledger's per-category totals into labeled, colored slices. The UI
hands series_frame(...) to Altair; nothing here knows about the chart library.
"""

import math
from dataclasses import dataclass
from typing import List

import pandas as pd

from expense_ledger.categories import category_label, category_style
from expense_ledger.ledger import ExpenseLedger

SERIES_COLUMNS = ["category", "label", "value", "color", "percent"]


@dataclass(frozen=True)
class ChartSlice:
    category: str
    label: str
    value: float
    color: str
    percent: float


def category_series(ledger: ExpenseLedger) -> List[ChartSlice]:
    """
    One slice per category present in the ledger, in first-appearance order.
    Unknown categories get the Other icon/color but keep their own name.
    """
    totals = ledger.group_by_category()
    grand_total = math.fsum(totals.values())
    series: List[ChartSlice] = []
    for cat, value in totals.items():
        pct = (value / grand_total * 100) if grand_total > 0 else 0.0
        series.append(
            ChartSlice(
                category=cat,
                label=category_label(cat),
                value=value,
                color=category_style(cat).color,
                percent=pct,
            )
        )
    return series


def series_frame(series: List[ChartSlice]) -> pd.DataFrame:
    """DataFrame with SERIES_COLUMNS; empty (but typed) for an empty series."""
    rows = [
        {
            "category": s.category,
            "label": s.label,
            "value": s.value,
            "color": s.color,
            "percent": s.percent,
        }
        for s in series
    ]
    return pd.DataFrame(rows, columns=SERIES_COLUMNS)
