"""Display helpers shared by the controller and the Streamlit components."""

import datetime


def format_amount(amount: float, symbol: str = "₹") -> str:
    return f"{symbol}{amount:.2f}"


def format_day(iso_date: str) -> str:
    """"2024-01-10" -> "10 Jan". Unparseable text is returned unchanged."""
    try:
        d = datetime.date.fromisoformat(iso_date)
    except (TypeError, ValueError):
        return iso_date
    return f"{d.day} {d.strftime('%b')}"
