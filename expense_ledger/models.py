"""
models.py - Data model definitions

This file defines the Expense dataclass used across the ledger and UI.
Expenses are serialized to/from plain dicts so the ledger can persist them as
a JSON array (see expense_ledger.storage).
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Expense:
    """
    A single logged expense. Records are never edited once stored.

    Fields:
      - id: stable identifier assigned by the ledger (delete/lookup handle)
      - title: non-empty, already trimmed
      - amount: positive amount in currency units (rounded only for display)
      - category: category name; unknown names are kept as-is
      - date: ISO date string "YYYY-MM-DD"
    """
    id: int
    title: str
    amount: float
    category: str
    date: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict suitable for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount,
            "category": self.category,
            "date": self.date,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Expense":
        """
        Construct an Expense from a dict (inverse of to_dict).
        No coercion happens here; expense_ledger.storage checks the shape first.
        """
        return Expense(
            id=d["id"],
            title=d["title"],
            amount=d["amount"],
            category=d["category"],
            date=d["date"],
        )
