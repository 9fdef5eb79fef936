"""
categories.py - the fixed category table

Each category has a display icon and a chart color. Names outside the table
are kept as stored but displayed with the "Other" entry.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class CategoryStyle:
    icon: str
    color: str


DEFAULT_CATEGORY = "Other"

# order is the order shown in the category dropdown
CATEGORY_STYLES: Dict[str, CategoryStyle] = {
    "Food": CategoryStyle("🍔", "#FF6B6B"),
    "Travel": CategoryStyle("✈️", "#4ECDC4"),
    "Shopping": CategoryStyle("🛍️", "#45B7D1"),
    "Bills": CategoryStyle("💡", "#96CEB4"),
    "Entertainment": CategoryStyle("🎬", "#FFEAA7"),
    "Health": CategoryStyle("🏥", "#DDA0DD"),
    "Education": CategoryStyle("📚", "#98D8C8"),
    DEFAULT_CATEGORY: CategoryStyle("📦", "#F7DC6F"),
}

CATEGORIES: List[str] = list(CATEGORY_STYLES)


def category_style(name: str) -> CategoryStyle:
    """Return the icon/color for a category, falling back to the Other entry."""
    return CATEGORY_STYLES.get(name, CATEGORY_STYLES[DEFAULT_CATEGORY])


def category_label(name: str) -> str:
    """Display label such as "🍔 Food"; unknown names keep their own text."""
    return f"{category_style(name).icon} {name}"
