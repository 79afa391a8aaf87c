"""
Predefined category catalog.

The table is built once at import time and never mutated; look entries up by
name with `get_category`.
"""

from types import MappingProxyType
from typing import Optional, Tuple

from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.category import Category

DEFAULT_COLOR = "#8884d8"

_CATEGORY_DATA = [
    # Expense categories
    {"name": "Food & Dining", "color": "#FF6B6B", "icon": "🍽️", "type": "expense"},
    {"name": "Transportation", "color": "#4ECDC4", "icon": "🚗", "type": "expense"},
    {"name": "Shopping", "color": "#45B7D1", "icon": "🛍️", "type": "expense"},
    {"name": "Entertainment", "color": "#96CEB4", "icon": "🎬", "type": "expense"},
    {"name": "Bills & Utilities", "color": "#FFEAA7", "icon": "⚡", "type": "expense"},
    {"name": "Healthcare", "color": "#DDA0DD", "icon": "🏥", "type": "expense"},
    {"name": "Education", "color": "#98D8C8", "icon": "📚", "type": "expense"},
    {"name": "Travel", "color": "#F7DC6F", "icon": "✈️", "type": "expense"},
    {"name": "Home & Garden", "color": "#BB8FCE", "icon": "🏠", "type": "expense"},
    {"name": "Personal Care", "color": "#85C1E9", "icon": "💄", "type": "expense"},
    {"name": "Insurance", "color": "#F8C471", "icon": "🛡️", "type": "expense"},
    {"name": "Taxes", "color": "#EC7063", "icon": "📋", "type": "expense"},
    {"name": "Gifts & Donations", "color": "#A9DFBF", "icon": "🎁", "type": "expense"},
    {"name": "Other Expenses", "color": "#D5DBDB", "icon": "📦", "type": "expense"},
    # Income categories
    {"name": "Salary", "color": "#58D68D", "icon": "💼", "type": "income"},
    {"name": "Freelance", "color": "#5DADE2", "icon": "💻", "type": "income"},
    {"name": "Business", "color": "#F4D03F", "icon": "🏢", "type": "income"},
    {"name": "Investments", "color": "#AF7AC5", "icon": "📈", "type": "income"},
    {"name": "Rental Income", "color": "#76D7C4", "icon": "🏘️", "type": "income"},
    {"name": "Other Income", "color": "#85C1E9", "icon": "💰", "type": "income"},
]

CATEGORIES: Tuple[Category, ...] = tuple(Category(**data) for data in _CATEGORY_DATA)
_BY_NAME = MappingProxyType({category.name: category for category in CATEGORIES})


def get_category(name: str) -> Optional[Category]:
    """Look up a catalog entry by exact name."""
    return _BY_NAME.get(name)


def get_categories(category_type: Optional[TransactionType] = None) -> Tuple[Category, ...]:
    """All catalog entries, optionally restricted to income or expense."""
    if category_type is None:
        return CATEGORIES
    return tuple(c for c in CATEGORIES if c.type == category_type)


def get_category_color(name: str) -> str:
    category = _BY_NAME.get(name)
    return category.color if category else DEFAULT_COLOR
