"""
Database models package.
"""

from finance_tracker.models.transaction import Transaction, TransactionType
from finance_tracker.models.budget import Budget

__all__ = [
    "Transaction",
    "TransactionType",
    "Budget",
]
