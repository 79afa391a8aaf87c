"""
Pydantic schemas for API request/response validation.
"""

from finance_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
)
from finance_tracker.schemas.budget import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetStatus,
    BudgetComparison,
    BudgetSummary,
    BudgetComparisonResponse,
)
from finance_tracker.schemas.category import Category, CategoryList
from finance_tracker.schemas.dashboard import (
    MonthlyTotal,
    CategoryTotal,
    TopCategory,
    DashboardStats,
    Insight,
    InsightKind,
)

__all__ = [
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetResponse",
    "BudgetStatus",
    "BudgetComparison",
    "BudgetSummary",
    "BudgetComparisonResponse",
    "Category",
    "CategoryList",
    "MonthlyTotal",
    "CategoryTotal",
    "TopCategory",
    "DashboardStats",
    "Insight",
    "InsightKind",
]
