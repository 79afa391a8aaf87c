"""
Dashboard schemas.
"""

import enum
from pydantic import BaseModel
from typing import List, Optional


class MonthlyTotal(BaseModel):
    month: str
    income: float
    expenses: float
    balance: float


class CategoryTotal(BaseModel):
    category: str
    amount: float
    color: str
    percentage: float


class TopCategory(BaseModel):
    category: str
    amount: float
    percentage: float


class DashboardStats(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    transaction_count: int
    top_categories: List[TopCategory]


class InsightKind(str, enum.Enum):
    warning = "warning"
    info = "info"
    success = "success"
    tip = "tip"


class Insight(BaseModel):
    kind: InsightKind
    title: str
    description: str
    value: Optional[str] = None
