"""
Budget and budget comparison schemas.
"""

import enum
from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal

MONTH_PATTERN = r"^\d{4}-\d{2}$"


class BudgetBase(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    month: str = Field(..., pattern=MONTH_PATTERN, description="YYYY-MM format")


class BudgetCreate(BudgetBase):
    """Creating a budget for an existing (category, month) overwrites its amount."""
    pass


class BudgetUpdate(BudgetBase):
    pass


class BudgetResponse(BaseModel):
    id: str
    category: str
    amount: float
    month: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BudgetStatus(str, enum.Enum):
    under = "under"
    on_track = "on-track"
    over = "over"


class BudgetComparison(BaseModel):
    category: str
    budgeted: float
    actual: float
    percentage: float
    status: BudgetStatus


class BudgetSummary(BaseModel):
    total_budgeted: float
    total_actual: float
    percentage: float
    status: BudgetStatus
    categories_with_budget: int
    categories_over_budget: int


class BudgetComparisonResponse(BaseModel):
    month: str
    comparisons: list[BudgetComparison]
    summary: BudgetSummary
