"""
Category Pydantic schemas.
"""

from pydantic import BaseModel, ConfigDict, Field

from finance_tracker.models.transaction import TransactionType


class Category(BaseModel):
    """A catalog entry. Instances are immutable."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: str
    type: TransactionType


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[Category]
    total: int
