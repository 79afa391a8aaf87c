"""
Category catalog endpoints.
"""

from fastapi import APIRouter
from typing import Optional

from finance_tracker.categories import get_categories
from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.category import CategoryList

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(type: Optional[TransactionType] = None):
    """List predefined categories, optionally only income or expense ones."""
    categories = get_categories(type)
    return CategoryList(items=list(categories), total=len(categories))
