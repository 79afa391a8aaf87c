"""
Budget API endpoints.
"""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from finance_tracker.dependencies import get_db
from finance_tracker.models.budget import Budget
from finance_tracker.schemas.budget import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetComparisonResponse,
)
from finance_tracker.services import store
from finance_tracker.services.budget_service import compute_budget_comparison

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _get_or_404(db: Session, budget_id: str) -> Budget:
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.get("", response_model=List[BudgetResponse])
def list_budgets(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    db: Session = Depends(get_db)
):
    """List budgets, optionally for a single month."""
    return [BudgetResponse.model_validate(b) for b in store.list_budgets(db, month=month)]


@router.post("", response_model=BudgetResponse, status_code=201)
def create_budget(
    budget: BudgetCreate,
    db: Session = Depends(get_db)
):
    """Create a budget, or overwrite the amount if one exists for the category and month."""
    db_budget = store.upsert_budget(db, budget.category, budget.amount, budget.month)
    return BudgetResponse.model_validate(db_budget)


@router.get("/comparison", response_model=BudgetComparisonResponse)
def get_budget_comparison(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    db: Session = Depends(get_db)
):
    """
    Compare each budget of the month with actual expense spending.
    Returns: month, comparisons (sorted by budgeted then actual, descending), summary
    """
    return compute_budget_comparison(db, month)


@router.put("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    budget_update: BudgetUpdate,
    db: Session = Depends(get_db)
):
    """Replace a budget's category, amount and month."""
    budget = _get_or_404(db, budget_id)

    existing = store.get_budget_for(db, budget_update.category, budget_update.month)
    if existing and existing.id != budget.id:
        raise HTTPException(
            status_code=409,
            detail=f"A budget for {budget_update.category} in {budget_update.month} already exists"
        )

    budget.category = budget_update.category
    budget.amount = budget_update.amount
    budget.month = budget_update.month
    budget.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(budget)

    logger.info("Updated budget %s", budget.id)
    return BudgetResponse.model_validate(budget)


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: str,
    db: Session = Depends(get_db)
):
    """Delete a budget."""
    budget = _get_or_404(db, budget_id)
    db.delete(budget)
    db.commit()

    logger.info("Deleted budget %s", budget_id)
    return None
