"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from finance_tracker.config import settings
from finance_tracker.dependencies import get_db
from finance_tracker.schemas.dashboard import CategoryTotal, DashboardStats, Insight, MonthlyTotal
from finance_tracker.services import store
from finance_tracker.services.aggregation_service import category_totals, dashboard_stats, monthly_totals
from finance_tracker.services.insights_service import generate_insights

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    """
    Get all-time totals.
    Returns: total_income, total_expenses, balance, transaction_count, top_categories
    """
    return dashboard_stats(store.list_transactions(db))


@router.get("/monthly", response_model=list[MonthlyTotal])
def get_monthly_totals(
    months: Optional[int] = Query(None, ge=1, le=60),
    db: Session = Depends(get_db)
):
    """
    Get income and expenses per month, oldest first.
    Returns: [{month, income, expenses, balance}, ...]
    """
    return monthly_totals(store.list_transactions(db), months_back=months or settings.trend_months)


@router.get("/categories", response_model=list[CategoryTotal])
def get_category_totals(
    type: str = Query("expense", pattern="^(income|expense|all)$"),
    db: Session = Depends(get_db)
):
    """Get spending (or income) per category with share of the total."""
    return category_totals(store.list_transactions(db), type)


@router.get("/insights", response_model=list[Insight])
def get_insights(db: Session = Depends(get_db)):
    """Get up to four observations about this month's spending."""
    return generate_insights(store.list_transactions(db))
