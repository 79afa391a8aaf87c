"""
Queries and writes for transactions and budgets.

Each write runs in its own session transaction; the (category, month) unique
constraint on budgets keeps concurrent upserts from duplicating rows.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from finance_tracker.models.budget import Budget
from finance_tracker.models.transaction import Transaction

logger = logging.getLogger(__name__)


def list_transactions(db: Session) -> List[Transaction]:
    """All transactions, most recent date first, then most recently created."""
    return db.query(Transaction).order_by(
        Transaction.date.desc(),
        Transaction.created_at.desc()
    ).all()


def list_budgets(db: Session, month: Optional[str] = None) -> List[Budget]:
    """All budgets, or only those of `month` (YYYY-MM) when given."""
    query = db.query(Budget)
    if month:
        query = query.filter(Budget.month == month)
    return query.order_by(Budget.month.desc(), Budget.category).all()


def get_budget_for(db: Session, category: str, month: str) -> Optional[Budget]:
    return db.query(Budget).filter(
        Budget.category == category,
        Budget.month == month
    ).first()


def upsert_budget(db: Session, category: str, amount: Decimal, month: str) -> Budget:
    """
    Create a budget, or overwrite the amount of the existing budget for the
    same category and month.
    """
    budget = get_budget_for(db, category, month)
    if budget:
        budget.amount = amount
        budget.updated_at = datetime.utcnow()
        logger.info("Updated budget %s for %s in %s", budget.id, category, month)
    else:
        budget = Budget(category=category, amount=amount, month=month)
        db.add(budget)
        logger.info("Created budget for %s in %s", category, month)

    db.commit()
    db.refresh(budget)
    return budget
