"""Budget-vs-actual comparison for a single month."""

import logging
import re
from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from finance_tracker.exceptions import InvalidInputError
from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.budget import (
    BudgetComparison,
    BudgetComparisonResponse,
    BudgetStatus,
    BudgetSummary,
)
from finance_tracker.services import store
from finance_tracker.services.aggregation_service import ZERO, share, sum_by_category, to_decimal
from finance_tracker.services.dates import month_key

logger = logging.getLogger(__name__)

MONTH_RE = re.compile(r"^\d{4}-\d{2}$", re.ASCII)

UNDER_THRESHOLD = Decimal("80")
OVER_THRESHOLD = Decimal("100")


def validate_month(month: Optional[str]) -> str:
    """Return `month` unchanged if it is a YYYY-MM string, else raise InvalidInputError."""
    if not month:
        raise InvalidInputError("Month parameter is required (format: YYYY-MM)")
    if not MONTH_RE.fullmatch(month):
        raise InvalidInputError("Invalid month format. Use YYYY-MM")
    return month


def classify(percentage: Decimal) -> BudgetStatus:
    if percentage <= UNDER_THRESHOLD:
        return BudgetStatus.under
    if percentage > OVER_THRESHOLD:
        return BudgetStatus.over
    return BudgetStatus.on_track


def build_budget_comparison(
    month: Optional[str],
    budgets: Iterable,
    transactions: Iterable
) -> BudgetComparisonResponse:
    """
    Join the month's budgets with the month's actual expense spend.

    Budgets and transactions outside `month` (and income transactions) are
    ignored, so callers may pass unfiltered lists. Categories with spend but
    no budget are reported as over budget with budgeted=0.
    """
    month = validate_month(month)

    month_budgets = [b for b in budgets if b.month == month]
    month_expenses = [
        t for t in transactions
        if t.type == TransactionType.expense and month_key(t.date) == month
    ]
    actual_spending = sum_by_category(month_expenses)

    # (category, budgeted, actual, percentage, status) kept as Decimal for sorting
    rows = []
    for budget in month_budgets:
        budgeted = to_decimal(budget.amount)
        actual = actual_spending.get(budget.category, ZERO)
        percentage = share(actual, budgeted)
        rows.append((budget.category, budgeted, actual, percentage, classify(percentage)))

    budgeted_categories = {b.category for b in month_budgets}
    for category, actual in actual_spending.items():
        if category not in budgeted_categories:
            rows.append((category, ZERO, actual, ZERO, BudgetStatus.over))

    rows.sort(key=lambda row: (row[1], row[2]), reverse=True)

    total_budgeted = sum((row[1] for row in rows), ZERO)
    total_actual = sum((row[2] for row in rows), ZERO)
    overall_percentage = share(total_actual, total_budgeted)

    comparisons: List[BudgetComparison] = [
        BudgetComparison(
            category=category,
            budgeted=float(budgeted),
            actual=float(actual),
            percentage=float(percentage),
            status=status
        )
        for category, budgeted, actual, percentage, status in rows
    ]

    summary = BudgetSummary(
        total_budgeted=float(total_budgeted),
        total_actual=float(total_actual),
        percentage=float(overall_percentage),
        status=classify(overall_percentage),
        categories_with_budget=len(month_budgets),
        categories_over_budget=sum(1 for c in comparisons if c.status == BudgetStatus.over)
    )

    return BudgetComparisonResponse(month=month, comparisons=comparisons, summary=summary)


def compute_budget_comparison(db: Session, month: Optional[str]) -> BudgetComparisonResponse:
    """Load the month's budgets and all transactions, then compare them."""
    month = validate_month(month)
    budgets = store.list_budgets(db, month=month)
    transactions = store.list_transactions(db)

    result = build_budget_comparison(month, budgets, transactions)
    logger.debug(
        "Budget comparison for %s: %d categories, %d over budget",
        month, len(result.comparisons), result.summary.categories_over_budget
    )
    return result
