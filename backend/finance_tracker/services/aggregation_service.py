"""
Pure aggregations over transaction lists for the dashboard.

Amounts are summed as Decimal and converted to float only when the result
schema is built.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from finance_tracker.categories import get_category_color
from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.dashboard import CategoryTotal, DashboardStats, MonthlyTotal, TopCategory
from finance_tracker.services.dates import last_month_keys, month_key

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TOP_CATEGORY_COUNT = 3


def to_decimal(amount) -> Decimal:
    """Normalize a stored or user-built amount (Decimal, int, float, str)."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def share(part: Decimal, total: Decimal) -> Decimal:
    """Percentage of `total` taken by `part`, 0 when total is not positive."""
    return part / total * HUNDRED if total > 0 else ZERO


def sum_by_category(transactions: Iterable) -> Dict[str, Decimal]:
    """Sum amounts per category, keeping first-seen category order."""
    totals: Dict[str, Decimal] = {}
    for t in transactions:
        totals[t.category] = totals.get(t.category, ZERO) + to_decimal(t.amount)
    return totals


def monthly_totals(
    transactions: Iterable,
    months_back: int = 12,
    today: Optional[date] = None
) -> List[MonthlyTotal]:
    """
    Income, expenses and balance for each of the last `months_back` months.

    The current month is included and the list is ordered oldest first.
    Months without transactions are reported with zeros, so the result always
    has exactly `months_back` entries.
    """
    today = today or date.today()
    keys = last_month_keys(today, months_back)
    income = {key: ZERO for key in keys}
    expenses = {key: ZERO for key in keys}

    for t in transactions:
        key = month_key(t.date)
        if key not in income:
            continue
        if t.type == TransactionType.income:
            income[key] += to_decimal(t.amount)
        elif t.type == TransactionType.expense:
            expenses[key] += to_decimal(t.amount)

    return [
        MonthlyTotal(
            month=key,
            income=float(income[key]),
            expenses=float(expenses[key]),
            balance=float(income[key] - expenses[key])
        )
        for key in keys
    ]


def category_totals(transactions: Iterable, transaction_type: str = "all") -> List[CategoryTotal]:
    """
    Per-category sums with each category's share of the filtered total.

    `transaction_type` is "income", "expense" or "all". Sorted by amount
    descending; empty when the filtered total is zero.
    """
    if transaction_type == "all":
        filtered = list(transactions)
    else:
        filtered = [t for t in transactions if t.type == transaction_type]

    totals = sum_by_category(filtered)
    grand_total = sum(totals.values(), ZERO)
    if grand_total == 0:
        return []

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryTotal(
            category=category,
            amount=float(amount),
            color=get_category_color(category),
            percentage=float(amount / grand_total * HUNDRED)
        )
        for category, amount in ranked
    ]


def dashboard_stats(transactions: Iterable) -> DashboardStats:
    """Overall income/expense totals plus the top expense categories."""
    total_income = ZERO
    total_expenses = ZERO
    count = 0
    expense_by_category: Dict[str, Decimal] = {}

    for t in transactions:
        count += 1
        amount = to_decimal(t.amount)
        if t.type == TransactionType.income:
            total_income += amount
        else:
            total_expenses += amount
            expense_by_category[t.category] = expense_by_category.get(t.category, ZERO) + amount

    ranked = sorted(expense_by_category.items(), key=lambda item: item[1], reverse=True)
    top_categories = [
        TopCategory(
            category=category,
            amount=float(amount),
            percentage=float(share(amount, total_expenses))
        )
        for category, amount in ranked[:TOP_CATEGORY_COUNT]
    ]

    return DashboardStats(
        total_income=float(total_income),
        total_expenses=float(total_expenses),
        balance=float(total_income - total_expenses),
        transaction_count=count,
        top_categories=top_categories
    )
