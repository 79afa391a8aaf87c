"""Rule-based spending insights for the current month."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.dashboard import Insight, InsightKind
from finance_tracker.services.aggregation_service import ZERO, share, sum_by_category, to_decimal
from finance_tracker.services.dates import days_in_month, month_key, previous_month_key

MAX_INSIGHTS = 4

TREND_THRESHOLD = Decimal("10")           # % change vs last month
CONCENTRATION_THRESHOLD = Decimal("40")   # % of month spent in one category
AVERAGE_THRESHOLD = Decimal("100")        # average expense amount
FREQUENCY_THRESHOLD = Decimal("70")       # % of days with spending
WEEKEND_THRESHOLD = Decimal("50")         # % of spend on Sat/Sun

SATURDAY, SUNDAY = 5, 6


def round_half_up(value: Decimal, decimals: int = 0) -> Decimal:
    """Round halves away from zero, e.g. 150.5 -> 151 and 12.25 -> 12.3."""
    return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_number(value: Decimal, decimals: int = 1) -> str:
    return f"{round_half_up(value, decimals):.{decimals}f}"


def format_currency(amount: Decimal) -> str:
    """Whole US dollars, e.g. $1,235."""
    return f"${round_half_up(amount):,.0f}"


def format_percent(value: Decimal, decimals: int = 1, signed: bool = False) -> str:
    sign = "+" if signed and value > 0 else ""
    return f"{sign}{format_number(value, decimals)}%"


def generate_insights(transactions: Iterable, today: Optional[date] = None) -> List[Insight]:
    """
    Run the fixed battery of spending checks and return at most four insights.

    Checks run in a fixed order (trend, category concentration, average
    transaction, spending frequency, weekend spending) and the output keeps
    that order. When no check fires a single generic tip is returned.
    """
    today = today or date.today()
    current_key = month_key(today)
    previous_key = previous_month_key(today)

    current = []
    previous = []
    for t in transactions:
        if t.type != TransactionType.expense:
            continue
        key = month_key(t.date)
        if key == current_key:
            current.append(t)
        elif key == previous_key:
            previous.append(t)

    current_total = sum((to_decimal(t.amount) for t in current), ZERO)
    previous_total = sum((to_decimal(t.amount) for t in previous), ZERO)

    insights: List[Insight] = []

    # Month-over-month trend
    if previous_total > 0:
        change = (current_total - previous_total) / previous_total * 100
        if abs(change) > TREND_THRESHOLD:
            increased = change > 0
            insights.append(Insight(
                kind=InsightKind.warning if increased else InsightKind.success,
                title="Spending Increased" if increased else "Spending Decreased",
                description=(
                    f"Your spending {'increased' if increased else 'decreased'} by "
                    f"{format_number(abs(change))}% compared to last month"
                ),
                value=format_percent(change, signed=True)
            ))

    # Category concentration
    by_category = sum_by_category(current)
    if by_category:
        top_category, top_amount = max(by_category.items(), key=lambda item: item[1])
        percentage = share(top_amount, current_total)
        if percentage > CONCENTRATION_THRESHOLD:
            insights.append(Insight(
                kind=InsightKind.warning,
                title="High Category Concentration",
                description=f"{top_category} accounts for {format_number(percentage)}% of your spending this month",
                value=format_percent(percentage)
            ))
        else:
            insights.append(Insight(
                kind=InsightKind.info,
                title="Top Spending Category",
                description=f"Your highest spending category this month is {top_category}",
                value=format_currency(top_amount)
            ))

    # Average transaction size
    if current:
        average = current_total / len(current)
        if average > AVERAGE_THRESHOLD:
            insights.append(Insight(
                kind=InsightKind.info,
                title="High Average Transaction",
                description=f"Your average transaction this month is {format_currency(average)}",
                value=format_currency(average)
            ))

    # Spending frequency
    spending_days = len({t.date for t in current})
    month_days = days_in_month(today)
    frequency = Decimal(spending_days) / month_days * 100
    if frequency > FREQUENCY_THRESHOLD:
        insights.append(Insight(
            kind=InsightKind.tip,
            title="Frequent Spending",
            description=f"You made purchases on {spending_days} out of {month_days} days this month",
            value=format_percent(frequency, decimals=0)
        ))

    # Weekend concentration
    if current:
        weekend_total = sum(
            (to_decimal(t.amount) for t in current if t.date.weekday() in (SATURDAY, SUNDAY)),
            ZERO
        )
        weekend_percentage = share(weekend_total, current_total)
        if weekend_percentage > WEEKEND_THRESHOLD:
            insights.append(Insight(
                kind=InsightKind.info,
                title="Weekend Spender",
                description=f"{format_number(weekend_percentage)}% of your spending happens on weekends",
                value=format_percent(weekend_percentage)
            ))

    if not insights:
        insights.append(Insight(
            kind=InsightKind.tip,
            title="Track Your Progress",
            description="Keep adding transactions to get personalized spending insights"
        ))

    return insights[:MAX_INSIGHTS]
