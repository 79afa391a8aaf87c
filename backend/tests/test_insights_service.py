"""Tests for spending insight heuristics."""

from datetime import date
from decimal import Decimal

from finance_tracker.models.transaction import Transaction, TransactionType
from finance_tracker.schemas.dashboard import InsightKind
from finance_tracker.services.insights_service import (
    format_currency,
    format_percent,
    generate_insights,
)

# 2024-03-01 is a Friday; March has 31 days
TODAY = date(2024, 3, 15)


def expense(day, amount, category="Shopping"):
    return Transaction(
        date=day,
        amount=Decimal(amount),
        description="test",
        category=category,
        type=TransactionType.expense,
    )


def titles(insights):
    return [i.title for i in insights]


class TestFallback:

    def test_no_transactions(self):
        insights = generate_insights([], today=TODAY)
        assert len(insights) == 1
        assert insights[0].kind == InsightKind.tip
        assert insights[0].title == "Track Your Progress"
        assert insights[0].value is None

    def test_income_is_ignored(self):
        salary = Transaction(
            date=date(2024, 3, 1),
            amount=Decimal("5000"),
            description="pay",
            category="Salary",
            type=TransactionType.income,
        )
        assert titles(generate_insights([salary], today=TODAY)) == ["Track Your Progress"]


class TestMonthOverMonth:

    def test_exactly_ten_percent_is_suppressed(self):
        transactions = [expense(date(2024, 2, 5), "100.00"), expense(date(2024, 3, 4), "110.00")]
        insights = generate_insights(transactions, today=TODAY)
        assert "Spending Increased" not in titles(insights)

    def test_just_over_ten_percent_is_reported(self):
        transactions = [expense(date(2024, 2, 5), "100.00"), expense(date(2024, 3, 4), "110.01")]
        insights = generate_insights(transactions, today=TODAY)
        assert insights[0].title == "Spending Increased"
        assert insights[0].kind == InsightKind.warning
        assert insights[0].value == "+10.0%"

    def test_decrease(self):
        transactions = [expense(date(2024, 2, 5), "200.00"), expense(date(2024, 3, 4), "100.00")]
        insights = generate_insights(transactions, today=TODAY)
        assert insights[0].title == "Spending Decreased"
        assert insights[0].kind == InsightKind.success
        assert insights[0].value == "-50.0%"
        assert "decreased by 50.0%" in insights[0].description

    def test_no_previous_month(self):
        insights = generate_insights([expense(date(2024, 3, 4), "50.00")], today=TODAY)
        assert "Spending Increased" not in titles(insights)
        assert "Spending Decreased" not in titles(insights)

    def test_january_compares_with_december(self):
        transactions = [expense(date(2023, 12, 4), "100.00"), expense(date(2024, 1, 8), "50.00")]
        insights = generate_insights(transactions, today=date(2024, 1, 20))
        assert insights[0].title == "Spending Decreased"


class TestCategoryConcentration:

    def test_forty_percent_is_top_category_info(self):
        transactions = [
            expense(date(2024, 3, 4), "40.00", "Travel"),
            expense(date(2024, 3, 5), "30.00", "Shopping"),
            expense(date(2024, 3, 6), "30.00", "Education"),
        ]
        insights = generate_insights(transactions, today=TODAY)
        assert insights[0].title == "Top Spending Category"
        assert insights[0].kind == InsightKind.info
        assert insights[0].value == "$40"
        assert "Travel" in insights[0].description

    def test_over_forty_percent_is_warning(self):
        transactions = [
            expense(date(2024, 3, 4), "41.00", "Travel"),
            expense(date(2024, 3, 5), "59.00", "Shopping"),
        ]
        insights = generate_insights(transactions, today=TODAY)
        assert insights[0].title == "High Category Concentration"
        assert insights[0].kind == InsightKind.warning
        assert insights[0].value == "59.0%"
        assert insights[0].description.startswith("Shopping accounts for 59.0%")


class TestAverageTransaction:

    def test_high_average(self):
        transactions = [expense(date(2024, 3, 4), "150.00"), expense(date(2024, 3, 5), "1350.00", "Travel")]
        insights = generate_insights(transactions, today=TODAY)
        average = [i for i in insights if i.title == "High Average Transaction"]
        assert len(average) == 1
        assert average[0].value == "$750"

    def test_average_of_exactly_hundred(self):
        transactions = [expense(date(2024, 3, 4), "100.00")]
        assert "High Average Transaction" not in titles(generate_insights(transactions, today=TODAY))


class TestFrequency:

    def test_frequent_spending(self):
        # 22 of 31 days is just over 70%
        transactions = [expense(date(2024, 3, day), "1.00") for day in range(1, 23)]
        insights = generate_insights(transactions, today=TODAY)
        frequent = [i for i in insights if i.title == "Frequent Spending"]
        assert len(frequent) == 1
        assert frequent[0].kind == InsightKind.tip
        assert frequent[0].value == "71%"
        assert "22 out of 31 days" in frequent[0].description

    def test_exactly_seventy_percent_is_not_reported(self):
        """21 of April's 30 days is exactly 70%."""
        transactions = [expense(date(2024, 4, day), "1.00") for day in range(1, 22)]
        insights = generate_insights(transactions, today=date(2024, 4, 15))
        assert "Frequent Spending" not in titles(insights)

    def test_just_over_seventy_percent_is_reported(self):
        transactions = [expense(date(2024, 4, day), "1.00") for day in range(1, 23)]
        insights = generate_insights(transactions, today=date(2024, 4, 15))
        frequent = [i for i in insights if i.title == "Frequent Spending"]
        assert len(frequent) == 1
        assert frequent[0].value == "73%"
        assert "22 out of 30 days" in frequent[0].description

    def test_same_day_counts_once(self):
        transactions = [expense(date(2024, 3, day), "1.00") for day in range(1, 22)]
        transactions += [expense(date(2024, 3, 1), "1.00") for _ in range(10)]
        assert "Frequent Spending" not in titles(generate_insights(transactions, today=TODAY))


class TestWeekend:

    def test_weekend_spender(self):
        transactions = [
            expense(date(2024, 3, 2), "60.00", "Travel"),    # Saturday
            expense(date(2024, 3, 4), "40.00", "Shopping"),  # Monday
        ]
        insights = generate_insights(transactions, today=TODAY)
        weekend = [i for i in insights if i.title == "Weekend Spender"]
        assert len(weekend) == 1
        assert weekend[0].value == "60.0%"

    def test_half_on_weekend_is_not_reported(self):
        transactions = [
            expense(date(2024, 3, 3), "50.00", "Travel"),    # Sunday
            expense(date(2024, 3, 4), "50.00", "Shopping"),  # Monday
        ]
        assert "Weekend Spender" not in titles(generate_insights(transactions, today=TODAY))


class TestOrderingAndLimit:

    def test_truncated_to_four_in_generation_order(self):
        transactions = [expense(date(2024, 2, 5), "100.00", "Travel")]
        for day in range(1, 26):
            weekend = date(2024, 3, day).weekday() >= 5
            transactions.append(expense(date(2024, 3, day), "1000.00" if weekend else "10.00", "Travel"))

        insights = generate_insights(transactions, today=TODAY)
        assert titles(insights) == [
            "Spending Increased",
            "High Category Concentration",
            "High Average Transaction",
            "Frequent Spending",
        ]

    def test_never_more_than_four(self):
        transactions = [expense(date(2024, 3, day % 28 + 1), "500.00", f"C{day % 7}") for day in range(200)]
        assert len(generate_insights(transactions, today=TODAY)) <= 4


class TestFormatting:
    """Display values round halves away from zero."""

    def test_currency_rounds_half_up(self):
        assert format_currency(Decimal("150.50")) == "$151"
        assert format_currency(Decimal("2.50")) == "$3"
        assert format_currency(Decimal("1234.49")) == "$1,234"
        assert format_currency(Decimal("1234.5")) == "$1,235"

    def test_percent_rounds_half_up(self):
        assert format_percent(Decimal("12.25")) == "12.3%"
        assert format_percent(Decimal("12.35")) == "12.4%"
        assert format_percent(Decimal("-12.25"), signed=True) == "-12.3%"
        assert format_percent(Decimal("12.25"), signed=True) == "+12.3%"
        assert format_percent(Decimal("70.5"), decimals=0) == "71%"

    def test_average_value_rounds_up(self):
        transactions = [expense(date(2024, 3, 4), "100.00"), expense(date(2024, 3, 5), "201.00", "Travel")]
        insights = generate_insights(transactions, today=TODAY)
        average = [i for i in insights if i.title == "High Average Transaction"]
        assert average[0].value == "$151"
        assert average[0].description == "Your average transaction this month is $151"

    def test_concentration_percentage_rounds_up(self):
        transactions = [
            expense(date(2024, 3, 4), "56.25", "Travel"),
            expense(date(2024, 3, 5), "43.75", "Shopping"),
        ]
        insights = generate_insights(transactions, today=TODAY)
        assert insights[0].title == "High Category Concentration"
        assert insights[0].value == "56.3%"
        assert insights[0].description.startswith("Travel accounts for 56.3%")
