"""Calendar month helpers shared by the aggregation services."""

import calendar
from datetime import date
from typing import List, Tuple


def month_key(day: date) -> str:
    """YYYY-MM key of the month containing `day`."""
    return day.strftime("%Y-%m")


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move (year, month) by `offset` months, rolling over year boundaries."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def previous_month_key(today: date) -> str:
    year, month = shift_month(today.year, today.month, -1)
    return f"{year:04d}-{month:02d}"


def last_month_keys(today: date, count: int) -> List[str]:
    """Keys of the last `count` months ending with today's month, oldest first."""
    keys = []
    for offset in range(count - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        keys.append(f"{year:04d}-{month:02d}")
    return keys


def days_in_month(today: date) -> int:
    return calendar.monthrange(today.year, today.month)[1]
