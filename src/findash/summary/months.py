"""Calendar helpers for the trailing monthly window."""
from datetime import date
from enum import Enum
from typing import List, Tuple

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]
SHORT_MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]


def trailing_months(today: date, window_size: int) -> List[Tuple[int, int]]:
    """
    List (year, month) pairs ending at today's month, oldest first.

    Args:
        today: Reference date; its month is the last bucket
        window_size: Number of months in the window

    Returns:
        List of (year, month) tuples with month in 1-12
    """
    # Months counted from year 0 make the year rollover plain integer math
    current = today.year * 12 + (today.month - 1)
    months = []
    for offset in range(window_size - 1, -1, -1):
        index = current - offset
        months.append((index // 12, index % 12 + 1))
    return months


class MonthMatchPolicy(Enum):
    """How an expense date is assigned to a monthly bucket."""

    MONTH_ONLY = "month_only"
    MONTH_AND_YEAR = "month_and_year"

    def matches(self, expense_date: date, year: int, month: int) -> bool:
        if self is MonthMatchPolicy.MONTH_ONLY:
            # Same-named months from every year land in one bucket
            return expense_date.month == month
        return expense_date.month == month and expense_date.year == year

    def label(self, year: int, month: int) -> str:
        short = SHORT_MONTH_NAMES[month - 1]
        if self is MonthMatchPolicy.MONTH_ONLY:
            return short
        return f"{short} {year}"


def salary_matches(salary_month: str, month: int) -> bool:
    """Salaries carry only a month name; the year is never checked."""
    return salary_month == MONTH_NAMES[month - 1]
