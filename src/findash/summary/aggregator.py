"""Finance summary aggregation.

Turns validated expense and salary records into the values the dashboard
renders: summary cards, category breakdown, trailing monthly series and the
recent-activity list. Nothing here performs I/O; "now" comes from an
injectable clock so the monthly window can be pinned in tests.
"""
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional

from .models import (
    CategoryShare,
    Expense,
    MonthlyBucket,
    Salary,
    SummaryResult,
    Totals,
)
from .months import MonthMatchPolicy, salary_matches, trailing_months
from .schemas import parse_expenses, parse_salaries
from .variants import STANDARD, DashboardVariant, ShareBase
from ..utils.exceptions import ConfigError, DataError
from ..utils.logger import get_logger

logger = get_logger()

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _to_decimal(value, name: str) -> Decimal:
    if isinstance(value, bool):
        raise DataError(f"{name} must be numeric, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise DataError(f"{name} must be numeric, got {value!r}") from None
    if not result.is_finite():
        raise DataError(f"{name} must be finite, got {value!r}")
    return result


def percent_of_base(amount, base) -> Decimal:
    """
    Express amount as a percentage of base.

    Args:
        amount: Part value
        base: Whole value

    Returns:
        amount / base * 100 (unrounded), or 0 when base <= 0
    """
    amount = _to_decimal(amount, "amount")
    base = _to_decimal(base, "base")
    if base <= ZERO:
        return ZERO
    return amount / base * HUNDRED


def _check_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return value


def _check_non_negative_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
    return value


class FinanceAggregator:
    """Derives dashboard summaries from expense and salary records."""

    def __init__(self, clock: Callable[[], date] = date.today):
        self.clock = clock

    def compute_totals(self, expenses, salaries) -> Totals:
        """Sum all expenses and all salaries regardless of date."""
        expenses = parse_expenses(expenses)
        salaries = parse_salaries(salaries)

        total_expense = sum((expense.amount for expense in expenses), ZERO)
        total_income = sum((salary.amount for salary in salaries), ZERO)

        return Totals(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense
        )

    def group_by_category(self, expenses) -> Dict[str, Decimal]:
        """
        Sum expense amounts per category label.

        Labels are used exactly as supplied (case-sensitive, empty string
        included). Keys follow the order categories first appear.
        """
        totals: Dict[str, Decimal] = {}
        for expense in parse_expenses(expenses):
            totals[expense.category] = totals.get(expense.category, ZERO) + expense.amount
        return totals

    def build_monthly_series(
        self,
        expenses,
        salaries=None,
        window_size: int = 6,
        policy: MonthMatchPolicy = MonthMatchPolicy.MONTH_ONLY
    ) -> List[MonthlyBucket]:
        """
        Build the trailing monthly series ending at the current month.

        Args:
            expenses: Expense records
            salaries: Salary records, or None to leave income uncharted
            window_size: Number of months, current month included
            policy: How expense dates are matched to months

        Returns:
            Exactly window_size buckets, oldest first
        """
        window_size = _check_positive_int(window_size, "window_size")
        expenses = parse_expenses(expenses)
        salary_list: Optional[List[Salary]] = None if salaries is None else parse_salaries(salaries)

        today = self.clock()
        buckets = []
        for year, month in trailing_months(today, window_size):
            total_expense = sum(
                (e.amount for e in expenses if policy.matches(e.date, year, month)),
                ZERO
            )
            total_income = None
            if salary_list is not None:
                total_income = sum(
                    (s.amount for s in salary_list if salary_matches(s.month, month)),
                    ZERO
                )
            buckets.append(MonthlyBucket(
                label=policy.label(year, month),
                year=year,
                month=month,
                total_expense=total_expense,
                total_income=total_income
            ))

        logger.debug(
            f"Built {len(buckets)}-month series ending {today:%Y-%m} "
            f"({policy.value}, income={'yes' if salary_list is not None else 'no'})"
        )
        return buckets

    def recent_activity(self, expenses, limit: int = 5) -> List[Expense]:
        """First `limit` expenses in received order; no date sort is applied."""
        limit = _check_non_negative_int(limit, "limit")
        return parse_expenses(expenses)[:limit]

    def category_shares(
        self,
        category_totals: Dict[str, Decimal],
        base,
        threshold
    ) -> List[CategoryShare]:
        """Percent of base for each category, flagging shares above threshold."""
        base = _to_decimal(base, "base")
        threshold = _to_decimal(threshold, "threshold")
        shares = []
        for category, amount in category_totals.items():
            shares.append(CategoryShare(
                category=category,
                amount=amount,
                percent=percent_of_base(amount, base),
                exceeds_threshold=base > ZERO and amount / base > threshold
            ))
        return shares

    def summarize(
        self,
        expenses,
        salaries,
        variant: DashboardVariant = STANDARD,
        window_size: Optional[int] = None,
        limit: Optional[int] = None
    ) -> SummaryResult:
        """
        Compute the full dashboard summary.

        Args:
            expenses: Expense records
            salaries: Salary records
            variant: Dashboard preset (month policy, share base, defaults)
            window_size: Override for the variant's monthly window
            limit: Override for the variant's recent-activity size

        Returns:
            SummaryResult; SummaryResult.empty() when both inputs are empty
        """
        window_size = _check_positive_int(
            variant.window_size if window_size is None else window_size, "window_size"
        )
        limit = _check_non_negative_int(
            variant.recent_limit if limit is None else limit, "limit"
        )
        expenses = parse_expenses(expenses)
        salaries = parse_salaries(salaries)

        if not expenses and not salaries:
            logger.info(f"No records for {variant.name} dashboard, returning empty summary")
            return SummaryResult.empty()

        totals = self.compute_totals(expenses, salaries)
        category_totals = self.group_by_category(expenses)
        series = self.build_monthly_series(
            expenses,
            salaries if variant.include_income else None,
            window_size=window_size,
            policy=variant.month_policy
        )
        base = totals.total_income if variant.share_base is ShareBase.INCOME else totals.total_expense

        result = SummaryResult(
            totals=totals,
            category_totals=category_totals,
            monthly_series=series,
            recent_expenses=self.recent_activity(expenses, limit),
            category_shares=self.category_shares(category_totals, base, variant.share_threshold),
            expense_count=len(expenses),
            salary_count=len(salaries)
        )

        logger.info(
            f"Summarized {len(expenses)} expenses and {len(salaries)} salaries "
            f"into {len(category_totals)} categories for {variant.name} dashboard"
        )
        return result
