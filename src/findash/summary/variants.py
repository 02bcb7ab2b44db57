"""Dashboard presets: which endpoint, month policy and share base each view uses."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict

from .months import MonthMatchPolicy
from ..utils.exceptions import ConfigError


class ShareBase(Enum):
    """Denominator for category percentages."""
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class DashboardVariant:
    name: str
    expenses_path: str
    salaries_path: str
    month_policy: MonthMatchPolicy
    include_income: bool
    share_base: ShareBase
    share_threshold: Decimal
    window_size: int = 6
    recent_limit: int = 5


STANDARD = DashboardVariant(
    name="standard",
    expenses_path="/api/expenses",
    salaries_path="/api/salaries",
    month_policy=MonthMatchPolicy.MONTH_ONLY,
    include_income=True,
    share_base=ShareBase.INCOME,
    share_threshold=Decimal("0.20"),
)

INDIA = DashboardVariant(
    name="india",
    expenses_path="/api/indian-expenses",
    salaries_path="/api/salaries",
    month_policy=MonthMatchPolicy.MONTH_AND_YEAR,
    include_income=False,
    share_base=ShareBase.EXPENSE,
    share_threshold=Decimal("0.25"),
)

VARIANTS: Dict[str, DashboardVariant] = {
    STANDARD.name: STANDARD,
    INDIA.name: INDIA,
}


def get_variant(name: str) -> DashboardVariant:
    """Look up a preset by name."""
    try:
        return VARIANTS[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown dashboard variant: {name!r} (expected one of {', '.join(VARIANTS)})"
        ) from None
