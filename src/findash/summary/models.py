"""Data models for dashboard summaries."""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

RecordId = Union[int, str]


@dataclass(frozen=True)
class Expense:
    """Outgoing transaction as returned by the expenses endpoint."""
    id: RecordId
    amount: Decimal
    category: str
    date: date
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "amount": str(self.amount),
            "category": self.category,
            "date": self.date.isoformat(),
            "description": self.description,
        }


@dataclass(frozen=True)
class Salary:
    """Income record for a named month."""
    id: RecordId
    amount: Decimal
    month: str  # full English month name, e.g. "January"


@dataclass(frozen=True)
class Totals:
    """Summary card values."""
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    @classmethod
    def zero(cls) -> "Totals":
        return cls(Decimal("0"), Decimal("0"), Decimal("0"))


@dataclass(frozen=True)
class MonthlyBucket:
    """One bar of the trailing monthly chart."""
    label: str
    year: int
    month: int  # 1-12
    total_expense: Decimal
    total_income: Optional[Decimal] = None  # None when income is not charted


@dataclass(frozen=True)
class CategoryShare:
    """Category amount expressed as a share of a base (income or expenses)."""
    category: str
    amount: Decimal
    percent: Decimal
    exceeds_threshold: bool


@dataclass
class SummaryResult:
    """Everything the dashboard cards and charts render."""
    totals: Totals
    category_totals: Dict[str, Decimal] = field(default_factory=dict)
    monthly_series: List[MonthlyBucket] = field(default_factory=list)
    recent_expenses: List[Expense] = field(default_factory=list)
    category_shares: List[CategoryShare] = field(default_factory=list)
    expense_count: int = 0
    salary_count: int = 0

    @classmethod
    def empty(cls) -> "SummaryResult":
        """Zeroed totals with empty mappings and sequences."""
        return cls(totals=Totals.zero())

    @property
    def is_empty(self) -> bool:
        return self.expense_count == 0 and self.salary_count == 0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (decimals as strings)."""
        return {
            "totalIncome": str(self.totals.total_income),
            "totalExpense": str(self.totals.total_expense),
            "balance": str(self.totals.balance),
            "expenseCount": self.expense_count,
            "salaryCount": self.salary_count,
            "categoryTotals": {name: str(amount) for name, amount in self.category_totals.items()},
            "categoryShares": [
                {
                    "category": share.category,
                    "amount": str(share.amount),
                    "percent": str(share.percent),
                    "exceedsThreshold": share.exceeds_threshold,
                }
                for share in self.category_shares
            ],
            "monthlySeries": [
                {
                    "label": bucket.label,
                    "year": bucket.year,
                    "month": bucket.month,
                    "totalExpense": str(bucket.total_expense),
                    "totalIncome": None if bucket.total_income is None else str(bucket.total_income),
                }
                for bucket in self.monthly_series
            ],
            "recentExpenses": [expense.to_dict() for expense in self.recent_expenses],
        }
