"""Dashboard summary module."""
from .models import Expense, Salary, Totals, MonthlyBucket, CategoryShare, SummaryResult
from .months import MonthMatchPolicy
from .variants import DashboardVariant, STANDARD, INDIA, get_variant
from .aggregator import FinanceAggregator, percent_of_base

__all__ = [
    "Expense",
    "Salary",
    "Totals",
    "MonthlyBucket",
    "CategoryShare",
    "SummaryResult",
    "MonthMatchPolicy",
    "DashboardVariant",
    "STANDARD",
    "INDIA",
    "get_variant",
    "FinanceAggregator",
    "percent_of_base"
]
