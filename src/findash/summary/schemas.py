"""Validation of JSON-shaped expense and salary records."""
import datetime as dt
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import Expense, Salary
from .months import MONTH_NAMES
from ..utils.exceptions import DataError


# 12 integer + 6 fractional digits: category and grand totals add exactly
# in the default 28-digit decimal context
AMOUNT_MAX_DIGITS = 18
AMOUNT_DECIMAL_PLACES = 6


def _coerce_amount(value: Any) -> Any:
    # bool is an int subclass and would otherwise coerce to 0/1
    if isinstance(value, bool):
        raise ValueError("amount must be a number, not a boolean")
    if isinstance(value, float):
        # repr keeps the shortest form (0.1 -> "0.1") instead of the binary expansion
        return repr(value)
    return value


class ExpenseSchema(BaseModel):
    """Pydantic schema for an expense record."""
    id: Union[int, str]
    amount: Decimal = Field(
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Expense amount, numeric or numeric string"
    )
    category: str = Field(description="Free-text category label")
    date: dt.date = Field(description="Calendar date or ISO timestamp")
    description: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value):
        return _coerce_amount(value)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str):
            text = value.strip()
            if len(text) == 10:
                return dt.date.fromisoformat(text)
            return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return value

    def to_model(self) -> Expense:
        return Expense(
            id=self.id,
            amount=self.amount,
            category=self.category,
            date=self.date,
            description=self.description
        )


class SalarySchema(BaseModel):
    """Pydantic schema for a salary record."""
    id: Union[int, str]
    amount: Decimal = Field(
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Salary amount, numeric or numeric string"
    )
    month: str = Field(description="Full English month name")

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value):
        return _coerce_amount(value)

    @field_validator("month")
    @classmethod
    def _known_month(cls, value: str) -> str:
        if value not in MONTH_NAMES:
            raise ValueError(f"unknown month name: {value!r}")
        return value

    def to_model(self) -> Salary:
        return Salary(id=self.id, amount=self.amount, month=self.month)


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "record"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def _validate(schema, record: Any, kind: str):
    # Model instances are re-checked too; they may be built with bad values
    try:
        if isinstance(record, Mapping):
            return schema.model_validate(dict(record)).to_model()
        return schema.model_validate(record, from_attributes=True).to_model()
    except ValidationError as e:
        raise DataError(f"Invalid {kind} record: {_describe(e)}") from e


def parse_expense(record: Union[Mapping[str, Any], Expense]) -> Expense:
    """Validate one expense record (mapping or Expense instance)."""
    return _validate(ExpenseSchema, record, "expense")


def parse_salary(record: Union[Mapping[str, Any], Salary]) -> Salary:
    """Validate one salary record (mapping or Salary instance)."""
    return _validate(SalarySchema, record, "salary")


def _ensure_sequence(records: Any, kind: str) -> Sequence:
    if not isinstance(records, (list, tuple)):
        raise DataError(f"{kind} must be a list of records, got {type(records).__name__}")
    return records


def parse_expenses(records: Any) -> List[Expense]:
    """
    Validate a sequence of expense records.

    Args:
        records: List of mappings or Expense instances

    Returns:
        List of validated Expense objects in the original order
    """
    expenses = []
    for index, record in enumerate(_ensure_sequence(records, "Expenses")):
        if not isinstance(record, (Expense, Mapping)):
            raise DataError(f"Expense at index {index} is not a record: {type(record).__name__}")
        try:
            expenses.append(parse_expense(record))
        except DataError as e:
            raise DataError(f"Expense at index {index}: {e}") from e.__cause__
    return expenses


def parse_salaries(records: Any) -> List[Salary]:
    """
    Validate a sequence of salary records.

    Args:
        records: List of mappings or Salary instances

    Returns:
        List of validated Salary objects in the original order
    """
    salaries = []
    for index, record in enumerate(_ensure_sequence(records, "Salaries")):
        if not isinstance(record, (Salary, Mapping)):
            raise DataError(f"Salary at index {index} is not a record: {type(record).__name__}")
        try:
            salaries.append(parse_salary(record))
        except DataError as e:
            raise DataError(f"Salary at index {index}: {e}") from e.__cause__
    return salaries
