"""Source record models for the financial dashboard.

Records arrive from the record-management backend as JSON mappings with
camelCase keys (``unitId``, ``isPaid``, ``paidAt``...). Each model accepts
either the camelCase key or the snake_case field name.

Amounts are parsed to Decimal. Date fields accept ISO dates or ISO datetimes;
datetimes are reduced to their calendar date, which decides the (month, year)
bucket a record falls into.

Example:
    >>> p = Payment.model_validate({"amount": 1000.5, "isPaid": True, "paidAt": "2024-03-05T09:30:00"})
    >>> p.amount, p.paid_at
    (Decimal('1000.5'), datetime.date(2024, 3, 5))
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _parse_calendar_date(value: Any) -> Any:
    """Reduce ISO date/datetime input to a date, leaving other types to pydantic."""
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, str):
        return value

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise ValueError(f"Cannot parse date '{value}'") from e


def _parse_amount(value: Any) -> Any:
    """Convert floats through str so 0.1 becomes Decimal('0.1'), not a binary approximation."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class SourceRecord(BaseModel):
    """Base for immutable records supplied by the backend."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: int | None = None
    unit_id: int | None = None


class Payment(SourceRecord):
    """Rent payment. Counts toward revenue only once paid."""

    amount: Decimal
    is_paid: bool = False
    paid_at: date | None = None
    due_date: date | None = None
    month_of_start: str | None = None
    month_of_end: str | None = None
    mode_of_payment: str | None = None

    @field_validator("paid_at", "due_date", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Any:
        return _parse_calendar_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return _parse_amount(value)


class UtilityBill(SourceRecord):
    """Utility bill paid by the property owner."""

    total_amount: Decimal
    is_paid: bool = False
    paid_at: date | None = None
    type: str | None = None
    previous_reading: Decimal | None = None
    current_reading: Decimal | None = None
    total_meter: Decimal | None = None
    due_date: date | None = None
    month_of_start: str | None = None
    month_of_end: str | None = None
    rate_id: int | None = None

    @field_validator("paid_at", "due_date", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Any:
        return _parse_calendar_date(value)

    @field_validator(
        "total_amount", "previous_reading", "current_reading", "total_meter", mode="before"
    )
    @classmethod
    def parse_amounts(cls, value: Any) -> Any:
        return _parse_amount(value)


class Expense(SourceRecord):
    """Direct expense. Always counted for the month of its date."""

    amount: Decimal
    # "date" in payloads; renamed so the field does not shadow the date type
    expense_date: date = Field(alias="date")
    reason: str | None = None
    mode_of_payment: str | None = None

    @field_validator("expense_date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        return _parse_calendar_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return _parse_amount(value)


class MonthlyReport(SourceRecord):
    """Precomputed per-unit rollup for one (month, year)."""

    month: int = Field(ge=1, le=12)
    year: int
    monthly_dues: Decimal = Decimal("0")
    utility_bills: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    created_at: datetime | None = None

    @field_validator("monthly_dues", "utility_bills", "expenses", mode="before")
    @classmethod
    def missing_amount_is_zero(cls, value: Any) -> Any:
        if value is None:
            return Decimal("0")
        return _parse_amount(value)


class Unit(SourceRecord):
    """Rentable unit, used only for occupancy counters."""

    unit_number: str | None = None
    num_occupants: int = 0


RecordT = TypeVar("RecordT", bound=SourceRecord)


def parse_records(model: type[RecordT], items: Iterable[Any]) -> list[RecordT]:
    """Validate a sequence of mappings (or ready models) into record models.

    Args:
        model: Record model class (Payment, UtilityBill, ...)
        items: Mappings from the backend or already-built model instances

    Returns:
        List of model instances, in input order

    Raises:
        pydantic.ValidationError: If any item is malformed (a ValueError subclass)
    """
    return [item if isinstance(item, model) else model.model_validate(item) for item in items]


__all__ = [
    "SourceRecord",
    "Payment",
    "UtilityBill",
    "Expense",
    "MonthlyReport",
    "Unit",
    "parse_records",
]
