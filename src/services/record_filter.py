"""Selection of source records falling into a (month, year) period.

Each record is bucketed by exactly one date:
- Payment, UtilityBill: paid_at (and only when is_paid)
- Expense: expense_date
- MonthlyReport: its explicit month/year fields

All filters are pure and keep the input order.
"""

from datetime import date
from typing import Callable, Iterable, Optional, TypeVar

from src.models.records import Expense, MonthlyReport, Payment, SourceRecord, UtilityBill

RecordT = TypeVar("RecordT", bound=SourceRecord)


def _in_period(value: date | None, month: int, year: int) -> bool:
    return value is not None and value.month == month and value.year == year


def filter_by_period(
    records: Iterable[RecordT],
    month: int,
    year: int,
    date_selector: Callable[[RecordT], Optional[date]],
    unit_id: int | None = None,
) -> list[RecordT]:
    """Select records whose effective date falls in (month, year).

    Args:
        records: Source records
        month: Target month (1-12)
        year: Target year
        date_selector: Returns a record's effective date, or None to exclude it
        unit_id: Only keep records for this unit (optional)

    Returns:
        Matching records in input order
    """
    return [
        record
        for record in records
        if (unit_id is None or record.unit_id == unit_id)
        and _in_period(date_selector(record), month, year)
    ]


def _paid_date(record: Payment | UtilityBill) -> date | None:
    # Unpaid records never fall into any period, whatever paid_at says
    return record.paid_at if record.is_paid else None


def filter_payments(
    payments: Iterable[Payment], month: int, year: int, unit_id: int | None = None
) -> list[Payment]:
    """Paid payments with paid_at in the period."""
    return filter_by_period(payments, month, year, _paid_date, unit_id)


def filter_utilities(
    utilities: Iterable[UtilityBill], month: int, year: int, unit_id: int | None = None
) -> list[UtilityBill]:
    """Paid utility bills with paid_at in the period."""
    return filter_by_period(utilities, month, year, _paid_date, unit_id)


def filter_expenses(
    expenses: Iterable[Expense], month: int, year: int, unit_id: int | None = None
) -> list[Expense]:
    """Expenses dated in the period. There is no paid flag."""
    return filter_by_period(expenses, month, year, lambda e: e.expense_date, unit_id)


def filter_reports(
    reports: Iterable[MonthlyReport], month: int, year: int, unit_id: int | None = None
) -> list[MonthlyReport]:
    """Monthly reports for the period. Rows from several units may match."""
    return [
        report
        for report in reports
        if report.month == month
        and report.year == year
        and (unit_id is None or report.unit_id == unit_id)
    ]


__all__ = [
    "filter_by_period",
    "filter_payments",
    "filter_utilities",
    "filter_expenses",
    "filter_reports",
]
