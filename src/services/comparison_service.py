"""Month-over-month comparison of period statistics."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from src.models.records import Expense, MonthlyReport, Payment, UtilityBill, parse_records
from src.models.stats import PeriodComparison, PeriodStats
from src.services.aggregation_service import ZERO, aggregate
from src.services.period_service import current_and_previous

HUNDRED = Decimal("100")


class ChangeTrend(str, Enum):
    """How a percent change reads to the owner."""

    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"
    NEUTRAL = "neutral"


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def percent_change(
    current: Decimal | int | float | None, previous: Decimal | int | float | None
) -> Decimal:
    """Relative change from previous to current, in percent.

    A zero or missing previous value yields 0 rather than a division error.

    Example:
        >>> percent_change(Decimal("1500"), Decimal("1000"))
        Decimal('50.0')
        >>> percent_change(5000, 0)
        Decimal('0')
    """
    if not previous:
        return ZERO
    prev = _to_decimal(previous)
    curr = _to_decimal(current) if current is not None else ZERO
    return (curr - prev) / prev * HUNDRED


def classify_change(value: Decimal | int | float, higher_is_better: bool = True) -> ChangeTrend:
    """Classify a percent change for display.

    Revenue and net income use higher_is_better=True; expenses use False,
    so a rise in expenses is unfavorable.
    """
    if value == 0:
        return ChangeTrend.NEUTRAL
    if (value > 0) == higher_is_better:
        return ChangeTrend.FAVORABLE
    return ChangeTrend.UNFAVORABLE


def compare_periods(current: PeriodStats, previous: PeriodStats) -> PeriodComparison:
    """Build the comparison of two periods' like fields."""
    return PeriodComparison(
        current=current,
        previous=previous,
        revenue_percent_change=percent_change(current.revenue, previous.revenue),
        expenses_percent_change=percent_change(current.expenses, previous.expenses),
        net_income_percent_change=percent_change(current.net_income, previous.net_income),
    )


def compare_to_previous_month(
    payments: Iterable[Payment | dict[str, Any]],
    utilities: Iterable[UtilityBill | dict[str, Any]],
    expenses: Iterable[Expense | dict[str, Any]],
    reports: Iterable[MonthlyReport | dict[str, Any]],
    reference_date: date,
    unit_id: int | None = None,
) -> PeriodComparison:
    """Compare the reference date's month against the month before it.

    Args:
        payments: Rent payments
        utilities: Owner-paid utility bills
        expenses: Direct expenses
        reports: Precomputed monthly reports
        reference_date: Date inside the "current" month
        unit_id: Restrict to one unit (optional)

    Returns:
        PeriodComparison of current vs previous month
    """
    # Parse once; both periods read the same collections
    payments = parse_records(Payment, payments)
    utilities = parse_records(UtilityBill, utilities)
    expenses = parse_records(Expense, expenses)
    reports = parse_records(MonthlyReport, reports)

    current, previous = current_and_previous(reference_date)
    return compare_periods(
        aggregate(payments, utilities, expenses, reports, current.month, current.year, unit_id),
        aggregate(payments, utilities, expenses, reports, previous.month, previous.year, unit_id),
    )


__all__ = [
    "ChangeTrend",
    "percent_change",
    "classify_change",
    "compare_periods",
    "compare_to_previous_month",
]
