"""Annual time series of period statistics for charting."""

from typing import Any, Iterable

from src.models.records import Expense, MonthlyReport, Payment, UtilityBill, parse_records
from src.models.stats import PeriodStats, SeriesPoint
from src.services.aggregation_service import aggregate
from src.services.locale_service import get_month_labels

MONTHS_IN_YEAR = 12


def build_annual_series(
    payments: Iterable[Payment | dict[str, Any]],
    utilities: Iterable[UtilityBill | dict[str, Any]],
    expenses: Iterable[Expense | dict[str, Any]],
    reports: Iterable[MonthlyReport | dict[str, Any]],
    year: int,
    unit_id: int | None = None,
) -> list[PeriodStats]:
    """Aggregate every month of a year, January first.

    Always returns 12 entries; months without records are all zero.

    Args:
        payments: Rent payments
        utilities: Owner-paid utility bills
        expenses: Direct expenses
        reports: Precomputed monthly reports
        year: Calendar year to chart
        unit_id: Restrict to one unit (optional)

    Returns:
        List of PeriodStats, index 0 = January
    """
    payments = parse_records(Payment, payments)
    utilities = parse_records(UtilityBill, utilities)
    expenses = parse_records(Expense, expenses)
    reports = parse_records(MonthlyReport, reports)

    return [
        aggregate(payments, utilities, expenses, reports, month, year, unit_id)
        for month in range(1, MONTHS_IN_YEAR + 1)
    ]


def build_chart_series(
    payments: Iterable[Payment | dict[str, Any]],
    utilities: Iterable[UtilityBill | dict[str, Any]],
    expenses: Iterable[Expense | dict[str, Any]],
    reports: Iterable[MonthlyReport | dict[str, Any]],
    year: int,
    unit_id: int | None = None,
    locale: str | None = None,
) -> list[SeriesPoint]:
    """Annual series labelled with abbreviated month names ('Jan'..'Dec')."""
    series = build_annual_series(payments, utilities, expenses, reports, year, unit_id)
    return [
        SeriesPoint(label=label, stats=stats)
        for label, stats in zip(get_month_labels(locale), series)
    ]


__all__ = ["MONTHS_IN_YEAR", "build_annual_series", "build_chart_series"]
