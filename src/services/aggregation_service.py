"""Period aggregation: turns the four source collections into PeriodStats.

Formula for one (month, year):
    revenue    = paid payments - paid utility bills
    expenses   = report rollup + paid utility bills + direct expenses
    net income = revenue - (report rollup + direct expenses)

where report rollup = sum(utility_bills + expenses) over the period's monthly
reports. Paid utility bills reduce revenue AND are listed under expenses; net
income leaves them out of the subtraction since revenue already carries them.

All totals are Decimal. Inputs may be record models or backend mappings.
"""

import logging
from decimal import Decimal
from typing import Any, Iterable

from src.models.records import Expense, MonthlyReport, Payment, UtilityBill, parse_records
from src.models.stats import PeriodBreakdown, PeriodStats
from src.services.record_filter import (
    filter_expenses,
    filter_payments,
    filter_reports,
    filter_utilities,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def breakdown(
    payments: Iterable[Payment | dict[str, Any]],
    utilities: Iterable[UtilityBill | dict[str, Any]],
    expenses: Iterable[Expense | dict[str, Any]],
    reports: Iterable[MonthlyReport | dict[str, Any]],
    month: int,
    year: int,
    unit_id: int | None = None,
) -> PeriodBreakdown:
    """Compute the component totals for one period.

    Args:
        payments: Rent payments
        utilities: Owner-paid utility bills
        expenses: Direct expenses
        reports: Precomputed monthly reports
        month: Target month (1-12)
        year: Target year
        unit_id: Restrict every collection to one unit (optional)

    Returns:
        PeriodBreakdown with gross revenue, utility cost, direct expenses, report rollup

    Raises:
        ValueError: If a mapping cannot be parsed into its record model
    """
    paid_payments = filter_payments(parse_records(Payment, payments), month, year, unit_id)
    paid_utilities = filter_utilities(parse_records(UtilityBill, utilities), month, year, unit_id)
    period_expenses = filter_expenses(parse_records(Expense, expenses), month, year, unit_id)
    matching_reports = filter_reports(parse_records(MonthlyReport, reports), month, year, unit_id)

    return PeriodBreakdown(
        month=month,
        year=year,
        gross_revenue=sum((p.amount for p in paid_payments), ZERO),
        utility_cost=sum((u.total_amount for u in paid_utilities), ZERO),
        direct_expenses=sum((e.amount for e in period_expenses), ZERO),
        report_rollup=sum((r.utility_bills + r.expenses for r in matching_reports), ZERO),
    )


def stats_from_breakdown(parts: PeriodBreakdown) -> PeriodStats:
    """Apply the revenue/expenses/net income formula to component totals."""
    revenue = parts.gross_revenue - parts.utility_cost
    expenses_total = parts.report_rollup + parts.utility_cost + parts.direct_expenses
    net_income = revenue - (parts.report_rollup + parts.direct_expenses)

    return PeriodStats(
        month=parts.month,
        year=parts.year,
        revenue=revenue,
        expenses=expenses_total,
        net_income=net_income,
    )


def aggregate(
    payments: Iterable[Payment | dict[str, Any]],
    utilities: Iterable[UtilityBill | dict[str, Any]],
    expenses: Iterable[Expense | dict[str, Any]],
    reports: Iterable[MonthlyReport | dict[str, Any]],
    month: int,
    year: int,
    unit_id: int | None = None,
) -> PeriodStats:
    """Aggregate the four source collections into one period's statistics.

    Empty collections give zero for every field.

    Example:
        >>> aggregate([{"amount": 1000, "isPaid": True, "paidAt": "2024-03-05"}], [], [], [], 3, 2024)
        PeriodStats(month=3, year=2024, revenue=Decimal('1000'), expenses=Decimal('0'), net_income=Decimal('1000'))
    """
    parts = breakdown(payments, utilities, expenses, reports, month, year, unit_id)
    stats = stats_from_breakdown(parts)

    logger.debug(
        "Aggregated %02d/%d (unit=%s): gross=%s utilities=%s direct=%s rollup=%s -> "
        "revenue=%s expenses=%s net=%s",
        month,
        year,
        unit_id,
        parts.gross_revenue,
        parts.utility_cost,
        parts.direct_expenses,
        parts.report_rollup,
        stats.revenue,
        stats.expenses,
        stats.net_income,
    )
    return stats


__all__ = ["ZERO", "breakdown", "stats_from_breakdown", "aggregate"]
