"""Derived financial statistics.

These are built fresh on every aggregation call and never mutated.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple


class Period(NamedTuple):
    """Aggregation bucket: calendar month (1-12) and year."""

    month: int
    year: int


@dataclass(frozen=True)
class PeriodBreakdown:
    """Per-period component totals the headline figures are derived from.

    Attributes:
        gross_revenue: Paid tenant payments
        utility_cost: Paid owner utility bills
        direct_expenses: Recorded expenses
        report_rollup: Sum of utilityBills + expenses over matching monthly reports
    """

    month: int
    year: int
    gross_revenue: Decimal
    utility_cost: Decimal
    direct_expenses: Decimal
    report_rollup: Decimal


@dataclass(frozen=True)
class PeriodStats:
    """Revenue, expenses and net income for one period."""

    month: int
    year: int
    revenue: Decimal
    expenses: Decimal
    net_income: Decimal

    @property
    def period(self) -> Period:
        return Period(self.month, self.year)


@dataclass(frozen=True)
class PeriodComparison:
    """Current period against the previous one, with percent changes."""

    current: PeriodStats
    previous: PeriodStats
    revenue_percent_change: Decimal
    expenses_percent_change: Decimal
    net_income_percent_change: Decimal


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point of the annual series."""

    label: str
    stats: PeriodStats


__all__ = ["Period", "PeriodBreakdown", "PeriodStats", "PeriodComparison", "SeriesPoint"]
