"""Dashboard summary: headline cards, month-over-month trends and the annual chart.

Wraps the pure aggregation functions for the admin dashboard. Everything is
recomputed from the full snapshot on each call; there is no cache.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from src.models.records import Unit, parse_records
from src.models.stats import Period, PeriodComparison, SeriesPoint
from src.services.comparison_service import (
    ChangeTrend,
    classify_change,
    compare_to_previous_month,
)
from src.services.config import FinanceConfig, load_config
from src.services.locale_service import format_amount, format_signed_percent, round_percent
from src.services.period_service import resolve_period
from src.services.series_service import build_chart_series
from src.services.snapshot_loader import FinancialSnapshot, SourceFetchers, load_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricCard:
    """One headline figure with its change from last month."""

    value: Decimal
    display_value: str
    percent_change: Decimal
    display_change: str
    trend: ChangeTrend


@dataclass(frozen=True)
class OccupancySummary:
    """Unit and tenant counters."""

    total_units: int
    occupied_units: int
    available_units: int
    total_tenants: int


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard page renders."""

    period: Period
    comparison: PeriodComparison
    revenue: MetricCard
    expenses: MetricCard
    net_income: MetricCard
    chart: list[SeriesPoint]
    occupancy: OccupancySummary | None = None


def summarize_occupancy(
    units: Iterable[Unit | dict[str, Any]], tenant_count: int = 0
) -> OccupancySummary:
    """Count occupied (num_occupants > 0) and available units."""
    parsed = parse_records(Unit, units)
    occupied = sum(1 for unit in parsed if unit.num_occupants > 0)
    return OccupancySummary(
        total_units=len(parsed),
        occupied_units=occupied,
        available_units=len(parsed) - occupied,
        total_tenants=tenant_count,
    )


class DashboardService:
    """Build dashboard summaries from loaded financial data."""

    def __init__(self, config: FinanceConfig | None = None):
        """Initialize with display configuration.

        Args:
            config: Locale/currency settings (default: load_config(), i.e. .env and environment)
        """
        self.config = config or load_config()

    def _card(self, value: Decimal, change: Decimal, higher_is_better: bool) -> MetricCard:
        return MetricCard(
            value=value,
            display_value=format_amount(
                value, currency=self.config.currency, locale=self.config.locale
            ),
            percent_change=change,
            display_change=format_signed_percent(change, locale=self.config.locale),
            # Classify what is displayed, so "0.0%" is never coloured
            trend=classify_change(round_percent(change), higher_is_better=higher_is_better),
        )

    def build_summary(
        self,
        snapshot: FinancialSnapshot,
        reference_date: date | None = None,
        units: Iterable[Unit | dict[str, Any]] | None = None,
        tenant_count: int | None = None,
    ) -> DashboardSummary:
        """Build the summary for the month containing reference_date.

        Args:
            snapshot: Loaded source collections
            reference_date: Date inside the "current" month (default: today)
            units: Units for occupancy counters (default: snapshot.units)
            tenant_count: Number of tenants (default: snapshot.tenant_count)

        Returns:
            DashboardSummary with cards, comparison and the current year's chart
        """
        reference_date = reference_date or date.today()
        period = resolve_period(reference_date)

        comparison = compare_to_previous_month(
            snapshot.payments,
            snapshot.utilities,
            snapshot.expenses,
            snapshot.reports,
            reference_date,
        )
        chart = build_chart_series(
            snapshot.payments,
            snapshot.utilities,
            snapshot.expenses,
            snapshot.reports,
            period.year,
            locale=self.config.locale,
        )

        if units is None:
            units = snapshot.units
        if tenant_count is None:
            tenant_count = snapshot.tenant_count or 0

        current = comparison.current
        summary = DashboardSummary(
            period=period,
            comparison=comparison,
            revenue=self._card(current.revenue, comparison.revenue_percent_change, True),
            # A rise in expenses reads as unfavorable
            expenses=self._card(current.expenses, comparison.expenses_percent_change, False),
            net_income=self._card(
                current.net_income, comparison.net_income_percent_change, True
            ),
            chart=chart,
            occupancy=summarize_occupancy(units, tenant_count) if units is not None else None,
        )

        logger.info(
            "Built dashboard summary for %02d/%d: revenue=%s expenses=%s net=%s",
            period.month,
            period.year,
            current.revenue,
            current.expenses,
            current.net_income,
        )
        return summary

    async def refresh(
        self,
        fetchers: SourceFetchers,
        reference_date: date | None = None,
    ) -> DashboardSummary:
        """Load all source collections, then build the summary.

        Occupancy is filled in when the fetchers include units.

        Raises:
            SourceFetchError: If any collection failed to load; no summary is built
            RecordValidationError: If a loaded record is malformed
        """
        snapshot = await load_snapshot(fetchers)
        return self.build_summary(snapshot, reference_date)


__all__ = [
    "MetricCard",
    "OccupancySummary",
    "DashboardSummary",
    "DashboardService",
    "summarize_occupancy",
]
