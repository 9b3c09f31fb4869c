"""Financial aggregation services for the property-management dashboard.

Entry points:
    aggregate                  - one period's PeriodStats
    compare_to_previous_month  - this month vs last month
    build_annual_series        - 12 monthly PeriodStats for a year
    DashboardService           - comparison, chart and formatted cards together
"""

from src.services.aggregation_service import aggregate
from src.services.comparison_service import compare_to_previous_month, percent_change
from src.services.dashboard_service import DashboardService
from src.services.series_service import build_annual_series

__all__ = [
    "aggregate",
    "compare_to_previous_month",
    "percent_change",
    "build_annual_series",
    "DashboardService",
]
