"""Source records and derived statistics."""

from src.models.records import (
    Expense,
    MonthlyReport,
    Payment,
    SourceRecord,
    Unit,
    UtilityBill,
    parse_records,
)
from src.models.stats import (
    Period,
    PeriodBreakdown,
    PeriodComparison,
    PeriodStats,
    SeriesPoint,
)

__all__ = [
    "SourceRecord",
    "Payment",
    "UtilityBill",
    "Expense",
    "MonthlyReport",
    "Unit",
    "parse_records",
    "Period",
    "PeriodBreakdown",
    "PeriodStats",
    "PeriodComparison",
    "SeriesPoint",
]
