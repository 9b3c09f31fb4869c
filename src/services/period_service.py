"""Calendar period resolution for monthly aggregation."""

from datetime import date

from src.models.stats import Period


def resolve_period(reference_date: date) -> Period:
    """Get the (month, year) period containing a date.

    Args:
        reference_date: Any date (or datetime) inside the period

    Returns:
        Period for the reference date's calendar month
    """
    return Period(reference_date.month, reference_date.year)


def previous_period(month: int, year: int) -> Period:
    """Get the period immediately before (month, year).

    January rolls back to December of the previous year.

    Example:
        >>> previous_period(1, 2025)
        Period(month=12, year=2024)
    """
    if month == 1:
        return Period(12, year - 1)
    return Period(month - 1, year)


def current_and_previous(reference_date: date) -> tuple[Period, Period]:
    """Get the current period and the one before it for a reference date."""
    current = resolve_period(reference_date)
    return current, previous_period(current.month, current.year)


__all__ = ["resolve_period", "previous_period", "current_and_previous"]
