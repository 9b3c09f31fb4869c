"""Unit tests for period resolution."""

from datetime import date, datetime

from src.models.stats import Period
from src.services.period_service import current_and_previous, previous_period, resolve_period


class TestPeriodService:
    """Test period resolution and rollover."""

    def test_resolve_period(self):
        """Reference date maps to its calendar month."""
        assert resolve_period(date(2024, 3, 31)) == Period(3, 2024)

    def test_resolve_period_accepts_datetime(self):
        """Datetimes resolve like dates."""
        assert resolve_period(datetime(2024, 11, 1, 23, 59)) == Period(11, 2024)

    def test_previous_period_same_year(self):
        """Months after January step back within the year."""
        assert previous_period(3, 2024) == Period(2, 2024)
        assert previous_period(12, 2024) == Period(11, 2024)

    def test_previous_period_january_wraps(self):
        """Scenario D: January 2025 -> December 2024."""
        assert previous_period(1, 2025) == Period(12, 2024)

    def test_current_and_previous(self):
        """Current and previous period for a January reference date."""
        current, previous = current_and_previous(date(2025, 1, 15))

        assert current == Period(1, 2025)
        assert previous == Period(12, 2024)

    def test_period_unpacks(self):
        """Period is a (month, year) tuple."""
        month, year = previous_period(1, 2025)
        assert (month, year) == (12, 2024)
