"""Unit tests for the annual series builder."""

from decimal import Decimal

from src.services.series_service import build_annual_series, build_chart_series


class TestBuildAnnualSeries:
    """Test the 12-month series."""

    def test_empty_inputs_give_twelve_zero_months(self):
        """No data still yields January..December, all zero."""
        series = build_annual_series([], [], [], [], 2024)

        assert len(series) == 12
        assert [s.month for s in series] == list(range(1, 13))
        assert all(s.year == 2024 for s in series)
        assert all(s.revenue == s.expenses == s.net_income == 0 for s in series)

    def test_months_populated(self, payments, utilities, expenses, reports):
        """Fixture data lands in February and March only."""
        series = build_annual_series(payments, utilities, expenses, reports, 2024)

        assert series[1].revenue == Decimal("1000.00")
        assert series[2].revenue == Decimal("2200.50")
        assert series[2].expenses == Decimal("725.25")
        assert all(s.revenue == 0 for i, s in enumerate(series) if i not in (1, 2))

    def test_other_year_is_empty(self, payments, utilities, expenses, reports):
        """Records from 2024 do not leak into 2025."""
        series = build_annual_series(payments, utilities, expenses, reports, 2025)

        assert all(s.revenue == s.expenses == 0 for s in series)

    def test_deterministic(self, payments, utilities, expenses, reports):
        """Two calls with the same inputs produce identical series."""
        first = build_annual_series(payments, utilities, expenses, reports, 2024)
        second = build_annual_series(payments, utilities, expenses, reports, 2024)

        assert first == second

    def test_returns_list(self):
        """Series is fully materialized."""
        assert isinstance(build_annual_series([], [], [], [], 2024), list)

    def test_unit_filter(self, payments, utilities, expenses, reports):
        """unit_id applies to every month."""
        series = build_annual_series(payments, utilities, expenses, reports, 2024, unit_id=102)

        assert series[1].revenue == Decimal("0")
        assert series[2].revenue == Decimal("1500.50")


class TestBuildChartSeries:
    """Test labelled chart points."""

    def test_english_labels(self):
        """en_US labels are Jan..Dec."""
        points = build_chart_series([], [], [], [], 2024, locale="en_US")

        assert [p.label for p in points] == [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]

    def test_points_carry_stats(self, payments, utilities, expenses, reports):
        """Each point wraps the month's PeriodStats."""
        points = build_chart_series(payments, utilities, expenses, reports, 2024, locale="en_US")

        assert points[2].label == "Mar"
        assert points[2].stats.net_income == Decimal("1775.25")
