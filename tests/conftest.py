"""Shared fixtures: small March/February 2024 data set in backend payload form."""

from decimal import Decimal

import pytest

from src.models.records import Expense, MonthlyReport, Payment, UtilityBill


@pytest.fixture
def payments() -> list[Payment]:
    """Rent payments: two paid in March, one in February, one unpaid."""
    return [
        Payment(id=1, unit_id=101, amount=Decimal("1000.00"), is_paid=True, paid_at="2024-03-05"),
        Payment(id=2, unit_id=102, amount=Decimal("1500.50"), is_paid=True, paid_at="2024-03-28"),
        Payment(id=3, unit_id=101, amount=Decimal("1000.00"), is_paid=True, paid_at="2024-02-04"),
        Payment(id=4, unit_id=102, amount=Decimal("1500.50"), is_paid=False, paid_at="2024-03-10"),
    ]


@pytest.fixture
def utilities() -> list[UtilityBill]:
    """Owner-paid utilities: one paid in March, one unpaid."""
    return [
        UtilityBill(id=1, unit_id=101, total_amount=Decimal("300.00"), is_paid=True, paid_at="2024-03-10", type="electricity"),
        UtilityBill(id=2, unit_id=102, total_amount=Decimal("120.00"), is_paid=False, type="water"),
    ]


@pytest.fixture
def expenses() -> list[Expense]:
    """Direct expenses in March and February."""
    return [
        Expense(id=1, unit_id=101, amount=Decimal("75.25"), expense_date="2024-03-15", reason="Plumbing"),
        Expense(id=2, unit_id=102, amount=Decimal("40.00"), expense_date="2024-02-20", reason="Paint"),
    ]


@pytest.fixture
def reports() -> list[MonthlyReport]:
    """Monthly reports: two units in March, one in February."""
    return [
        MonthlyReport(id=1, unit_id=101, month=3, year=2024, monthly_dues=Decimal("1000"), utility_bills=Decimal("200"), expenses=Decimal("50")),
        MonthlyReport(id=2, unit_id=102, month=3, year=2024, monthly_dues=Decimal("1500"), utility_bills=Decimal("100"), expenses=Decimal("0")),
        MonthlyReport(id=3, unit_id=101, month=2, year=2024, monthly_dues=Decimal("1000"), utility_bills=Decimal("150"), expenses=Decimal("25")),
    ]
