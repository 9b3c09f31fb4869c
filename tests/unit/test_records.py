"""Unit tests for source record parsing."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.models.records import Expense, MonthlyReport, Payment, Unit, UtilityBill, parse_records


class TestPaymentParsing:
    """Test Payment payload parsing."""

    def test_camel_case_payload(self):
        """Backend payload keys map onto snake_case fields."""
        payment = Payment.model_validate(
            {
                "id": 7,
                "unitId": 3,
                "modeOfPayment": "GCash",
                "amount": 8500,
                "dueDate": "2024-03-01",
                "monthOfStart": "2024-03-01",
                "monthOfEnd": "2024-03-31",
                "isPaid": True,
                "paidAt": "2024-03-05T14:22:10",
            }
        )

        assert payment.unit_id == 3
        assert payment.amount == Decimal("8500")
        assert payment.paid_at == date(2024, 3, 5)
        assert payment.month_of_end == "2024-03-31"
        assert payment.due_date == date(2024, 3, 1)
        assert payment.mode_of_payment == "GCash"

    def test_utc_suffix(self):
        """Trailing Z is accepted."""
        payment = Payment.model_validate({"amount": 1, "paidAt": "2024-12-31T23:00:00Z"})

        assert payment.paid_at == date(2024, 12, 31)

    def test_empty_paid_at_is_none(self):
        """Blank paidAt means not paid yet."""
        payment = Payment.model_validate({"amount": 1, "isPaid": False, "paidAt": ""})

        assert payment.paid_at is None

    def test_float_amount_exact(self):
        """Floats convert through str."""
        assert Payment.model_validate({"amount": 0.1}).amount == Decimal("0.1")

    def test_non_numeric_amount_rejected(self):
        """Non-numeric amount raises instead of becoming zero."""
        with pytest.raises(ValidationError):
            Payment.model_validate({"amount": "abc"})

    def test_bad_date_rejected(self):
        """Unparseable paidAt raises a ValueError subclass."""
        with pytest.raises(ValueError, match="Cannot parse date"):
            Payment.model_validate({"amount": 1, "paidAt": "05/03/2024"})

    def test_frozen(self):
        """Records are immutable."""
        payment = Payment(amount=Decimal("1"))

        with pytest.raises(ValidationError):
            payment.amount = Decimal("2")


class TestOtherRecords:
    """Test UtilityBill, Expense, MonthlyReport and Unit parsing."""

    def test_utility_bill(self):
        """Utility payload with meter readings."""
        bill = UtilityBill.model_validate(
            {
                "id": 1,
                "type": "electricity",
                "previousReading": 1200,
                "currentReading": 1350,
                "totalMeter": 150,
                "totalAmount": 1725.5,
                "isPaid": True,
                "paidAt": "2024-03-10",
                "unitId": 4,
                "rateId": 2,
            }
        )

        assert bill.total_amount == Decimal("1725.5")
        assert bill.total_meter == Decimal("150")
        assert bill.type == "electricity"

    def test_expense_date_key(self):
        """Expense 'date' payload key maps to expense_date."""
        expense = Expense.model_validate({"amount": "99.99", "date": "2024-02-29", "reason": "Repair"})

        assert expense.expense_date == date(2024, 2, 29)
        assert expense.amount == Decimal("99.99")

    def test_expense_requires_date(self):
        """Expenses without a date cannot be bucketed."""
        with pytest.raises(ValidationError):
            Expense.model_validate({"amount": 10})

    def test_report_missing_amounts_are_zero(self):
        """Null utilityBills/expenses count as zero."""
        report = MonthlyReport.model_validate(
            {"month": 3, "year": 2024, "utilityBills": None, "expenses": None}
        )

        assert report.utility_bills == Decimal("0")
        assert report.expenses == Decimal("0")

    @pytest.mark.parametrize("month", [0, 13])
    def test_report_month_range(self, month):
        """Month must be 1-12."""
        with pytest.raises(ValidationError):
            MonthlyReport.model_validate({"month": month, "year": 2024})

    def test_unit(self):
        """Unit occupancy payload."""
        unit = Unit.model_validate({"id": 1, "unitNumber": "A-101", "numOccupants": 2})

        assert unit.unit_number == "A-101"
        assert unit.num_occupants == 2

    def test_extra_keys_ignored(self):
        """Unknown payload keys are ignored."""
        unit = Unit.model_validate({"id": 1, "priceRange": "high"})

        assert unit.id == 1


class TestParseRecords:
    """Test parse_records helper."""

    def test_mixed_inputs_keep_order(self):
        """Models pass through; mappings are validated; order kept."""
        existing = Payment(id=1, amount=Decimal("5"))

        result = parse_records(Payment, [existing, {"id": 2, "amount": "6"}])

        assert result[0] is existing
        assert [p.id for p in result] == [1, 2]

    def test_malformed_item_raises(self):
        """Any malformed item fails the whole parse."""
        with pytest.raises(ValueError):
            parse_records(Payment, [{"amount": 1}, {"amount": None}])
