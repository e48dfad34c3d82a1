"""Tests for the monetary range gate."""

from __future__ import annotations

from decimal import Decimal

import pytest

from payhistory.core.config import ParserConfig, ValueRange
from payhistory.core.exceptions import ParseFailureKind, ValueOutOfRangeError
from payhistory.parser.extractors import SalaryFields
from payhistory.parser.validation import (
    validate_amount,
    validate_hourly_rate,
    validate_salary_fields,
)

ANNUAL = ParserConfig().annual_range


class TestValidateAmount:
    def test_exact_minimum_passes(self):
        assert validate_amount("annual_amount", Decimal("1000.00"), ANNUAL) == Decimal("1000.00")

    def test_one_cent_below_minimum_fails(self):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_amount("annual_amount", Decimal("999.99"), ANNUAL)
        assert exc_info.value.field == "annual_amount"
        assert exc_info.value.value == Decimal("999.99")
        assert exc_info.value.allowed_range == (Decimal("1000"), Decimal("10000000"))

    def test_exact_maximum_passes(self):
        assert validate_amount("annual_amount", Decimal("10000000.00"), ANNUAL)

    def test_one_cent_above_maximum_fails(self):
        with pytest.raises(ValueOutOfRangeError):
            validate_amount("annual_amount", Decimal("10000000.01"), ANNUAL)

    def test_non_finite_fails(self):
        with pytest.raises(ValueOutOfRangeError):
            validate_amount("annual_amount", Decimal("Infinity"), ANNUAL)
        with pytest.raises(ValueOutOfRangeError):
            validate_amount("annual_amount", Decimal("NaN"), ANNUAL)

    def test_payload_is_machine_readable(self):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_amount("hourly_rate", Decimal("6000"), ValueRange(min=Decimal("1"), max=Decimal("5000")))
        assert exc_info.value.to_payload() == {
            "kind": ParseFailureKind.VALUE_OUT_OF_RANGE.value,
            "field": "hourly_rate",
            "value": "6000",
            "allowed_range": ["1", "5000"],
        }


class TestValidateSalaryFields:
    def test_absent_pay_period_and_change_skip_the_gate(self):
        validate_salary_fields(SalaryFields(annual_amount=Decimal("65000.00")), ParserConfig())

    def test_pay_period_below_minimum_fails(self):
        fields = SalaryFields(pay_period_amount=Decimal("49.99"), annual_amount=Decimal("65000.00"))
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_salary_fields(fields, ParserConfig())
        assert exc_info.value.field == "pay_period_amount"

    def test_negative_pay_period_fails(self):
        with pytest.raises(ValueOutOfRangeError):
            validate_salary_fields(SalaryFields(pay_period_amount=Decimal("-5000.00")), ParserConfig())

    def test_change_above_maximum_fails(self):
        fields = SalaryFields(annual_amount=Decimal("65000.00"), change_amount=Decimal("5000000.01"))
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_salary_fields(fields, ParserConfig())
        assert exc_info.value.field == "change_amount"

    def test_negative_change_within_range_passes(self):
        fields = SalaryFields(
            pay_period_amount=Decimal("2307.69"),
            annual_amount=Decimal("60000.00"),
            change_amount=Decimal("-5000.00"),
        )
        validate_salary_fields(fields, ParserConfig())

    def test_change_below_minimum_fails(self):
        fields = SalaryFields(annual_amount=Decimal("65000.00"), change_amount=Decimal("-5000000.01"))
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_salary_fields(fields, ParserConfig())
        assert exc_info.value.field == "change_amount"

    def test_annual_checked_first(self):
        fields = SalaryFields(pay_period_amount=Decimal("-1.00"), annual_amount=Decimal("500.00"))
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            validate_salary_fields(fields, ParserConfig())
        assert exc_info.value.field == "annual_amount"


class TestValidateHourlyRate:
    def test_zero_means_absent(self):
        validate_hourly_rate(Decimal("0"), ParserConfig())

    def test_above_maximum_fails(self):
        with pytest.raises(ValueOutOfRangeError):
            validate_hourly_rate(Decimal("5000.01"), ParserConfig())
