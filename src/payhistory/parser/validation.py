"""Range gate for extracted monetary values."""

from __future__ import annotations

from decimal import Decimal

from payhistory.core.config import ParserConfig, ValueRange
from payhistory.core.exceptions import ValueOutOfRangeError
from payhistory.parser.extractors import SalaryFields


def validate_amount(field: str, value: Decimal, value_range: ValueRange) -> Decimal:
    """Return ``value`` unchanged if within ``value_range``, else raise.

    Raises:
        ValueOutOfRangeError: value is outside the inclusive bounds.
    """
    if not value.is_finite() or not value_range.contains(value):
        raise ValueOutOfRangeError(field, value, value_range.as_tuple())
    return value


def validate_salary_fields(fields: SalaryFields, config: ParserConfig) -> None:
    """Gate every present field. Absent (zero) pay period and change are not checked."""
    if fields.annual_amount != 0:
        validate_amount("annual_amount", fields.annual_amount, config.annual_range)
    if fields.pay_period_amount != 0:
        validate_amount("pay_period_amount", fields.pay_period_amount, config.pay_period_range)
    if fields.change_amount != 0:
        validate_amount("change_amount", fields.change_amount, config.change_range)


def validate_hourly_rate(rate: Decimal, config: ParserConfig) -> None:
    if rate != 0:
        validate_amount("hourly_rate", rate, config.hourly_range)
