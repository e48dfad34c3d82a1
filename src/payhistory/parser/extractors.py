"""Field extractors for a single record segment.

The source portal concatenates values with no separators, e.g.
``$2,692.30$70,000.00$3,000.0033.65 / Hour4.4776``. Dollar tokens are capped
at exactly two decimal digits; that cap is what splits one value from the next.
"""

from __future__ import annotations

import re
from decimal import Decimal

from pydantic import BaseModel

from payhistory.core.config import ParserConfig
from payhistory.models.compensation import ChangeReason

DOLLAR_TOKEN = re.compile(r"(-?)\$(\d[\d,]*\.\d{2})")
HOURLY_RATE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:/|per)\s*hour", re.IGNORECASE)
PERCENT_NATIVE = re.compile(r"(-?\d+\.\d{4})\s*$")
PERCENT_FALLBACK = re.compile(r"(-?\d+\.?\d*)\s*$")

_ZERO = Decimal("0")
_PERCENT_FALLBACK_CEILING = Decimal("100")


class SalaryFields(BaseModel):
    """Monetary fields assigned from a segment's dollar tokens. 0 means absent."""

    model_config = {"frozen": True}

    pay_period_amount: Decimal = _ZERO
    annual_amount: Decimal = _ZERO
    change_amount: Decimal = _ZERO


def extract_reason(body: str) -> ChangeReason:
    """First label contained in the text, in priority order; Unknown otherwise."""
    for reason in ChangeReason.scan_order():
        if reason.value in body:
            return reason
    return ChangeReason.UNKNOWN


def extract_dollar_amounts(body: str) -> list[Decimal]:
    """Every ``$d,ddd.dd`` token in order of appearance, thousands separators removed."""
    amounts = []
    for match in DOLLAR_TOKEN.finditer(body):
        sign, digits = match.groups()
        amounts.append(Decimal(sign + digits.replace(",", "")))
    return amounts


def mask_dollar_amounts(body: str) -> str:
    """Replace dollar tokens with a space so their cents cannot bleed into later scans."""
    return DOLLAR_TOKEN.sub(" ", body)


def assign_salary_fields(amounts: list[Decimal], config: ParserConfig) -> SalaryFields:
    """Decide which extracted amount is annual, per pay period and change.

    - annual: the largest amount at or above ``annual_candidate_floor``
    - pay period: the first amount, unless it is annual-sized, in which case
      the first amount strictly between ``pay_period_secondary_floor`` and
      ``annual_sized_pay_period``
    - change: with 3+ amounts, the amount right after the annual one, signed

    No range checks happen here; values below the floors are left for the
    range gate to reject.
    """
    if not amounts:
        return SalaryFields()

    candidates = [amount for amount in amounts if amount >= config.annual_candidate_floor]
    annual = max(candidates) if candidates else _ZERO

    pay_period = amounts[0]
    if pay_period >= config.annual_sized_pay_period:
        pay_period = next(
            (
                amount
                for amount in amounts
                if config.pay_period_secondary_floor < amount < config.annual_sized_pay_period
            ),
            _ZERO,
        )

    change = _ZERO
    if len(amounts) >= 3 and candidates:
        following = amounts[amounts.index(annual) + 1:]
        if following:
            change = following[0]

    return SalaryFields(pay_period_amount=pay_period, annual_amount=annual, change_amount=change)


def extract_hourly_rate(masked_body: str) -> Decimal:
    match = HOURLY_RATE.search(masked_body)
    if match is None:
        return _ZERO
    return Decimal(match.group(1))


def extract_change_percent(masked_body: str) -> Decimal:
    """Signed trailing percentage: four-decimal native form, else a trailing number under 100 in magnitude."""
    text = masked_body.strip()
    match = PERCENT_NATIVE.search(text)
    if match is not None:
        return Decimal(match.group(1))
    match = PERCENT_FALLBACK.search(text)
    if match is not None:
        potential = Decimal(match.group(1))
        if abs(potential) < _PERCENT_FALLBACK_CEILING:
            return potential
    return _ZERO
