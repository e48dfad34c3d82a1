"""Compensation change records reconstructed from a pasted pay history.

Records are immutable; a parse call builds a fresh CompensationRecordSet and
nothing mutates it afterwards.
"""

from __future__ import annotations

import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field, field_validator

CENT = Decimal("0.01")


class ChangeReason(StrEnum):
    """Closed vocabulary of change reasons; values are the source-text labels."""

    MERIT_INCREASE = "Merit Increase"
    PROMOTION = "Promotion"
    MARKET_ADJUSTMENT = "Market Adjustment"
    EQUITY = "Equity"
    NEW_HIRE = "New Hire"
    UNKNOWN = "Unknown"

    @classmethod
    def scan_order(cls) -> tuple[ChangeReason, ...]:
        """Labels in match priority order (declaration order, Unknown excluded)."""
        return tuple(reason for reason in cls if reason is not cls.UNKNOWN)


class CompensationRecord(BaseModel):
    """One effective-dated compensation change."""

    model_config = {"frozen": True}

    date: datetime.date
    reason: ChangeReason = ChangeReason.UNKNOWN

    # --- Monetary fields (cents) ---
    pay_period_amount: Decimal = Field(default=Decimal("0"), ge=0)
    annual_amount: Decimal = Field(gt=0)
    hourly_rate: Decimal = Field(default=Decimal("0"), ge=0)  # 0 when absent from source
    change_amount: Decimal = Decimal("0")

    # --- Percentage units, source precision (4 dp) ---
    change_percent: Decimal = Decimal("0")

    @field_validator("pay_period_amount", "annual_amount", "hourly_rate", "change_amount")
    @classmethod
    def _to_cents(cls, value: Decimal) -> Decimal:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)

    @property
    def is_new_hire(self) -> bool:
        return self.reason is ChangeReason.NEW_HIRE

    @property
    def has_hourly_rate(self) -> bool:
        return self.hourly_rate > 0


class CompensationRecordSet(BaseModel):
    """Parse result: records ascending by date plus derived date bounds."""

    model_config = {"frozen": True}

    records: tuple[CompensationRecord, ...] = Field(min_length=1)

    @field_validator("records")
    @classmethod
    def _sort_ascending(
        cls, records: tuple[CompensationRecord, ...]
    ) -> tuple[CompensationRecord, ...]:
        # sorted() is stable: same-day records keep discovery order
        return tuple(sorted(records, key=lambda record: record.date))

    def __len__(self) -> int:
        return len(self.records)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_record_date(self) -> datetime.date:
        return self.records[0].date

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_record_date(self) -> datetime.date:
        return self.records[-1].date

    @property
    def most_recent_first(self) -> tuple[CompensationRecord, ...]:
        """Display order: latest record first."""
        return tuple(reversed(self.records))

    @property
    def starting_salary(self) -> Decimal:
        return self.records[0].annual_amount

    @property
    def current_salary(self) -> Decimal:
        return self.records[-1].annual_amount

    @property
    def adjustments(self) -> tuple[CompensationRecord, ...]:
        """Records that are changes, not the initial hire anchor."""
        return tuple(record for record in self.records if not record.is_new_hire)

    @property
    def raises(self) -> tuple[CompensationRecord, ...]:
        """Records with a positive percentage change."""
        return tuple(record for record in self.records if record.change_percent > 0)
