"""Caller-supplied reference data: industry benchmarks and inflation rates."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from payhistory.core.config import RangeAnchor

_YEAR_MONTH = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def _check_year_month(value: str) -> str:
    """Empty (undated) or YYYY-MM with a calendar month."""
    if value and not _YEAR_MONTH.match(value):
        raise ValueError(f"last_updated must be YYYY-MM, got {value!r}")
    return value


class RaiseRange(BaseModel):
    """Raise percentage band (percentage units)."""

    model_config = {"frozen": True}

    min: float
    max: float
    avg: float

    @model_validator(mode="after")
    def _ordered(self) -> RaiseRange:
        if not self.min <= self.avg <= self.max:
            raise ValueError(f"expected min <= avg <= max, got {self.min}/{self.avg}/{self.max}")
        return self

    def anchor(self, point: RangeAnchor) -> float:
        return {"min": self.min, "avg": self.avg, "max": self.max}[point]


class BenchmarkDataset(BaseModel):
    """Industry reference figures the user's history is compared against."""

    model_config = {"frozen": True}

    industry_cagr: float
    typical_raise: RaiseRange
    high_performer_raise: RaiseRange
    promotion_bump: Optional[RaiseRange] = None
    avg_months_between_raises: float = Field(default=12.0, gt=0)
    last_updated: str = ""

    @field_validator("last_updated")
    @classmethod
    def _year_month(cls, value: str) -> str:
        return _check_year_month(value)


class InflationTable(BaseModel):
    """Sparse year -> annual inflation rate (percent) mapping.

    Implements IInflationSource. ``last_updated`` is the YYYY-MM the table was
    last refreshed from the statistics source.
    """

    model_config = {"frozen": True}

    rates: dict[int, float] = Field(default_factory=dict)
    last_updated: str = ""
    stale_threshold_months: int = Field(default=18, ge=1)

    @field_validator("last_updated")
    @classmethod
    def _year_month(cls, value: str) -> str:
        return _check_year_month(value)

    def rate_for(self, year: int) -> float | None:
        return self.rates.get(year)

    def last_updated_month(self) -> tuple[int, int] | None:
        match = _YEAR_MONTH.match(self.last_updated)
        if match is None:
            return None
        return int(match.group(1)), int(match.group(2))
