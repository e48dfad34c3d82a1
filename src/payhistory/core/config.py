"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings

RangeAnchor = Literal["min", "avg", "max"]


class ValueRange(BaseModel):
    """Inclusive plausibility bounds for one monetary field."""

    model_config = {"frozen": True}

    min: Decimal
    max: Decimal

    @model_validator(mode="after")
    def _ordered(self) -> ValueRange:
        if self.min > self.max:
            raise ValueError(f"range min {self.min} exceeds max {self.max}")
        return self

    def contains(self, value: Decimal) -> bool:
        return self.min <= value <= self.max

    def as_tuple(self) -> tuple[Decimal, Decimal]:
        return (self.min, self.max)


class ParserConfig(BaseSettings):
    """Record parser range gates and field-assignment heuristics."""

    model_config = {"env_prefix": "PAYHISTORY_PARSER_"}

    annual_range: ValueRange = ValueRange(min=Decimal("1000"), max=Decimal("10000000"))
    pay_period_range: ValueRange = ValueRange(min=Decimal("50"), max=Decimal("400000"))
    hourly_range: ValueRange = ValueRange(min=Decimal("1"), max=Decimal("5000"))
    change_range: ValueRange = ValueRange(min=Decimal("-5000000"), max=Decimal("5000000"))

    # Field-assignment heuristic thresholds, pinned by regression samples.
    annual_candidate_floor: Decimal = Decimal("500")
    annual_sized_pay_period: Decimal = Decimal("20000")
    pay_period_secondary_floor: Decimal = Decimal("100")


class TierConfig(BaseSettings):
    """Which point of each benchmark raise range a tier starts at."""

    model_config = {"env_prefix": "PAYHISTORY_TIER_"}

    high_floor: RangeAnchor = "min"  # of the high-performer raise range
    solid_floor: RangeAnchor = "avg"  # of the typical raise range


class MetricsConfig(BaseSettings):
    """Metrics calculator fallbacks and thresholds."""

    model_config = {"env_prefix": "PAYHISTORY_METRICS_"}

    cagr_min_years: float = 0.1  # ~36 days; below this use simple growth
    default_inflation_rate: float = 2.5
    default_months_between_raises: float = 12.0
    days_per_year: float = 365.25
    days_per_month: float = 30.44

    conservative_projection_rate: float = 3.0
    projection_horizons: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5, 10, 15, 20])

    six_figure_threshold: float = 100_000.0
    two_hundred_k_threshold: float = 200_000.0
    decade_years: int = 10

    tiers: TierConfig = TierConfig()


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PAYHISTORY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    parser: ParserConfig = ParserConfig()
    metrics: MetricsConfig = MetricsConfig()
