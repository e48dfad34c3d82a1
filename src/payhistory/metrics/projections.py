"""Forward salary projections under fixed growth rates."""

from __future__ import annotations

import math

from payhistory.core.config import MetricsConfig
from payhistory.metrics.growth import record_set_cagr
from payhistory.models.compensation import CompensationRecordSet
from payhistory.models.metrics import ProjectionRow


def project_salary(amount: float, rate_percent: float, years: float) -> float:
    """Compound ``amount`` at ``rate_percent`` per year for ``years``."""
    if years <= 0:
        return amount
    base = 1 + rate_percent / 100
    if base <= 0:
        return 0.0
    return amount * base**years


def default_custom_rate(historical_rate: float, conservative_rate: float) -> float:
    """Whole-percent midpoint between the historical and conservative rates."""
    return float(math.floor((historical_rate + conservative_rate) / 2 + 0.5))


def salary_projections(
    record_set: CompensationRecordSet,
    custom_rate_percent: float | None = None,
    config: MetricsConfig | None = None,
) -> list[ProjectionRow]:
    """Current salary projected over each configured horizon.

    Scenarios: the user's own CAGR, the conservative rate and a caller-chosen
    rate (the midpoint of the other two when omitted).
    """
    if config is None:
        config = MetricsConfig()
    current = float(record_set.current_salary)
    historical_rate = record_set_cagr(record_set, config)
    if custom_rate_percent is None:
        custom_rate_percent = default_custom_rate(
            historical_rate, config.conservative_projection_rate
        )
    return [
        ProjectionRow(
            years=years,
            historical=project_salary(current, historical_rate, years),
            conservative=project_salary(current, config.conservative_projection_rate, years),
            custom=project_salary(current, custom_rate_percent, years),
        )
        for years in config.projection_horizons
    ]
