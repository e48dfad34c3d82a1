"""Tenure and growth-rate calculations.

All rates are in percentage units. Degenerate input (zero tenure, zero or
negative amounts) returns 0.0 instead of raising or producing NaN/inf.
"""

from __future__ import annotations

import datetime
import math

from payhistory.core.config import MetricsConfig
from payhistory.models.compensation import CompensationRecordSet


def years_between(
    start: datetime.date, end: datetime.date, days_per_year: float = 365.25
) -> float:
    """Elapsed years, never negative."""
    return max((end - start).days, 0) / days_per_year


def months_between(
    start: datetime.date, end: datetime.date, days_per_month: float = 30.44
) -> float:
    return (end - start).days / days_per_month


def tenure_years(record_set: CompensationRecordSet, config: MetricsConfig | None = None) -> float:
    """Years from the first record to the last one."""
    if config is None:
        config = MetricsConfig()
    return years_between(
        record_set.first_record_date, record_set.last_record_date, config.days_per_year
    )


def simple_growth_percent(start: float, end: float) -> float:
    if start == 0:
        return 0.0
    return (end - start) / start * 100


def compound_annual_growth_rate(
    start: float, end: float, years: float, min_years: float = 0.1
) -> float:
    """CAGR as a percentage.

    Under ``min_years`` of tenure compounding explodes, so simple growth is
    returned instead.
    """
    if years <= 0 or start <= 0 or end <= 0:
        return 0.0
    if years < min_years:
        return simple_growth_percent(start, end)
    try:
        result = (math.pow(end / start, 1 / years) - 1) * 100
    except OverflowError:
        return 0.0
    return result if math.isfinite(result) else 0.0


def record_set_cagr(record_set: CompensationRecordSet, config: MetricsConfig | None = None) -> float:
    if config is None:
        config = MetricsConfig()
    return compound_annual_growth_rate(
        float(record_set.starting_salary),
        float(record_set.current_salary),
        tenure_years(record_set, config),
        config.cagr_min_years,
    )


def total_growth_percent(record_set: CompensationRecordSet) -> float:
    """Nominal growth from the first annual amount to the latest."""
    return simple_growth_percent(
        float(record_set.starting_salary), float(record_set.current_salary)
    )


def real_growth_percent(nominal: float, inflation: float) -> float:
    """Inflation-adjusted growth: ((1 + nominal) / (1 + inflation)) - 1."""
    denominator = 1 + inflation / 100
    if denominator == 0:
        return 0.0
    return ((1 + nominal / 100) / denominator - 1) * 100
