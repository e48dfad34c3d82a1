"""Comparison of a pay history against an industry benchmark dataset."""

from __future__ import annotations

from payhistory.core.config import MetricsConfig, TierConfig
from payhistory.core.protocols import IInflationSource
from payhistory.metrics.growth import (
    real_growth_percent,
    record_set_cagr,
    tenure_years,
    total_growth_percent,
)
from payhistory.metrics.inflation import inflation_between
from payhistory.metrics.intervals import average_months_between_adjustments
from payhistory.metrics.projections import project_salary
from payhistory.metrics.raises import average_promotion_raise_percent, average_raise_percent
from payhistory.models.benchmarks import BenchmarkDataset
from payhistory.models.compensation import CompensationRecordSet
from payhistory.models.metrics import BenchmarkComparison, PerformanceTier


def classify_performance_tier(
    avg_raise: float, benchmark: BenchmarkDataset, config: TierConfig | None = None
) -> PerformanceTier:
    """Tier by average raise. Floors are inclusive: exactly at a floor is that tier."""
    if config is None:
        config = TierConfig()
    if avg_raise >= benchmark.high_performer_raise.anchor(config.high_floor):
        return PerformanceTier.HIGH
    if avg_raise >= benchmark.typical_raise.anchor(config.solid_floor):
        return PerformanceTier.SOLID
    return PerformanceTier.BELOW


def compare_to_benchmark(
    record_set: CompensationRecordSet,
    benchmark: BenchmarkDataset,
    inflation_table: IInflationSource,
    config: MetricsConfig | None = None,
) -> BenchmarkComparison:
    if config is None:
        config = MetricsConfig()

    start = float(record_set.starting_salary)
    current = float(record_set.current_salary)

    user_cagr = record_set_cagr(record_set, config)
    avg_raise = average_raise_percent(record_set)
    avg_months = average_months_between_adjustments(record_set, config)

    avg_promotion = average_promotion_raise_percent(record_set)
    promotion_vs_benchmark = None
    if avg_promotion is not None and benchmark.promotion_bump is not None:
        promotion_vs_benchmark = avg_promotion - benchmark.promotion_bump.avg

    nominal = total_growth_percent(record_set)
    inflation = inflation_between(
        inflation_table,
        record_set.first_record_date,
        record_set.last_record_date,
        config.default_inflation_rate,
    )
    inflation_adjusted_start = start * (1 + inflation / 100)

    industry_projected = project_salary(
        start, benchmark.industry_cagr, tenure_years(record_set, config)
    )
    vs_industry = current - industry_projected

    return BenchmarkComparison(
        user_cagr=user_cagr,
        avg_raise_percent=avg_raise,
        avg_months_between=avg_months,
        months_vs_benchmark=avg_months - benchmark.avg_months_between_raises,
        cagr_vs_industry=user_cagr - benchmark.industry_cagr,
        raise_vs_typical=avg_raise - benchmark.typical_raise.avg,
        avg_promotion_raise_percent=avg_promotion,
        promotion_vs_benchmark=promotion_vs_benchmark,
        nominal_growth=nominal,
        total_inflation=inflation,
        real_growth=real_growth_percent(nominal, inflation),
        inflation_adjusted_start=inflation_adjusted_start,
        purchasing_power_gain=current - inflation_adjusted_start,
        industry_projected_salary=industry_projected,
        vs_industry_salary=vs_industry,
        vs_industry_percent=vs_industry / industry_projected * 100 if industry_projected > 0 else 0.0,
        performance_tier=classify_performance_tier(avg_raise, benchmark, config.tiers),
    )
