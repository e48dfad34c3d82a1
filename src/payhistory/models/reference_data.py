"""Default reference data shipped with payhistory.

Callers are expected to refresh these periodically; the defaults only keep the
calculator usable out of the box.
"""

from __future__ import annotations

from payhistory.models.benchmarks import BenchmarkDataset, InflationTable, RaiseRange

# US CPI-U annual inflation, Bureau of Labor Statistics. 2025 is a projection.
US_CPI_RATES: dict[int, float] = {
    2010: 1.6, 2011: 3.2, 2012: 2.1, 2013: 1.5, 2014: 1.6,
    2015: 0.1, 2016: 1.3, 2017: 2.1, 2018: 2.4, 2019: 1.8,
    2020: 1.2, 2021: 4.7, 2022: 8.0, 2023: 4.1, 2024: 2.9,
    2025: 2.5,
}
US_CPI_LAST_UPDATED = "2025-01"


def default_inflation_table() -> InflationTable:
    return InflationTable(rates=dict(US_CPI_RATES), last_updated=US_CPI_LAST_UPDATED)


def default_benchmark() -> BenchmarkDataset:
    """B2B SaaS compensation benchmarks (Radford, Mercer, Levels.fyi, Glassdoor)."""
    return BenchmarkDataset(
        industry_cagr=6.0,
        typical_raise=RaiseRange(min=3.0, max=5.0, avg=4.0),
        high_performer_raise=RaiseRange(min=6.0, max=10.0, avg=8.0),
        promotion_bump=RaiseRange(min=10.0, max=20.0, avg=15.0),
        avg_months_between_raises=12.0,
        last_updated="2025-01",
    )
