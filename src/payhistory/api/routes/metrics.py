"""Derived metrics endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from payhistory.api.deps import get_settings
from payhistory.core.config import AppSettings
from payhistory.metrics.benchmarks import compare_to_benchmark
from payhistory.metrics.growth import record_set_cagr
from payhistory.metrics.milestones import detect_milestones
from payhistory.metrics.projections import salary_projections
from payhistory.metrics.raises import raise_statistics
from payhistory.models.benchmarks import BenchmarkDataset, InflationTable
from payhistory.models.compensation import CompensationRecordSet
from payhistory.models.metrics import (
    BenchmarkComparison,
    Milestone,
    ProjectionRow,
    RaiseStatistics,
)
from payhistory.models.reference_data import default_benchmark, default_inflation_table
from payhistory.parser.paste_inspector import require_adjustment_history
from payhistory.parser.record_parser import parse_pay_history

router = APIRouter(tags=["metrics"])


class SummaryRequest(BaseModel):
    raw_text: str
    benchmark: Optional[BenchmarkDataset] = None
    inflation: Optional[InflationTable] = None
    custom_rate: Optional[float] = None


class MetricsSummary(BaseModel):
    records: CompensationRecordSet
    cagr: float
    raise_statistics: RaiseStatistics
    benchmark: BenchmarkComparison
    projections: list[ProjectionRow]
    milestones: list[Milestone]


@router.post("/summary")
async def summary(
    body: SummaryRequest, settings: AppSettings = Depends(get_settings)
) -> MetricsSummary:
    """Parse, gate on adjustment history, then compute every derived metric."""
    record_set = require_adjustment_history(parse_pay_history(body.raw_text, settings.parser))
    config = settings.metrics
    return MetricsSummary(
        records=record_set,
        cagr=record_set_cagr(record_set, config),
        raise_statistics=raise_statistics(record_set, config),
        benchmark=compare_to_benchmark(
            record_set,
            body.benchmark or default_benchmark(),
            body.inflation or default_inflation_table(),
            config,
        ),
        projections=salary_projections(record_set, body.custom_rate, config),
        milestones=detect_milestones(record_set, config),
    )
