"""Derived metric structures handed to the presentation layer."""

from __future__ import annotations

import datetime
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class PerformanceTier(StrEnum):
    HIGH = "high"
    SOLID = "solid"
    BELOW = "below"


class MilestoneKind(StrEnum):
    SIX_FIGURES = "six_figures"
    SALARY_DOUBLED = "salary_doubled"
    TWO_HUNDRED_K = "two_hundred_k"
    LARGEST_RAISE = "largest_raise"
    DECADE_OF_SERVICE = "decade_of_service"


class RaiseStatistics(BaseModel):
    """Summary of raise history. Percentages are in percentage units."""

    raise_count: int = 0
    average_raise_percent: float = 0.0
    median_raise_percent: float = 0.0
    largest_raise_percent: float = 0.0
    largest_raise_date: Optional[datetime.date] = None
    adjustment_count: int = 0
    merit_count: int = 0
    merit_share_percent: float = 0.0
    adjustments_per_year: float = 0.0


class BenchmarkComparison(BaseModel):
    """User history measured against a BenchmarkDataset."""

    user_cagr: float
    avg_raise_percent: float
    avg_months_between: float
    months_vs_benchmark: float  # negative: raises come faster than the benchmark
    cagr_vs_industry: float
    raise_vs_typical: float

    # None without promotion raises; the delta also needs a promotion_bump
    avg_promotion_raise_percent: Optional[float] = None
    promotion_vs_benchmark: Optional[float] = None

    nominal_growth: float
    total_inflation: float
    real_growth: float
    inflation_adjusted_start: float
    purchasing_power_gain: float

    industry_projected_salary: float
    vs_industry_salary: float
    vs_industry_percent: float

    performance_tier: PerformanceTier


class ProjectionRow(BaseModel):
    """Projected annual salary after ``years`` under three growth scenarios."""

    years: int
    historical: float
    conservative: float
    custom: float


class Milestone(BaseModel):
    kind: MilestoneKind
    date: datetime.date
    value: Optional[float] = None  # percent for largest_raise, months for salary_doubled
