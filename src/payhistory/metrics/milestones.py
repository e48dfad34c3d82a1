"""Career milestones detected from a pay history."""

from __future__ import annotations

import datetime

from payhistory.core.config import MetricsConfig
from payhistory.metrics.growth import months_between, tenure_years
from payhistory.models.compensation import CompensationRecord, CompensationRecordSet
from payhistory.models.metrics import Milestone, MilestoneKind


def _first_at_or_above(
    record_set: CompensationRecordSet, threshold: float
) -> CompensationRecord | None:
    return next(
        (record for record in record_set.records if record.annual_amount >= threshold), None
    )


def detect_milestones(
    record_set: CompensationRecordSet, config: MetricsConfig | None = None
) -> list[Milestone]:
    """Milestones in a fixed order: six figures, doubled, 200K, largest raise, decade."""
    if config is None:
        config = MetricsConfig()

    milestones: list[Milestone] = []
    hire_date = record_set.first_record_date

    six_figures = _first_at_or_above(record_set, config.six_figure_threshold)
    if six_figures is not None:
        milestones.append(Milestone(kind=MilestoneKind.SIX_FIGURES, date=six_figures.date))

    doubled = _first_at_or_above(record_set, float(record_set.starting_salary) * 2)
    if doubled is not None:
        milestones.append(
            Milestone(
                kind=MilestoneKind.SALARY_DOUBLED,
                date=doubled.date,
                value=round(months_between(hire_date, doubled.date, config.days_per_month)),
            )
        )

    two_hundred_k = _first_at_or_above(record_set, config.two_hundred_k_threshold)
    if two_hundred_k is not None:
        milestones.append(Milestone(kind=MilestoneKind.TWO_HUNDRED_K, date=two_hundred_k.date))

    raises = record_set.raises
    if raises:
        largest = max(raises, key=lambda record: record.change_percent)
        milestones.append(
            Milestone(
                kind=MilestoneKind.LARGEST_RAISE,
                date=largest.date,
                value=float(largest.change_percent),
            )
        )

    if tenure_years(record_set, config) >= config.decade_years:
        offset = datetime.timedelta(days=round(config.decade_years * config.days_per_year))
        milestones.append(Milestone(kind=MilestoneKind.DECADE_OF_SERVICE, date=hire_date + offset))

    return milestones
