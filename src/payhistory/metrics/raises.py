"""Raise history statistics."""

from __future__ import annotations

from payhistory.core.config import MetricsConfig
from payhistory.metrics.growth import tenure_years
from payhistory.models.compensation import ChangeReason, CompensationRecordSet
from payhistory.models.metrics import RaiseStatistics


def average_raise_percent(record_set: CompensationRecordSet) -> float:
    """Mean change percent over records with a positive change; 0.0 if none."""
    raises = record_set.raises
    if not raises:
        return 0.0
    return float(sum(record.change_percent for record in raises)) / len(raises)


def average_promotion_raise_percent(record_set: CompensationRecordSet) -> float | None:
    """Mean change percent over promotion raises; None if there are none."""
    promotions = [
        record for record in record_set.raises if record.reason is ChangeReason.PROMOTION
    ]
    if not promotions:
        return None
    return float(sum(record.change_percent for record in promotions)) / len(promotions)


def raise_statistics(
    record_set: CompensationRecordSet, config: MetricsConfig | None = None
) -> RaiseStatistics:
    if config is None:
        config = MetricsConfig()

    raises = record_set.raises
    adjustments = record_set.adjustments
    merit_count = sum(1 for record in adjustments if record.reason is ChangeReason.MERIT_INCREASE)
    years = tenure_years(record_set, config)

    stats = RaiseStatistics(
        adjustment_count=len(adjustments),
        merit_count=merit_count,
        merit_share_percent=merit_count / len(adjustments) * 100 if adjustments else 0.0,
        adjustments_per_year=len(adjustments) / years if years > 0 else 0.0,
    )
    if not raises:
        return stats

    percents = sorted(float(record.change_percent) for record in raises)
    # First occurrence wins on ties, in chronological order.
    largest = max(raises, key=lambda record: record.change_percent)
    return stats.model_copy(
        update={
            "raise_count": len(raises),
            "average_raise_percent": average_raise_percent(record_set),
            "median_raise_percent": percents[len(percents) // 2],
            "largest_raise_percent": float(largest.change_percent),
            "largest_raise_date": largest.date,
        }
    )
