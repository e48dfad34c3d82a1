"""Average spacing between compensation adjustments."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from payhistory.core.config import MetricsConfig
from payhistory.metrics.growth import months_between
from payhistory.models.compensation import CompensationRecordSet


def average_months_between(
    dates: Iterable[datetime.date],
    default: float = 12.0,
    days_per_month: float = 30.44,
) -> float:
    """Mean gap in months between consecutive dates, sorted ascending.

    Fewer than two dates returns ``default``.
    """
    ordered = sorted(dates)
    if len(ordered) < 2:
        return default
    gaps = [
        months_between(earlier, later, days_per_month)
        for earlier, later in zip(ordered, ordered[1:])
    ]
    return sum(gaps) / len(gaps)


def average_months_between_adjustments(
    record_set: CompensationRecordSet, config: MetricsConfig | None = None
) -> float:
    """Average interval across non-New Hire records; the hire is an anchor, not an event."""
    if config is None:
        config = MetricsConfig()
    return average_months_between(
        (record.date for record in record_set.adjustments),
        default=config.default_months_between_raises,
        days_per_month=config.days_per_month,
    )
