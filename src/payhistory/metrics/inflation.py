"""Cumulative inflation over calendar windows, with partial boundary years."""

from __future__ import annotations

import datetime

from payhistory.core.protocols import IInflationSource
from payhistory.models.benchmarks import InflationTable


def _rate(table: IInflationSource, year: int, default_rate: float) -> float:
    rate = table.rate_for(year)
    return default_rate if rate is None else rate


def cumulative_inflation(
    table: IInflationSource,
    start_year: int,
    end_year: int,
    start_month: int = 1,
    end_month: int = 12,
    default_rate: float = 2.5,
) -> float:
    """Compounded inflation (percent) from ``start_month`` of ``start_year``
    through ``end_month`` of ``end_year``, both months inclusive and 1-based.

    Boundary years contribute ``rate / 12`` per covered month; interior years
    contribute their full rate. Years missing from the table use
    ``default_rate``. A window that ends before it starts yields 0.0.
    """
    if (end_year, end_month) < (start_year, start_month):
        return 0.0

    factor = 1.0
    for year in range(start_year, end_year + 1):
        rate = _rate(table, year, default_rate)
        if year == start_year and year == end_year:
            months = end_month - start_month + 1
        elif year == start_year:
            months = 12 - start_month + 1
        elif year == end_year:
            months = end_month
        else:
            months = 12
        factor *= 1 + (rate / 12 * months) / 100
    return (factor - 1) * 100


def inflation_between(
    table: IInflationSource,
    start: datetime.date,
    end: datetime.date,
    default_rate: float = 2.5,
) -> float:
    return cumulative_inflation(
        table, start.year, end.year, start.month, end.month, default_rate
    )


def inflation_adjusted_amount(
    table: IInflationSource,
    amount: float,
    from_year: int,
    to_year: int,
    default_rate: float = 2.5,
) -> float:
    """What ``amount`` in ``from_year`` money is worth in ``to_year`` money.

    Compounds every full year in ``[from_year, to_year)``. A reversed span
    deflates through the same years.
    """
    if to_year < from_year:
        result = amount
        for year in range(to_year, from_year):
            divisor = 1 + _rate(table, year, default_rate) / 100
            if divisor == 0:
                return 0.0
            result /= divisor
        return result

    result = amount
    for year in range(from_year, to_year):
        result *= 1 + _rate(table, year, default_rate) / 100
    return result


def is_inflation_data_stale(table: InflationTable, as_of: datetime.date) -> bool:
    """True when the table is older than its stale threshold, or undated."""
    last_updated = table.last_updated_month()
    if last_updated is None:
        return True
    year, month = last_updated
    age_months = (as_of.year - year) * 12 + (as_of.month - month)
    return age_months > table.stale_threshold_months
