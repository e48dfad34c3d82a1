"""Shared test doubles: sample pastes, record builders and a fixed inflation source."""

from __future__ import annotations

import datetime
from decimal import Decimal

from payhistory.models.compensation import (
    ChangeReason,
    CompensationRecord,
    CompensationRecordSet,
)

# Rates tab as copied from the portal: headings, newest record first, values run together.
PORTAL_PASTE = """Rates
Salary
Effective Date Reason Pay Period Annual Change Hourly Percent
History
06/01/2024 Promotion $3,653.85$95,000.00$13,000.0045.67 / Hour15.8537
03/01/2023 Merit Increase $3,153.85$82,000.00$4,000.0039.42 / Hour5.1282
03/01/2022 Market Adjustment $3,000.00$78,000.00$3,000.0037.50 / Hour4.0000
01/15/2021 New Hire $2,884.62$75,000.0036.06 / Hour
Showing 4 items
"""

# Same history, records out of order and Windows line endings.
SHUFFLED_PASTE = (
    "03/01/2022 Market Adjustment $3,000.00$78,000.00$3,000.0037.50 / Hour4.0000\r\n"
    "06/01/2024 Promotion $3,653.85$95,000.00$13,000.0045.67 / Hour15.8537\r\n"
    "01/15/2021 New Hire $2,884.62$75,000.0036.06 / Hour\r\n"
    "03/01/2023 Merit Increase $3,153.85$82,000.00$4,000.0039.42 / Hour5.1282\r\n"
)

# Cents of the annual figure run straight into a four-decimal percentage.
CONCATENATED_SEGMENT = "06/12/2022 Merit Increase$1,166.6712.2807"


class StaticInflationSource:
    """IInflationSource over a plain dict."""

    def __init__(self, rates: dict[int, float]) -> None:
        self._rates = rates

    def rate_for(self, year: int) -> float | None:
        return self._rates.get(year)


def make_record(
    date: str,
    annual: str | int,
    reason: ChangeReason = ChangeReason.MERIT_INCREASE,
    change_percent: str | float = "0",
    **fields,
) -> CompensationRecord:
    """Build a record from an ISO date string and an annual amount."""
    return CompensationRecord(
        date=datetime.date.fromisoformat(date),
        reason=reason,
        annual_amount=Decimal(str(annual)),
        change_percent=Decimal(str(change_percent)),
        **fields,
    )


def make_record_set(*records: CompensationRecord) -> CompensationRecordSet:
    return CompensationRecordSet(records=records)


def career_record_set() -> CompensationRecordSet:
    """Hire at 60k on 2014-03-01, three raises, 125k ten years later."""
    return make_record_set(
        make_record("2014-03-01", 60_000, ChangeReason.NEW_HIRE),
        make_record("2016-03-01", 66_000, change_percent="10.0000"),
        make_record("2019-06-15", 85_000, ChangeReason.PROMOTION, change_percent="28.7879"),
        make_record("2024-03-01", 125_000, ChangeReason.MARKET_ADJUSTMENT, change_percent="47.0588"),
    )


__all__ = [
    "CONCATENATED_SEGMENT",
    "PORTAL_PASTE",
    "SHUFFLED_PASTE",
    "StaticInflationSource",
    "career_record_set",
    "make_record",
    "make_record_set",
]
