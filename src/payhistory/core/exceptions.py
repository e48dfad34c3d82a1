"""payhistory exception hierarchy.

Parse failures are user-facing (someone pasted the wrong data) and carry only
machine-readable fields; rendering them as prose is the caller's job.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from payhistory.core.types import JsonDict


class ParseFailureKind(StrEnum):
    NO_DATES_FOUND = "no_dates_found"
    NO_RECORDS_PARSED = "no_records_parsed"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    TOO_FEW_RECORDS = "too_few_records"
    NO_ADJUSTMENTS = "no_adjustments"


class SkipReason(StrEnum):
    INVALID_DATE = "invalid_date"
    NO_ANNUAL_AMOUNT = "no_annual_amount"


class PayHistoryError(Exception):
    """Base exception for all payhistory errors."""


class ParseError(PayHistoryError):
    """Fatal parse failure surfaced to the caller."""

    kind: ParseFailureKind

    def to_payload(self) -> JsonDict:
        """Machine-readable form for presentation layers."""
        return {"kind": str(self.kind)}


class NoDatesFoundError(ParseError):
    """Input contains no MM/DD/YYYY-shaped token at all."""

    kind = ParseFailureKind.NO_DATES_FOUND

    def __init__(self) -> None:
        super().__init__("no date tokens found in input")


class NoRecordsParsedError(ParseError):
    """Dates were found but every segment was skipped."""

    kind = ParseFailureKind.NO_RECORDS_PARSED

    def __init__(self, segment_count: int) -> None:
        self.segment_count = segment_count
        super().__init__(f"0 of {segment_count} segments yielded a record")

    def to_payload(self) -> JsonDict:
        return {"kind": str(self.kind), "segment_count": self.segment_count}


class ValueOutOfRangeError(ParseError):
    """A monetary field fell outside its configured plausible range."""

    kind = ParseFailureKind.VALUE_OUT_OF_RANGE

    def __init__(self, field: str, value: Decimal, allowed_range: tuple[Decimal, Decimal]) -> None:
        self.field = field
        self.value = value
        self.allowed_range = allowed_range
        low, high = allowed_range
        super().__init__(f"{field}={value} outside [{low}, {high}]")

    def to_payload(self) -> JsonDict:
        low, high = self.allowed_range
        return {
            "kind": str(self.kind),
            "field": self.field,
            "value": str(self.value),
            "allowed_range": [str(low), str(high)],
        }


class InsufficientHistoryError(ParseError):
    """Parsed history is too thin to derive adjustment metrics from."""

    def __init__(self, kind: ParseFailureKind, record_count: int) -> None:
        self.kind = kind
        self.record_count = record_count
        super().__init__(f"{kind}: {record_count} record(s)")

    def to_payload(self) -> JsonDict:
        return {"kind": str(self.kind), "record_count": self.record_count}


class SegmentSkipped(PayHistoryError):
    """Recoverable: one date segment produced no record.

    Not a ParseError: the parser catches it, logs it and moves on.
    """

    def __init__(self, date_token: str, reason: SkipReason) -> None:
        self.date_token = date_token
        self.reason = reason
        super().__init__(f"segment {date_token} skipped: {reason}")
