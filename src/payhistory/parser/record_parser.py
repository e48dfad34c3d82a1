"""Record parser: raw pasted text in, CompensationRecordSet out.

Two failure channels:

- ``SegmentSkipped``: one segment produced no record. Logged and skipped.
- ``ParseError`` subclasses: fatal to the whole call. Out-of-range values land
  here because they point at a systematic mis-extraction.
"""

from __future__ import annotations

import datetime

from payhistory.core.config import ParserConfig
from payhistory.core.exceptions import (
    NoDatesFoundError,
    NoRecordsParsedError,
    ParseError,
    SegmentSkipped,
    SkipReason,
)
from payhistory.core.logging_config import get_logger
from payhistory.models.compensation import CompensationRecord, CompensationRecordSet
from payhistory.parser.extractors import (
    assign_salary_fields,
    extract_change_percent,
    extract_dollar_amounts,
    extract_hourly_rate,
    extract_reason,
    mask_dollar_amounts,
)
from payhistory.parser.segmenter import RecordSegment, segment_text
from payhistory.parser.validation import validate_hourly_rate, validate_salary_fields

_LOGGER = get_logger(__name__)


def parse_record_date(date_token: str) -> datetime.date:
    """MM/DD/YYYY to a date.

    Raises:
        SegmentSkipped: token is date-shaped but not a calendar date.
    """
    try:
        return datetime.datetime.strptime(date_token, "%m/%d/%Y").date()
    except ValueError as exc:
        raise SegmentSkipped(date_token, SkipReason.INVALID_DATE) from exc


def parse_segment(segment: RecordSegment, config: ParserConfig) -> CompensationRecord:
    """Build one record from one segment.

    Raises:
        SegmentSkipped: the segment has no usable date or annual amount.
        ValueOutOfRangeError: a present monetary value failed the range gate.
    """
    record_date = parse_record_date(segment.date_token)

    fields = assign_salary_fields(extract_dollar_amounts(segment.body), config)
    validate_salary_fields(fields, config)

    masked = mask_dollar_amounts(segment.body)
    hourly_rate = extract_hourly_rate(masked)
    validate_hourly_rate(hourly_rate, config)

    if fields.annual_amount <= 0:
        raise SegmentSkipped(segment.date_token, SkipReason.NO_ANNUAL_AMOUNT)

    return CompensationRecord(
        date=record_date,
        reason=extract_reason(segment.body),
        pay_period_amount=fields.pay_period_amount,
        annual_amount=fields.annual_amount,
        hourly_rate=hourly_rate,
        change_amount=fields.change_amount,
        change_percent=extract_change_percent(masked),
    )


def parse_pay_history(raw_text: str, config: ParserConfig | None = None) -> CompensationRecordSet:
    """Parse a pasted pay history into records sorted ascending by date.

    Raises:
        NoDatesFoundError: no MM/DD/YYYY token anywhere in the text.
        NoRecordsParsedError: every segment was skipped.
        ValueOutOfRangeError: any present monetary value is out of range.
    """
    if config is None:
        config = ParserConfig()

    try:
        segments = segment_text(raw_text)
        if not segments:
            raise NoDatesFoundError()

        records: list[CompensationRecord] = []
        for segment in segments:
            try:
                records.append(parse_segment(segment, config))
            except SegmentSkipped as exc:
                _LOGGER.warning(
                    "segment_skipped",
                    date_token=exc.date_token,
                    reason=str(exc.reason),
                    offset=segment.offset,
                )

        if not records:
            raise NoRecordsParsedError(len(segments))
    except ParseError as exc:
        _LOGGER.warning("parse_failed", **exc.to_payload())
        raise

    record_set = CompensationRecordSet(records=tuple(records))
    _LOGGER.info(
        "pay_history_parsed",
        segment_count=len(segments),
        record_count=len(record_set),
        first_record_date=record_set.first_record_date.isoformat(),
        last_record_date=record_set.last_record_date.isoformat(),
    )
    return record_set
