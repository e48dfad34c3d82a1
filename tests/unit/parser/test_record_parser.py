"""Tests for parse_pay_history and parse_segment."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from payhistory.core.config import ParserConfig, ValueRange
from payhistory.core.exceptions import (
    NoDatesFoundError,
    NoRecordsParsedError,
    ParseError,
    SegmentSkipped,
    SkipReason,
    ValueOutOfRangeError,
)
from payhistory.metrics.raises import average_raise_percent
from payhistory.models.compensation import ChangeReason
from payhistory.parser.record_parser import parse_pay_history, parse_record_date, parse_segment
from payhistory.parser.segmenter import RecordSegment
from tests.fakes import CONCATENATED_SEGMENT, PORTAL_PASTE, SHUFFLED_PASTE


class TestPortalPaste:
    def test_parses_all_records_ascending(self):
        record_set = parse_pay_history(PORTAL_PASTE)
        assert len(record_set) == 4
        assert [record.date for record in record_set.records] == [
            datetime.date(2021, 1, 15),
            datetime.date(2022, 3, 1),
            datetime.date(2023, 3, 1),
            datetime.date(2024, 6, 1),
        ]
        assert record_set.first_record_date == datetime.date(2021, 1, 15)
        assert record_set.last_record_date == datetime.date(2024, 6, 1)

    def test_field_assignment(self):
        latest = parse_pay_history(PORTAL_PASTE).records[-1]
        assert latest.reason is ChangeReason.PROMOTION
        assert latest.pay_period_amount == Decimal("3653.85")
        assert latest.annual_amount == Decimal("95000.00")
        assert latest.change_amount == Decimal("13000.00")
        assert latest.hourly_rate == Decimal("45.67")
        assert latest.change_percent == Decimal("15.8537")

    def test_new_hire_has_no_change(self):
        hire = parse_pay_history(PORTAL_PASTE).records[0]
        assert hire.is_new_hire
        assert hire.annual_amount == Decimal("75000.00")
        assert hire.hourly_rate == Decimal("36.06")
        assert hire.change_amount == 0
        assert hire.change_percent == 0

    def test_idempotent(self):
        assert parse_pay_history(PORTAL_PASTE) == parse_pay_history(PORTAL_PASTE)

    def test_discovery_order_does_not_matter(self):
        shuffled = parse_pay_history(SHUFFLED_PASTE)
        dates = [record.date for record in shuffled.records]
        assert dates == sorted(dates)
        assert shuffled == parse_pay_history(PORTAL_PASTE)


class TestDisambiguation:
    def test_two_decimal_cap(self):
        record = parse_pay_history(CONCATENATED_SEGMENT).records[0]
        assert record.pay_period_amount == Decimal("1166.67")
        assert record.annual_amount == Decimal("1166.67")
        assert record.change_percent == Decimal("12.2807")

    def test_hourly_rate_independent_of_other_fields(self):
        without = parse_pay_history("01/15/2023 Merit Increase $2,500.00$65,000.00").records[0]
        with_rate = parse_pay_history(
            "01/15/2023 Merit Increase $2,500.00$65,000.0031.25 / Hour"
        ).records[0]
        assert without.hourly_rate == 0
        assert with_rate.hourly_rate == Decimal("31.25")
        assert without.model_dump(exclude={"hourly_rate"}) == with_rate.model_dump(
            exclude={"hourly_rate"}
        )

    def test_same_day_records_keep_discovery_order(self):
        record_set = parse_pay_history(
            "03/01/2023 Promotion $3,000.00$80,000.00\n"
            "03/01/2023 Market Adjustment $3,100.00$82,000.00\n"
        )
        assert [record.reason for record in record_set.records] == [
            ChangeReason.PROMOTION,
            ChangeReason.MARKET_ADJUSTMENT,
        ]


class TestPayCut:
    PASTE = (
        "01/15/2021 New Hire $2,500.00$65,000.0031.25 / Hour\n"
        "06/01/2022 Market Adjustment $2,307.69$60,000.00-$5,000.0028.85 / Hour-7.6923"
    )

    def test_cut_keeps_negative_change(self):
        cut = parse_pay_history(self.PASTE).records[-1]
        assert cut.annual_amount == Decimal("60000.00")
        assert cut.change_amount == Decimal("-5000.00")
        assert cut.hourly_rate == Decimal("28.85")
        assert cut.change_percent == Decimal("-7.6923")
        assert cut.change_percent < 0

    def test_cut_is_not_a_raise(self):
        record_set = parse_pay_history(self.PASTE)
        assert record_set.raises == ()
        assert average_raise_percent(record_set) == 0.0

    def test_cut_below_change_range_fails(self):
        config = ParserConfig(change_range=ValueRange(min=Decimal("0"), max=Decimal("5000000")))
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            parse_pay_history(self.PASTE, config)
        assert exc_info.value.field == "change_amount"
        assert exc_info.value.value == Decimal("-5000.00")


class TestRangeGate:
    def test_annual_at_minimum_passes(self):
        record = parse_pay_history("01/15/2023 Merit Increase $1,000.00").records[0]
        assert record.annual_amount == Decimal("1000.00")

    def test_annual_one_cent_below_minimum_fails(self):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            parse_pay_history("01/15/2023 Merit Increase $999.99")
        assert exc_info.value.field == "annual_amount"
        assert exc_info.value.value == Decimal("999.99")

    def test_out_of_range_aborts_whole_parse(self):
        with pytest.raises(ValueOutOfRangeError):
            parse_pay_history(PORTAL_PASTE + "07/01/2024 Merit Increase $999,999,999.00\n")

    def test_negative_amount_fails_visibly(self):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            parse_pay_history("01/15/2023 Merit Increase -$5,000.00")
        assert exc_info.value.field == "pay_period_amount"

    def test_custom_ranges_respected(self):
        config = ParserConfig(annual_range=ValueRange(min=Decimal("50000"), max=Decimal("100000")))
        with pytest.raises(ValueOutOfRangeError):
            parse_pay_history("01/15/2023 Merit Increase $2,500.00$45,000.00", config)


class TestStructuralFailures:
    def test_no_dates(self):
        with pytest.raises(NoDatesFoundError):
            parse_pay_history("Merit Increase $2,500.00 65,000.00 31.25")

    def test_empty_input(self):
        with pytest.raises(NoDatesFoundError):
            parse_pay_history("")

    def test_dates_without_annual_amounts(self):
        with pytest.raises(NoRecordsParsedError) as exc_info:
            parse_pay_history("01/15/2023 Merit Increase\n02/01/2023 Promotion $450.00")
        assert exc_info.value.segment_count == 2
        assert exc_info.value.to_payload() == {"kind": "no_records_parsed", "segment_count": 2}

    def test_structural_failures_are_parse_errors(self):
        assert issubclass(NoDatesFoundError, ParseError)
        assert issubclass(NoRecordsParsedError, ParseError)
        assert not issubclass(SegmentSkipped, ParseError)


class TestSegmentChannel:
    def test_invalid_calendar_date_skips_segment(self):
        with pytest.raises(SegmentSkipped) as exc_info:
            parse_record_date("13/45/2023")
        assert exc_info.value.reason is SkipReason.INVALID_DATE

    def test_missing_annual_raises_skip(self):
        segment = RecordSegment(date_token="01/15/2023", offset=0, body=" Merit Increase $450.00")
        with pytest.raises(SegmentSkipped) as exc_info:
            parse_segment(segment, ParserConfig())
        assert exc_info.value.reason is SkipReason.NO_ANNUAL_AMOUNT

    def test_skipped_segments_are_logged_and_parsing_continues(self):
        text = (
            "13/45/2023 Merit Increase $2,500.00$65,000.00\n"
            "01/15/2024 Merit Increase $2,600.00$67,600.00\n"
        )
        with capture_logs() as logs:
            record_set = parse_pay_history(text)
        assert len(record_set) == 1
        skipped = [entry for entry in logs if entry["event"] == "segment_skipped"]
        assert skipped == [
            {
                "event": "segment_skipped",
                "log_level": "warning",
                "date_token": "13/45/2023",
                "reason": "invalid_date",
                "offset": 0,
            }
        ]

    def test_success_is_logged(self):
        with capture_logs() as logs:
            parse_pay_history(PORTAL_PASTE)
        parsed = [entry for entry in logs if entry["event"] == "pay_history_parsed"]
        assert parsed[0]["record_count"] == 4
        assert parsed[0]["first_record_date"] == "2021-01-15"

    def test_fatal_failure_is_logged(self):
        with capture_logs() as logs, pytest.raises(NoDatesFoundError):
            parse_pay_history("nothing here")
        assert logs[-1]["event"] == "parse_failed"
        assert logs[-1]["kind"] == "no_dates_found"
