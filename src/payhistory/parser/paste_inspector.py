"""Quick diagnostics on a paste before a full parse, plus the readiness gate after it."""

from __future__ import annotations

import re

from payhistory.core.exceptions import InsufficientHistoryError, ParseFailureKind
from payhistory.models.compensation import CompensationRecordSet
from payhistory.models.inspection import PasteInspection, PasteIssue, PasteStatus
from payhistory.parser.extractors import DOLLAR_TOKEN
from payhistory.parser.segmenter import DATE_TOKEN

_SALARY_MARKER = re.compile(r"salary", re.IGNORECASE)
_HISTORY_MARKER = re.compile(r"history", re.IGNORECASE)

# Without a History heading, fewer dates than this suggests only the summary was copied.
_MIN_DATES_WITHOUT_HISTORY = 3
_MIN_RECORDS = 2


def inspect_paste(raw_text: str) -> PasteInspection:
    """Classify a paste as empty, error, warning or ready. Never raises."""
    text = raw_text.strip()
    if not text:
        return PasteInspection(status=PasteStatus.EMPTY)

    date_count = len(DATE_TOKEN.findall(text))
    amount_count = len(DOLLAR_TOKEN.findall(text))

    def result(status: PasteStatus, issue: PasteIssue | None = None) -> PasteInspection:
        return PasteInspection(
            status=status, issue=issue, date_count=date_count, amount_count=amount_count
        )

    if date_count == 0:
        return result(PasteStatus.ERROR, PasteIssue.NO_DATES)
    if amount_count == 0:
        return result(PasteStatus.ERROR, PasteIssue.NO_AMOUNTS)
    if not _SALARY_MARKER.search(text):
        return result(PasteStatus.WARNING, PasteIssue.MISSING_SALARY_SECTION)
    if not _HISTORY_MARKER.search(text) and date_count < _MIN_DATES_WITHOUT_HISTORY:
        return result(PasteStatus.WARNING, PasteIssue.MISSING_HISTORY_SECTION)
    if amount_count < date_count:
        return result(PasteStatus.WARNING, PasteIssue.FEWER_AMOUNTS_THAN_DATES)
    return result(PasteStatus.READY)


def require_adjustment_history(record_set: CompensationRecordSet) -> CompensationRecordSet:
    """Ensure there is enough history to compute adjustment metrics.

    Raises:
        InsufficientHistoryError: fewer than two records, or only New Hire records.
    """
    if len(record_set) < _MIN_RECORDS:
        raise InsufficientHistoryError(ParseFailureKind.TOO_FEW_RECORDS, len(record_set))
    if not record_set.adjustments:
        raise InsufficientHistoryError(ParseFailureKind.NO_ADJUSTMENTS, len(record_set))
    return record_set
