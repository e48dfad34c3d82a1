"""Pre-parse diagnostics for a pasted blob."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class PasteStatus(StrEnum):
    EMPTY = "empty"
    ERROR = "error"
    WARNING = "warning"
    READY = "ready"


class PasteIssue(StrEnum):
    NO_DATES = "no_dates"
    NO_AMOUNTS = "no_amounts"
    MISSING_SALARY_SECTION = "missing_salary_section"
    MISSING_HISTORY_SECTION = "missing_history_section"
    FEWER_AMOUNTS_THAN_DATES = "fewer_amounts_than_dates"


class PasteInspection(BaseModel):
    """What a quick scan of the paste found, before a full parse."""

    status: PasteStatus
    issue: Optional[PasteIssue] = None
    date_count: int = 0
    amount_count: int = 0
