"""Date-anchored segmentation of a pasted pay history."""

from __future__ import annotations

import re

from pydantic import BaseModel

DATE_TOKEN = re.compile(r"(\d{2}/\d{2}/\d{4})")


class RecordSegment(BaseModel):
    """Text between one date token and the next (or end of input)."""

    model_config = {"frozen": True}

    date_token: str
    offset: int
    body: str  # text following the date token


def normalize_line_endings(raw_text: str) -> str:
    return raw_text.replace("\r\n", "\n").replace("\r", "\n")


def segment_text(raw_text: str) -> list[RecordSegment]:
    """Split raw text into one candidate segment per MM/DD/YYYY token.

    Text before the first date token belongs to no segment.
    """
    text = normalize_line_endings(raw_text)
    matches = list(DATE_TOKEN.finditer(text))
    segments: list[RecordSegment] = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        segments.append(
            RecordSegment(
                date_token=match.group(1),
                offset=match.start(),
                body=text[match.end():end],
            )
        )
    return segments
