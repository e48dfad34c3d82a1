"""Pay history parsing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from payhistory.api.deps import get_settings
from payhistory.core.config import AppSettings
from payhistory.models.compensation import CompensationRecordSet
from payhistory.models.inspection import PasteInspection
from payhistory.parser.paste_inspector import inspect_paste
from payhistory.parser.record_parser import parse_pay_history

router = APIRouter(tags=["records"])


class PasteRequest(BaseModel):
    raw_text: str


@router.post("/parse")
async def parse_records(
    body: PasteRequest, settings: AppSettings = Depends(get_settings)
) -> CompensationRecordSet:
    """Parse a pasted pay history. Parse failures map to 422."""
    return parse_pay_history(body.raw_text, settings.parser)


@router.post("/inspect")
async def inspect_records(body: PasteRequest) -> PasteInspection:
    return inspect_paste(body.raw_text)
