"""
Split API router: parse edited text and compute the cost split.
"""

from fastapi import APIRouter
from typing import List
import logging

from autosplit.models.split import (
    ParseRequest,
    ParseResponse,
    PlaceholderRequest,
    RecordModel,
    SplitRequest,
    SplitResponse,
)
from autosplit.services.pipeline import SplitPipeline, placeholder_record

router = APIRouter(tags=["split"])
logger = logging.getLogger(__name__)


@router.post("/parse", response_model=ParseResponse)
async def parse_text(request: ParseRequest):
    """
    Parse raw (OCR or hand-edited) text into records.

    The status tells the client whether to wait for input
    ("awaiting_input"), ask for manual correction ("no_records"), or show
    the rows ("parsed").
    """
    result = SplitPipeline().parse_text(request.text)
    return ParseResponse.from_result(result)


@router.post("/split", response_model=SplitResponse)
async def split(request: SplitRequest):
    """
    Compute shares, settlement directive and summary text.

    Args:
        request: Current records and total amount

    Returns:
        Shares per person plus the copyable summary
    """
    records = [r.to_record() for r in request.records]
    result = SplitPipeline().split(records, request.amount)

    logger.info("Split requested", extra={
        "record_count": len(records),
        "directive": result.directive.kind,
    })
    return SplitResponse.from_result(result)


@router.post("/records/placeholder", response_model=List[RecordModel])
async def add_placeholder(request: PlaceholderRequest):
    """Append an empty "Persoon <n>" row for manual entry."""
    records = list(request.records)
    records.append(RecordModel.from_record(placeholder_record(len(records) + 1)))
    return records
