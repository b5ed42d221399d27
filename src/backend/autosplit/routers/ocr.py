"""
OCR API router for logbook photo uploads.
"""

from fastapi import APIRouter, HTTPException, UploadFile, File, Form
from fastapi.concurrency import run_in_threadpool
from typing import Optional
import logging

from autosplit.config import settings
from autosplit.models.split import OCRResponse, ParseResponse, SplitResponse
from autosplit.services.ocr import OCRService, OCRError
from autosplit.services.pipeline import SplitPipeline, ParseStatus
from autosplit.utils.money import parse_amount

router = APIRouter(prefix="/ocr", tags=["ocr"])
logger = logging.getLogger(__name__)

ALLOWED_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"]


@router.post("", response_model=OCRResponse)
async def upload_logbook(
    file: UploadFile = File(...),
    amount: Optional[str] = Form(None)
):
    """
    Upload a photo of the logbook.

    This endpoint:
    1. Accepts an image upload (JPG, PNG, WebP, GIF)
    2. Runs OCR
    3. Parses the text into records
    4. Computes the split when records were found

    Args:
        file: Uploaded image
        amount: Optional total amount, defaults to DEFAULT_AMOUNT

    Returns:
        Raw OCR text, parse result and split
    """
    if file.content_type not in ALLOWED_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type: {file.content_type}. Allowed: JPG, PNG, WebP, GIF"
        )

    file_data = await file.read()
    file_size_mb = len(file_data) / (1024 * 1024)

    if file_size_mb > settings.MAX_UPLOAD_MB:
        raise HTTPException(
            status_code=400,
            detail=f"File too large: {file_size_mb:.2f}MB. Maximum: {settings.MAX_UPLOAD_MB}MB"
        )

    def log_progress(percent: int):
        logger.debug("OCR progress %d%%", percent, extra={"upload_name": file.filename})

    try:
        ocr = OCRService()
        text = await run_in_threadpool(ocr.extract_text, file_data, log_progress)
    except OCRError as e:
        logger.error("OCR failed", extra={"upload_name": file.filename, "error": str(e)})
        raise HTTPException(status_code=502, detail="OCR mislukt")

    total_amount = parse_amount(amount) if amount is not None else settings.DEFAULT_AMOUNT

    pipeline = SplitPipeline()
    parsed = pipeline.parse_text(text)
    split = None
    if parsed.status == ParseStatus.PARSED:
        split = SplitResponse.from_result(pipeline.split(parsed.records, total_amount))

    logger.info("Logbook processed", extra={
        "upload_name": file.filename,
        "status": parsed.status.value,
        "record_count": len(parsed.records),
    })

    return OCRResponse(text=text, parse=ParseResponse.from_result(parsed), split=split)
