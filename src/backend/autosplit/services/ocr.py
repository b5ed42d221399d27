"""
OCR service for extracting text from logbook photos.
"""

import io
import logging
from typing import Callable, Optional

import pytesseract
from PIL import Image, ImageEnhance, UnidentifiedImageError

from autosplit.config import settings

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class OCRError(Exception):
    """Raised when an image cannot be recognized."""


class OCRService:
    """Service for extracting text from logbook images."""

    def __init__(self, languages: Optional[str] = None, config: Optional[str] = None):
        """Initialize OCR service with Tesseract configuration."""
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD
        self.languages = languages or settings.OCR_LANGUAGES
        self.config = config or settings.OCR_CONFIG

    def extract_text(self, image_data: bytes, progress: Optional[ProgressCallback] = None) -> str:
        """
        Extract text from an image using Tesseract OCR.

        Args:
            image_data: Raw image bytes (JPEG, PNG, etc.)
            progress: Optional callback receiving 0-100 as work advances

        Returns:
            Recognized text, stripped

        Raises:
            OCRError: If the image cannot be read or Tesseract fails
        """
        report = progress or (lambda percent: None)
        report(0)

        try:
            image = Image.open(io.BytesIO(image_data))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise OCRError(f"Unreadable image: {e}") from e
        report(10)

        image = self._preprocess_image(image)
        report(25)

        try:
            text = pytesseract.image_to_string(image, lang=self.languages, config=self.config)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, RuntimeError) as e:
            logger.error("Tesseract failed", exc_info=True)
            raise OCRError(f"Recognition failed: {e}") from e

        report(100)
        logger.info("OCR finished", extra={"characters": len(text)})
        return text.strip()

    def _preprocess_image(self, image: Image.Image) -> Image.Image:
        """
        Preprocess image to improve OCR accuracy.

        Args:
            image: PIL Image object

        Returns:
            Preprocessed image
        """
        # Convert to RGB if needed
        if image.mode != 'RGB':
            image = image.convert('RGB')

        # Convert to grayscale
        image = image.convert('L')

        # Pencil on paper is often faint
        enhancer = ImageEnhance.Contrast(image)
        return enhancer.enhance(2.0)
