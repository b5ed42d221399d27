"""
Command line entry point: print the split summary for a logbook.

Usage:
    autosplit --amount 62.40 --image logbook.jpg
    autosplit --amount 50 --text logbook.txt
    echo "Jan 150 Pieter 100" | autosplit --amount 50 --text -
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from autosplit.config import settings
from autosplit.services.ocr import OCRService, OCRError
from autosplit.services.pipeline import SplitPipeline, ParseStatus
from autosplit.utils.money import parse_amount

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autosplit",
        description="Split a fuel bill by kilometres from a logbook photo or text"
    )
    parser.add_argument('--amount', default=None,
                        help=f'Total amount to split (default: {settings.DEFAULT_AMOUNT})')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--text', help="Text file with one entry per line, '-' for stdin")
    source.add_argument('--image', type=Path, help='Photo of the logbook')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log OCR progress')
    return parser


def read_source(args: argparse.Namespace) -> str:
    if args.image is not None:
        def log_progress(percent: int):
            logger.info("OCR bezig... %d%%", percent)

        return OCRService().extract_text(args.image.read_bytes(), progress=log_progress)
    if args.text == '-':
        return sys.stdin.read()
    return Path(args.text).read_text(encoding='utf-8')


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    try:
        text = read_source(args)
    except OCRError as e:
        print(f"OCR mislukt: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Kan invoer niet lezen: {e}", file=sys.stderr)
        return 1

    amount = parse_amount(args.amount) if args.amount is not None else settings.DEFAULT_AMOUNT

    pipeline = SplitPipeline()
    parsed = pipeline.parse_text(text)
    if parsed.status != ParseStatus.PARSED:
        print(parsed.message, file=sys.stderr)
        return 1

    print(pipeline.split(parsed.records, amount).summary)
    return 0


if __name__ == '__main__':
    sys.exit(main())
