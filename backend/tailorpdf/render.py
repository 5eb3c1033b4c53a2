#!/usr/bin/env python3
"""
Render an already tailored resume text file to PDF, without calling the model.

Usage:
    tailorpdf-render resume.txt -o resume.pdf
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .layout import build_resume_pdf


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Lay out a plain-text resume as a paginated A4 PDF",
    )
    parser.add_argument("resume", type=str, help="Path to the resume text file")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output PDF path (default: resume path with .pdf suffix)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    source = Path(args.resume)
    if not source.exists():
        print(f"Error: resume file not found: {source}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else source.with_suffix(".pdf")
    pdf = build_resume_pdf(source.read_text(encoding="utf-8"))
    output.write_bytes(pdf)
    print(f"Wrote {output} ({len(pdf)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
