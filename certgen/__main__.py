"""
Console entry point.

    python -m certgen [--input Data/Data.csv] [--output-dir Output]
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import configure_logging, get_settings
from .documents import DocxRenderer
from .pipeline import run_pipeline, summary_line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="certgen",
        description="Score an employee roster and write certification letters",
    )
    parser.add_argument("--input", help="Roster CSV file")
    parser.add_argument("--output-dir", help="Directory for generated letters")
    parser.add_argument("--template", help="DOCX letter template")
    parser.add_argument(
        "--no-documents",
        action="store_true",
        help="Classify only, do not write letters",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(args.log_level or settings.log_level)

    input_path = args.input or settings.input_path
    output_dir = args.output_dir or settings.output_dir
    template = args.template or settings.template_path

    renderer = None if args.no_documents else DocxRenderer(output_dir, template)
    result = run_pipeline(input_path, renderer)

    print(f"Loaded {result.loaded} employees from CSV ({len(result.employees)} after removing duplicates)\n")
    for employee in result.employees:
        print(summary_line(employee))
    for path in result.documents:
        print(f"Generated: {path}")
    for failure in result.failures:
        print(f"Failed: {failure.full_name}: {failure.error}")

    print("\n✓ Processing complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
