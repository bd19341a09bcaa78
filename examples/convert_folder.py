#!/usr/bin/env python3
"""Convert a folder of office documents from Python instead of the CLI.

Usage:
    python examples/convert_folder.py ./slides ./slides-pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from office_to_pdf import convert_directory
from office_to_pdf.errors import OfficeToPdfError


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input_dir", type=Path)
    parser.add_argument("output_dir", type=Path)
    parser.add_argument("--timeout", type=float, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    try:
        report = convert_directory(args.input_dir, args.output_dir, timeout=args.timeout)
    except OfficeToPdfError as exc:
        print(f"aborted: {exc}", file=sys.stderr)
        return exc.exit_code

    stats = report.stats
    print(f"{stats.success}/{stats.total} converted, {stats.failed} failed")
    return 1 if stats.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
