#!/usr/bin/env python3
"""
export_wheel.py

Lays out a scorecard as a diagnostic wheel and writes it as a standalone SVG.
Without --scorecard the built-in four-category scorecard is used.

Output: diagnostic_wheel.svg (or -o PATH, or "-" for stdout)

Usage:
    python export_wheel.py
    python export_wheel.py --scorecard scores.json --partition per_category --titles curved
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from scorewheel.config import (
    DEFAULT_EXPECTED_COUNTS, DEFAULT_SCORECARD, PARTITION_POLICIES, TITLE_MODES,
    LayoutConfig,
)
from scorewheel.data import parse_scorecard
from scorewheel.engine import layout_wheel
from scorewheel.errors import InvalidScorecard, WheelError
from scorewheel.svg import render_svg

log = logging.getLogger("export_wheel")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scorecard wheel to SVG.")
    parser.add_argument("--scorecard", help="JSON file with a list of category records")
    parser.add_argument("--expected", help="JSON file mapping category name -> dimension count")
    parser.add_argument("--check-defaults", action="store_true",
                        help="validate against the built-in dimension counts")
    parser.add_argument("--partition", choices=PARTITION_POLICIES,
                        default=PARTITION_POLICIES[0])
    parser.add_argument("--titles", choices=TITLE_MODES, default=TITLE_MODES[0])
    parser.add_argument("--strict", action="store_true",
                        help="reject scores outside [0, max] instead of clamping")
    parser.add_argument("--size", type=float, default=800.0)
    parser.add_argument("-o", "--output", default="diagnostic_wheel.svg")
    return parser


def _read_json(path: str):
    try:
        with Path(path).open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        raise InvalidScorecard(f"Could not read {path}: {exc}") from exc


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        raw = _read_json(args.scorecard) if args.scorecard else DEFAULT_SCORECARD
        expected = None
        if args.expected:
            expected = _read_json(args.expected)
        elif args.check_defaults:
            expected = DEFAULT_EXPECTED_COUNTS

        config = LayoutConfig(
            partition=args.partition,
            title_mode=args.titles,
            strict_scores=args.strict,
            size=args.size,
        )
        wheel = layout_wheel(parse_scorecard(raw), config, expected)
    except WheelError as exc:
        log.error(str(exc))
        print(str(exc), file=sys.stderr)
        return 1

    svg = render_svg(wheel, config.size)
    if args.output == "-":
        sys.stdout.write(svg)
    else:
        Path(args.output).write_text(svg, encoding="utf-8")
        log.info(f"Wrote {args.output} ({len(wheel.chart.segments)} segments, "
                 f"overall {wheel.chart.aggregate:.1f})")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    sys.exit(main())
