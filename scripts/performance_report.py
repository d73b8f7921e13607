#!/usr/bin/env python
"""Evaluate story performance verdicts for a local results file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from config.performance_config import Direction, EarthquakeLevel, PerformanceLevel
from processing.performance import FilterCriteria, evaluate_performance, load_results_dataset
from processing.performance.tables import performances_to_frame, rows_to_frame
from utils.data_utils import format_value
from utils.env import is_dev_mode
from utils.error_handling import format_error_message, log_exception
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def cmd_report(args: argparse.Namespace) -> int:
    try:
        payload = json.loads(Path(args.results).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log_exception(e, "Failed to read results file", extra={"path": args.results})
        print(format_error_message(e, "Failed to read results file"))
        return 1

    dataset = load_results_dataset(payload)
    criteria = FilterCriteria(
        earthquake=args.earthquake,
        performance=args.performance,
        direction=args.direction,
    )
    evaluation = evaluate_performance(dataset.rows, criteria, current_version=args.current)

    print(f"Rows: {len(dataset)} | Filtered: {len(evaluation.filtered_rows)}")

    if args.csv:
        rows_to_frame(evaluation.filtered_rows).to_csv(args.csv, index=False)
        print(f"Filtered rows written to {args.csv}")

    if not evaluation.complete:
        print("Select earthquake, performance and direction to see story verdicts.")
        return 0

    if not evaluation.stories:
        print("No stories match the selection.")
        return 0

    for performance in evaluation.stories:
        status = "PASS" if performance.passed else "FAIL"
        print(
            f"- {performance.story}: {status} "
            f"| Max drift: {format_value(performance.max_drift, 4)} "
            f"| Avg drift: {format_value(performance.avg_drift, 4)} "
            f"| Max N/N0: {format_value(performance.max_n_n0, 3)}"
        )

    verdict = "PASS" if evaluation.building_passed else "FAIL"
    print(f"Building: {verdict}")

    if args.summary_csv:
        performances_to_frame(evaluation.stories).to_csv(args.summary_csv, index=False)
        print(f"Story summary written to {args.summary_csv}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seismic performance report for a results file.")
    parser.add_argument("results", help="Results JSON file ({'rows': [...]} or a list of rows).")
    parser.add_argument("--earthquake", choices=[level.value for level in EarthquakeLevel])
    parser.add_argument("--performance", choices=[level.value for level in PerformanceLevel])
    parser.add_argument("--direction", choices=[direction.value for direction in Direction])
    parser.add_argument("--current", action="store_true", help="Mark stories as belonging to the current version.")
    parser.add_argument("--csv", help="Write filtered rows to this CSV file.")
    parser.add_argument("--summary-csv", help="Write the story summary to this CSV file.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level (also on when TPS_ENV=dev).")
    parser.set_defaults(func=cmd_report)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = args.verbose or is_dev_mode()
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
