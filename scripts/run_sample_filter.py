#!/usr/bin/env python3
"""Sample harness for manual end-to-end checks.

Runs a log file through the filter pipeline and prints the resulting
openqa-mon line together with the run statistics.

Usage:
    python scripts/run_sample_filter.py
    python scripts/run_sample_filter.py --input build.log --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from oqa_jobfilter.logging.config import configure_logging
from oqa_jobfilter.pipeline import process_input

DEFAULT_INPUT = Path(__file__).parent.parent / "docs" / "sample_clone_output.log"


def print_summary_table(result):
    """Print a formatted summary table of the run."""
    metrics = [
        ("Lines Read", result.lines_read),
        ("Lines Skipped", result.lines_skipped),
        ("Jobs Extracted", result.jobs_extracted),
        ("Duplicates Dropped", result.duplicates_dropped),
        ("Entries Emitted", result.jobs_emitted),
        ("Encoding", result.encoding.value),
        ("Duration (seconds)", f"{result.duration_seconds:.4f}"),
    ]

    label_width = max(len(label) for label, _ in metrics)

    print("┌" + "─" * (label_width + 2) + "┬" + "─" * 22 + "┐")
    print(f"│ {'Metric':<{label_width}} │ {'Value':<20} │")
    print("├" + "─" * (label_width + 2) + "┼" + "─" * 22 + "┤")
    for label, value in metrics:
        print(f"│ {label:<{label_width}} │ {str(value):<20} │")
    print("└" + "─" * (label_width + 2) + "┴" + "─" * 22 + "┘")


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Run a log file through the job filter")
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT, help="Log file to filter")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    args = parser.parse_args()

    configure_logging(level=args.log_level, format_type="key-value", environment="sample")

    try:
        with open(args.input, "rb") as stream:
            result = process_input(stream, sys.stdout)
    except OSError as e:
        print(f"Failed to read {args.input}: {e}", file=sys.stderr)
        return 1

    print()
    print_summary_table(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
