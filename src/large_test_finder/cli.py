# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Command line interface for Large Test Finder.

Reports the tests with the largest bodies under a directory.

Usage:
    large-test-finder spec/
    large-test-finder spec/ --min-lines 30 --max-results 20
    python -m large_test_finder src/ --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from large_test_finder.config import Config
from large_test_finder.logging_setup import setup_logging
from large_test_finder.models import LargeTestReport
from large_test_finder.service import InvalidInputError, get_large_tests


def format_report(report: LargeTestReport, min_lines: int) -> str:
    """Format a report as human-readable text.

    Args:
        report: Report to format.
        min_lines: Threshold the report was built with.

    Returns:
        Multi-line report text.
    """
    lines: List[str] = []
    if not report.large_tests:
        lines.append(f"No tests shown ({report.num_total_tests} with at least {min_lines} lines)")
        return "\n".join(lines)

    width = len(str(report.large_tests[0][1]))
    for identifier, length in report.large_tests:
        lines.append(f"{length:>{width}} lines | {identifier}")

    lines.append("")
    lines.append(
        f"Showing {len(report.large_tests)} of {report.num_total_tests} tests "
        f"with at least {min_lines} lines"
    )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="large-test-finder",
        description="Find test cases with unusually large bodies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    large-test-finder spec/
    large-test-finder spec/ --min-lines 30 --max-results 20
    large-test-finder src/ --json
        """,
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Directory to search recursively for *test.js / *spec.js files",
    )
    parser.add_argument(
        "--min-lines",
        type=int,
        default=None,
        help="Only report tests with at least this many body lines (default: from config, 0)",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of tests to list (default: from config, 10)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: ./.large_test_finder.yml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output report as JSON instead of human-readable text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write JSON logs to this directory",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the large test finder.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = build_parser().parse_args(argv)

    try:
        setup_logging(
            log_dir=args.log_dir,
            log_level=logging.INFO if args.verbose else logging.WARNING,
        )
    except OSError as e:
        print(f"Error setting up log directory {args.log_dir}: {e}", file=sys.stderr)
        return 1

    config = Config(config_path=args.config)
    min_lines = args.min_lines if args.min_lines is not None else config.min_lines
    max_results = args.max_results if args.max_results is not None else config.max_results

    try:
        report = get_large_tests(args.directory, min_lines, max_results, config=config)
    except InvalidInputError as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error scanning tests: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report, min_lines))

    return 0


if __name__ == "__main__":
    sys.exit(main())
