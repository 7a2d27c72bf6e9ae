# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Large test finder service.

Orchestrates the full pipeline for one directory:
1. Validate inputs (fail fast, before any filesystem walk)
2. Discover test files recursively
3. Scan each file into a shared identifier -> body length mapping
4. Filter, rank and cap the results

Error Handling:
- Invalid inputs raise InvalidInputError; no partial result is produced
- Read errors propagate as OSError and abort the run, unless the
  configuration enables skip_unreadable_files, in which case the file is
  skipped with a warning
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from large_test_finder.aggregator import aggregate
from large_test_finder.classifier import LineClassifier
from large_test_finder.config import Config
from large_test_finder.discovery import discover_test_files, make_test_file_predicate
from large_test_finder.models import LargeTestReport, TestLengths
from large_test_finder.scanner import scan_file

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when the directory or thresholds passed to the finder are invalid."""

    pass


def validate_inputs(directory: Union[str, Path], min_lines: int, max_results: int) -> None:
    """Check the preconditions of a scan.

    Args:
        directory: Root directory to scan.
        min_lines: Minimum body length, must be non-negative.
        max_results: Maximum number of results, must be non-negative.

    Raises:
        InvalidInputError: On the first violated precondition.
    """
    if not Path(directory).is_dir():
        raise InvalidInputError(f"{directory} is not a directory")

    if min_lines < 0:
        raise InvalidInputError(f"Number of lines ({min_lines}) cannot be negative")

    if max_results < 0:
        raise InvalidInputError(f"Number of tests ({max_results}) cannot be negative")


def collect_test_lengths(
    test_files: List[Path],
    classifier: Optional[LineClassifier] = None,
    skip_unreadable_files: bool = False,
) -> TestLengths:
    """Scan test files in order into one mapping.

    Args:
        test_files: Files to scan.
        classifier: Line classifier passed to the scanner.
        skip_unreadable_files: Log and skip files that cannot be read instead
            of raising.

    Returns:
        Mapping of test identifier to body length.

    Raises:
        OSError: If a file cannot be read and skipping is disabled.
    """
    lengths: TestLengths = {}
    for test_file in test_files:
        try:
            scan_file(test_file, lengths, classifier)
        except OSError as e:
            if not skip_unreadable_files:
                raise
            logger.warning(f"Skipping unreadable test file {test_file}: {e}")
    return lengths


def get_large_tests(
    directory: Union[str, Path],
    min_lines: int,
    max_results: int,
    config: Optional[Config] = None,
) -> LargeTestReport:
    """Find the tests with the largest bodies under a directory.

    Args:
        directory: Root directory to scan.
        min_lines: Only tests with at least this many body lines are counted.
        max_results: Maximum number of tests in the returned ranking.
        config: Finder configuration. Defaults to built-in defaults.

    Returns:
        LargeTestReport with the ranked tests and the total number of tests
        meeting ``min_lines``.

    Raises:
        InvalidInputError: If the directory is not a directory or a threshold
            is negative.
        OSError: If a test file cannot be read and skipping is disabled.
    """
    validate_inputs(directory, min_lines, max_results)

    if config is None:
        config = Config.defaults()

    classifier = LineClassifier(
        test_keywords=config.test_keywords,
        block_keywords=config.block_keywords,
    )
    test_files = discover_test_files(
        directory, is_test=make_test_file_predicate(config.test_file_suffixes)
    )
    logger.info(f"Found {len(test_files)} test files in {directory}")

    lengths = collect_test_lengths(
        test_files,
        classifier=classifier,
        skip_unreadable_files=config.skip_unreadable_files,
    )
    report = aggregate(lengths, min_lines, max_results)

    logger.info(
        f"Scanned {len(lengths)} tests, {report.num_total_tests} with at least "
        f"{min_lines} lines"
    )
    return report
