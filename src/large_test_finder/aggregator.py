# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Filtering and ranking of test body lengths."""

from typing import Iterable, List, Tuple

from large_test_finder.models import LargeTestReport, TestLengths


def merge_lengths(partials: Iterable[TestLengths]) -> TestLengths:
    """Merge per-file length mappings, later entries overwriting earlier ones.

    The service scans sequentially into one shared mapping; this is for callers
    that scan files independently (e.g. in parallel) into separate mappings.
    Identifiers are unique per file and line, so merge order does not change
    the ranked report.
    """
    merged: TestLengths = {}
    for partial in partials:
        merged.update(partial)
    return merged


def aggregate(lengths: TestLengths, min_lines: int, max_count: int) -> LargeTestReport:
    """Rank tests whose body length meets a threshold.

    Ties in length are ordered by identifier so results are reproducible.

    Args:
        lengths: Test identifier to body length. Not modified.
        min_lines: Minimum body length to include (inclusive).
        max_count: Maximum number of ranked pairs to return.

    Returns:
        LargeTestReport with the longest ``max_count`` tests and the total
        number of tests meeting ``min_lines``.
    """
    qualifying: List[Tuple[str, int]] = [
        (identifier, length) for identifier, length in lengths.items() if length >= min_lines
    ]
    qualifying.sort(key=lambda pair: (-pair[1], pair[0]))

    return LargeTestReport(
        large_tests=qualifying[: max(max_count, 0)],
        num_total_tests=len(qualifying),
    )
