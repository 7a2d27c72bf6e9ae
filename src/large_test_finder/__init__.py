# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Large Test Finder: report test cases with oversized bodies."""

from .aggregator import aggregate, merge_lengths
from .classifier import (
    LineClassifier,
    LineKind,
    classify_line,
    is_block_boundary,
    is_test_start,
)
from .config import Config
from .discovery import discover_test_files, is_test_file
from .models import LargeTestReport, TestLengths, make_test_identifier
from .scanner import scan_file, scan_text
from .service import InvalidInputError, get_large_tests

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "merge_lengths",
    "LineClassifier",
    "LineKind",
    "classify_line",
    "is_block_boundary",
    "is_test_start",
    "Config",
    "discover_test_files",
    "is_test_file",
    "LargeTestReport",
    "TestLengths",
    "make_test_identifier",
    "scan_file",
    "scan_text",
    "InvalidInputError",
    "get_large_tests",
]
