# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Line classification for test source files.

Lines are classified by a lexical prefix match only: after stripping leading
whitespace, a line is a block boundary when it begins with a block-declaration
keyword immediately followed by an opening parenthesis. Nothing else about the
line (string literals, comments, multi-line expressions) is considered.

Classification:
- TEST_START: line opens a test case (e.g., ``it(``)
- BLOCK_BOUNDARY: line opens any other block (``describe(``, ``beforeEach(``,
  ``afterEach(``)
- CODE: everything else, including blank lines
"""

import re
from enum import Enum
from typing import Iterable, List, Optional, Pattern

DEFAULT_TEST_KEYWORDS: List[str] = ["it"]
DEFAULT_BLOCK_KEYWORDS: List[str] = ["it", "describe", "beforeEach", "afterEach"]


class LineKind(Enum):
    """Kind of a single source line."""

    TEST_START = "test_start"
    BLOCK_BOUNDARY = "block_boundary"
    CODE = "code"


def _build_prefix_pattern(keywords: Iterable[str]) -> Pattern[str]:
    alternatives = "|".join(re.escape(keyword) for keyword in keywords)
    # \ufeff counts as leading whitespace, so a byte order mark does not hide line 1
    return re.compile(rf"^[\s\ufeff]*(?:{alternatives})\(")


class LineClassifier:
    """Stateless classifier for test-block declaration lines.

    Test keywords are always treated as block keywords as well, so that
    ``is_test_start(line)`` implies ``is_block_boundary(line)``.

    Usage:
        classifier = LineClassifier(test_keywords=["it", "test"])
        classifier.classify("  test('adds', () => {")  # LineKind.TEST_START
    """

    def __init__(
        self,
        test_keywords: Optional[Iterable[str]] = None,
        block_keywords: Optional[Iterable[str]] = None,
    ):
        """Initialize classifier.

        Args:
            test_keywords: Keywords that open a test case. Defaults to ``["it"]``.
            block_keywords: Keywords that open any block. Defaults to
                ``["it", "describe", "beforeEach", "afterEach"]``.

        Raises:
            ValueError: If no test keywords are given.
        """
        self.test_keywords = list(
            test_keywords if test_keywords is not None else DEFAULT_TEST_KEYWORDS
        )
        if not self.test_keywords:
            raise ValueError("At least one test keyword is required")

        block = list(block_keywords if block_keywords is not None else DEFAULT_BLOCK_KEYWORDS)
        for keyword in self.test_keywords:
            if keyword not in block:
                block.append(keyword)
        self.block_keywords = block

        self._test_pattern = _build_prefix_pattern(self.test_keywords)
        self._block_pattern = _build_prefix_pattern(self.block_keywords)

    def is_test_start(self, line: str) -> bool:
        """Check whether the line opens a test case."""
        return self._test_pattern.match(line) is not None

    def is_block_boundary(self, line: str) -> bool:
        """Check whether the line opens any block, test cases included."""
        return self._block_pattern.match(line) is not None

    def classify(self, line: str) -> LineKind:
        """Classify a single line.

        Args:
            line: Line text without its trailing newline.

        Returns:
            The most specific LineKind for the line.
        """
        if self.is_test_start(line):
            return LineKind.TEST_START
        if self.is_block_boundary(line):
            return LineKind.BLOCK_BOUNDARY
        return LineKind.CODE


_default_classifier = LineClassifier()


def is_test_start(line: str) -> bool:
    """Check whether the line opens an ``it(...)`` test case."""
    return _default_classifier.is_test_start(line)


def is_block_boundary(line: str) -> bool:
    """Check whether the line opens an ``it``/``describe``/``beforeEach``/``afterEach`` block."""
    return _default_classifier.is_block_boundary(line)


def classify_line(line: str) -> LineKind:
    """Classify a line with the default it/describe/beforeEach/afterEach keywords."""
    return _default_classifier.classify(line)
