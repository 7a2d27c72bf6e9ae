# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Data models for large test reports."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# Maps "<file>:<line> - <text>" to body length in lines
TestLengths = Dict[str, int]

_EDGE_WHITESPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trim(text: str) -> str:
    return _EDGE_WHITESPACE_RE.sub("", text)


def make_test_identifier(file_path: str, line_number: int, line: str) -> str:
    """Build the identifier for a test starting on a given line.

    Args:
        file_path: Path of the file, as discovered.
        line_number: 1-based line number of the test-start line.
        line: Raw text of the test-start line.

    Returns:
        Identifier like ``"spec/foo.test.js:12 - it('works', () => {"``.
    """
    return _trim(f"{file_path}:{line_number} - {_trim(line)}")


@dataclass
class LargeTestReport:
    """Ranked tests meeting a minimum body length.

    Attributes:
        large_tests: (identifier, length) pairs, longest first, capped.
        num_total_tests: Number of tests meeting the threshold before capping.
    """

    large_tests: List[Tuple[str, int]] = field(default_factory=list)
    num_total_tests: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{largeTests, numTotalTests}`` output shape."""
        return {
            "largeTests": [[identifier, length] for identifier, length in self.large_tests],
            "numTotalTests": self.num_total_tests,
        }
