# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Block-length scanning for a single test file.

Implements a single forward pass over the lines of a file with one open-test
slot and one counter:
- A test-start line closes any open test and opens a new one
- Any other block boundary (describe/beforeEach/afterEach) only closes the open test
- Every other line, blank lines and closing ``});`` included, adds one to the
  open test's body length; lines outside a test are ignored
- End of file closes any open test

Nested ``it(...)`` calls are flattened: the inner test-start line closes the
outer test, which keeps only the lines seen before it.

Lines are split on ``\\n`` only; a trailing ``\\r`` stays part of the line.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from large_test_finder.classifier import LineClassifier, LineKind
from large_test_finder.models import TestLengths, make_test_identifier

logger = logging.getLogger(__name__)

_default_classifier = LineClassifier()


def scan_text(
    text: str,
    file_path: Union[str, Path],
    lengths: TestLengths,
    classifier: Optional[LineClassifier] = None,
) -> None:
    """Record the body length of every test in a file's text.

    Args:
        text: Full file contents.
        file_path: Path used as the identifier prefix.
        lengths: Accumulator mutated in place; identifiers already present
            are overwritten.
        classifier: Line classifier. Defaults to the it/describe/beforeEach/afterEach set.
    """
    if not text:
        return

    classifier = classifier or _default_classifier
    path_str = str(file_path)

    body_length = 0
    current_test: Optional[str] = None

    for line_number, line in enumerate(text.split("\n"), 1):
        kind = classifier.classify(line)

        if kind is LineKind.CODE:
            if current_test is not None:
                body_length += 1
            continue

        if current_test is not None:
            lengths[current_test] = body_length
            body_length = 0
            current_test = None

        if kind is LineKind.TEST_START:
            current_test = make_test_identifier(path_str, line_number, line)

    if current_test is not None:
        lengths[current_test] = body_length


def scan_file(
    file_path: Union[str, Path],
    lengths: TestLengths,
    classifier: Optional[LineClassifier] = None,
) -> None:
    """Read a test file and record the body length of each test in it.

    Args:
        file_path: Path of the file to read.
        lengths: Accumulator mutated in place.
        classifier: Line classifier. Defaults to the it/describe/beforeEach/afterEach set.

    Raises:
        OSError: If the file cannot be read.
    """
    # newline="" keeps carriage returns in the text
    with open(file_path, encoding="utf-8", errors="replace", newline="") as f:
        text = f.read()

    before = len(lengths)
    scan_text(text, file_path, lengths, classifier)
    logger.debug(f"Scanned {file_path}: {len(lengths) - before} new tests")
