# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Recursive discovery of test source files.

Walks a directory tree depth-first. At each level, entries whose bare name
ends with a test-file suffix are emitted first (in directory listing order),
then each non-hidden subdirectory is descended into in turn.

Subdirectory entries are resolved against their parent directory before the
directory check, so results do not depend on the process working directory.

Known Limitations:
- Listing order is whatever ``os.listdir`` returns; no sorting is applied
- A directory whose name ends with a test suffix is emitted as a file
- Symbolic links to directories are not descended into
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_TEST_FILE_SUFFIXES: List[str] = ["test.js", "spec.js"]

# Predicate over a bare file name
TestFilePredicate = Callable[[str], bool]


def is_test_file(name: str, suffixes: Sequence[str] = DEFAULT_TEST_FILE_SUFFIXES) -> bool:
    """Check if a bare file name looks like a test or spec file.

    Args:
        name: File name without any directory component.
        suffixes: Accepted suffixes, compared case-insensitively.

    Returns:
        True if the lower-cased name ends with any suffix.
    """
    if not name:
        return False
    lowered = name.lower()
    return any(lowered.endswith(suffix.lower()) for suffix in suffixes)


def make_test_file_predicate(suffixes: Sequence[str]) -> TestFilePredicate:
    """Build a file name predicate for a fixed set of suffixes."""
    frozen = list(suffixes)

    def predicate(name: str) -> bool:
        return is_test_file(name, frozen)

    return predicate


def discover_test_files(
    root: Union[str, Path],
    is_test: Optional[TestFilePredicate] = None,
) -> List[Path]:
    """Find all test files under a directory.

    Args:
        root: Directory to scan. Must exist; callers validate this.
        is_test: Predicate over bare file names. Defaults to ``is_test_file``.

    Returns:
        Test file paths, each joined onto the directory it was listed from.

    Raises:
        OSError: If a directory cannot be listed.
    """
    predicate = is_test or is_test_file
    results: List[Path] = []
    _walk(Path(root), predicate, results)
    logger.debug(f"Discovered {len(results)} test files under {root}")
    return results


def _walk(directory: Path, predicate: TestFilePredicate, results: List[Path]) -> None:
    entries = os.listdir(directory)

    results.extend(directory / name for name in entries if predicate(name))

    for name in entries:
        if name.startswith("."):
            continue
        child = directory / name
        # Symlinked directories are not followed
        if child.is_dir() and not child.is_symlink():
            _walk(child, predicate, results)
