# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Tests for test file discovery."""

import os
from pathlib import Path

import pytest

from large_test_finder.discovery import (
    discover_test_files,
    is_test_file,
    make_test_file_predicate,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


class TestIsTestFile:
    """Test suite for the file name predicate."""

    @pytest.mark.parametrize(
        "name",
        ["foo.test.js", "foo.spec.js", "FooTest.js", "BAR.SPEC.JS", "test.js", "fooSpec.js"],
    )
    def test_matching_names(self, name: str) -> None:
        assert is_test_file(name)

    @pytest.mark.parametrize(
        "name",
        ["", "foo.js", "test.ts", "foo.test.jsx", "foo.test.js.map", "spec"],
    )
    def test_non_matching_names(self, name: str) -> None:
        assert not is_test_file(name)

    def test_custom_suffixes(self) -> None:
        """Test that suffixes can be configured."""
        predicate = make_test_file_predicate([".test.ts"])

        assert predicate("a.TEST.ts")
        assert not predicate("a.test.js")


class TestDiscoverTestFiles:
    """Test suite for recursive discovery."""

    def test_finds_files_recursively(self, tmp_path: Path) -> None:
        """Test that test files in nested directories are found."""
        expected = {
            _touch(tmp_path / "a.test.js"),
            _touch(tmp_path / "unit" / "b.spec.js"),
            _touch(tmp_path / "unit" / "deep" / "cTest.js"),
        }
        _touch(tmp_path / "index.js")
        _touch(tmp_path / "unit" / "helpers.js")

        found = discover_test_files(tmp_path)

        assert set(found) == expected
        assert len(found) == 3

    def test_paths_are_joined_to_parent(self, tmp_path: Path) -> None:
        """Test that nested results carry their full directory path."""
        _touch(tmp_path / "x" / "y" / "z.test.js")

        assert discover_test_files(tmp_path) == [tmp_path / "x" / "y" / "z.test.js"]

    def test_files_listed_before_subdirectories(self, tmp_path: Path) -> None:
        """Test that files at a level come before files in its subdirectories."""
        _touch(tmp_path / "sub" / "inner.test.js")
        _touch(tmp_path / "outer.test.js")

        found = discover_test_files(tmp_path)

        assert found[0] == tmp_path / "outer.test.js"
        assert found[1] == tmp_path / "sub" / "inner.test.js"

    def test_hidden_directories_skipped(self, tmp_path: Path) -> None:
        """Test that directories starting with a dot are not searched."""
        _touch(tmp_path / ".git" / "hooks.test.js")
        _touch(tmp_path / "visible" / "a.test.js")

        assert discover_test_files(tmp_path) == [tmp_path / "visible" / "a.test.js"]

    def test_hidden_test_file_at_level_is_included(self, tmp_path: Path) -> None:
        """Test that the dot rule applies to directories only."""
        _touch(tmp_path / ".hidden.test.js")

        assert discover_test_files(tmp_path) == [tmp_path / ".hidden.test.js"]

    def test_independent_of_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that subdirectories resolve against the scan root, not the cwd."""
        root = tmp_path / "root"
        _touch(root / "nested" / "a.test.js")
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)

        assert discover_test_files(root) == [root / "nested" / "a.test.js"]

    def test_custom_predicate(self, tmp_path: Path) -> None:
        """Test that a custom predicate replaces the default suffixes."""
        _touch(tmp_path / "a.test.js")
        _touch(tmp_path / "b.test.ts")

        found = discover_test_files(tmp_path, is_test=lambda name: name.endswith(".ts"))

        assert found == [tmp_path / "b.test.ts"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_test_files(tmp_path) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinked_directories_not_followed(self, tmp_path: Path) -> None:
        """Test that a symlink cycle does not recurse forever."""
        _touch(tmp_path / "sub" / "a.test.js")
        try:
            os.symlink(tmp_path, tmp_path / "sub" / "loop", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")

        assert discover_test_files(tmp_path) == [tmp_path / "sub" / "a.test.js"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            discover_test_files(tmp_path / "missing")
