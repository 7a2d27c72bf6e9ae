# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Configuration loading and validation for Large Test Finder."""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from large_test_finder.classifier import DEFAULT_BLOCK_KEYWORDS, DEFAULT_TEST_KEYWORDS
from large_test_finder.discovery import DEFAULT_TEST_FILE_SUFFIXES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".large_test_finder.yml"

_KEYWORD_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$.]*$")


class Config:
    """Configuration for Large Test Finder.

    Loads configuration from .large_test_finder.yml with validation and defaults.
    """

    DEFAULTS = {
        "test_file_suffixes": DEFAULT_TEST_FILE_SUFFIXES,
        "test_keywords": DEFAULT_TEST_KEYWORDS,
        "block_keywords": DEFAULT_BLOCK_KEYWORDS,
        "min_lines": 0,
        "max_results": 10,
        "skip_unreadable_files": False,
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_path: Path to configuration file. If None, uses default location.
        """
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self.config_path = config_path
        self._config: Dict[str, Any] = {}
        self._load_config()

    @classmethod
    def defaults(cls) -> "Config":
        """Build a configuration that ignores any file on disk."""
        config = cls.__new__(cls)
        config.config_path = None
        config._config = cls._copy_defaults()
        return config

    @classmethod
    def _copy_defaults(cls) -> Dict[str, Any]:
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in cls.DEFAULTS.items()
        }

    def _load_config(self) -> None:
        """Load and validate configuration from file."""
        if not self.config_path.exists():
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            self._config = self._copy_defaults()
            return

        try:
            with open(self.config_path, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)

            if loaded_config is None:
                logger.warning("Configuration file is empty, using defaults")
                self._config = self._copy_defaults()
                return

            if not isinstance(loaded_config, dict):
                logger.warning(
                    f"Configuration file must contain a YAML dictionary, "
                    f"got {type(loaded_config)}, using defaults"
                )
                self._config = self._copy_defaults()
                return

            self._config = self._copy_defaults()
            self._validate_and_merge(loaded_config)

        except yaml.YAMLError as e:
            logger.warning(
                f"Error parsing configuration file {self.config_path}: {e}, using defaults"
            )
            self._config = self._copy_defaults()
        except OSError as e:
            logger.warning(
                f"Could not read configuration file {self.config_path}: {e}, using defaults"
            )
            self._config = self._copy_defaults()

    def _validate_and_merge(self, loaded_config: Dict[str, Any]) -> None:
        """Validate loaded configuration and merge with defaults.

        Invalid parameters are logged as warnings and defaults are used.
        """
        for key, value in loaded_config.items():
            if key not in self.DEFAULTS:
                logger.warning(f"Unknown configuration parameter '{key}', ignoring")
                continue

            if not self._validate_parameter(key, value):
                logger.warning(
                    f"Invalid value for '{key}': {value}, using default {self.DEFAULTS[key]}"
                )
                continue

            self._config[key] = value

    def _validate_parameter(self, key: str, value: Any) -> bool:
        """Validate a configuration parameter.

        Returns:
            True if valid, False if invalid
        """
        expected_type = type(self.DEFAULTS[key])
        # bool is a subclass of int; reject True/False for numeric settings
        if expected_type is int and isinstance(value, bool):
            return False
        if not isinstance(value, expected_type):
            return False

        if key in ("min_lines", "max_results"):
            return value >= 0
        elif key == "test_file_suffixes":
            return bool(value) and all(isinstance(s, str) and s for s in value)
        elif key in ("test_keywords", "block_keywords"):
            return bool(value) and all(
                isinstance(k, str) and _KEYWORD_RE.match(k) is not None for k in value
            )

        return True

    @property
    def test_file_suffixes(self) -> List[str]:
        """File name suffixes identifying test files (case-insensitive)."""
        value = self._config["test_file_suffixes"]
        assert isinstance(value, list)
        return value

    @property
    def test_keywords(self) -> List[str]:
        """Call names that open a test case."""
        value = self._config["test_keywords"]
        assert isinstance(value, list)
        return value

    @property
    def block_keywords(self) -> List[str]:
        """Call names that open any block and end the current test."""
        value = self._config["block_keywords"]
        assert isinstance(value, list)
        return value

    @property
    def min_lines(self) -> int:
        """Default minimum body length for reported tests."""
        value = self._config["min_lines"]
        assert isinstance(value, int)
        return value

    @property
    def max_results(self) -> int:
        """Default maximum number of reported tests."""
        value = self._config["max_results"]
        assert isinstance(value, int)
        return value

    @property
    def skip_unreadable_files(self) -> bool:
        """Whether to skip files that cannot be read instead of failing.

        Skipped files are logged as warnings. Off by default, so any read
        error aborts the run.
        """
        value = self._config["skip_unreadable_files"]
        assert isinstance(value, bool)
        return value
