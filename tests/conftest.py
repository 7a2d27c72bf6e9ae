# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Shared fixtures for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
