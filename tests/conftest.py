"""Shared pytest fixtures and configuration for the cmdopts test suite.

Guidelines
----------
* Core tests are pure — no console output, no process exit.
* CLI tests call ``main(argv)`` with explicit arguments and read the
  output through ``capsys``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Undo handler/level changes made to the ``cmdopts`` logger."""
    logger = logging.getLogger("cmdopts")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
