"""Shared pytest fixtures and configuration for the foo-record test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests assert on captured stdout/stderr, never on a real terminal.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo any ``configure_logging`` call made by a CLI run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    foo = logging.getLogger("foo_record")
    foo_level = foo.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    foo.setLevel(foo_level)
