"""Shared pytest fixtures for standin tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

pytest_plugins = ["pytester"]


@pytest.fixture
def _restore_standin_logger() -> Generator[None]:
    """Restore the ``standin`` logger after tests that configure logging."""
    standin = logging.getLogger("standin")
    original_handlers = standin.handlers[:]
    original_level = standin.level
    original_propagate = standin.propagate
    yield
    standin.handlers = original_handlers
    standin.setLevel(original_level)
    standin.propagate = original_propagate


@pytest.fixture
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear ``STANDIN_*`` env vars so settings tests start from defaults."""
    for name in ("STANDIN_VERBOSE", "STANDIN_LOG_JSON", "STANDIN_CONFIG"):
        monkeypatch.delenv(name, raising=False)
