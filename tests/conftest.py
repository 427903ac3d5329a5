# topmark:header:start
#
#   project      : EasyCSV
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the EasyCSV test suite.

Sets up TRACE logging for test runs and isolates the process-wide formatter
registry so that registrations made by one test never leak into another.

Notes:
    Prefer the ``registry`` fixture (a fresh `FormatterRegistry`) and pass it to
    `EasyCSV(..., registry=registry)`. Tests that must exercise the default
    registry (CLI tests) may mutate it freely: it is restored after each test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from easycsv.config import logging
from easycsv.registry import FormatterRegistry, get_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def silence_easycsv_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@pytest.fixture(autouse=True)
def restore_default_registry() -> Iterator[None]:
    """Snapshot the process-wide registry and restore it after the test."""
    default = get_default_registry()
    snapshot = dict(default.as_mapping())
    try:
        yield
    finally:
        default.clear()
        for tp, formatter in snapshot.items():
            default.register(tp, formatter)


@pytest.fixture
def registry() -> FormatterRegistry:
    """Return an empty, isolated formatter registry."""
    return FormatterRegistry()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
