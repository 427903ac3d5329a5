# topmark:header:start
#
#   project      : EasyCSV
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

The CLI reconfigures the root logger on every invocation; the autouse fixture
below reinstates the session's TRACE setup afterwards so later tests keep their
log capture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from easycsv.cli.main import cli
from easycsv.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_logging_after_cli() -> Iterator[None]:
    """Restore the session logging configuration after each CLI test."""
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.fixture
def run_cli() -> Callable[[Sequence[str]], Result]:
    """Return a helper invoking the ``easycsv`` group with an argument vector.

    Returns:
        Callable[[Sequence[str]], Result]: Invokes the CLI and returns the
            `click.testing.Result`.
    """
    runner = CliRunner()

    def _run(argv: Sequence[str]) -> Result:
        return runner.invoke(cli, list(argv))

    return _run
