# topmark:header:start
#
#   project      : EasyCSV
#   file         : main.py
#   file_relpath : src/easycsv/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV CLI entry point.

Group-level options (verbosity) are resolved once and placed into ``ctx.obj``;
subcommands read them from there.
"""

from __future__ import annotations

import logging

import click

from easycsv.cli.commands.formatters import formatters_command
from easycsv.cli.commands.render import render_command
from easycsv.cli.commands.version import version_command
from easycsv.cli.errors import EasyCSVUsageError
from easycsv.config.logging import TRACE_LEVEL, get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int | None: The logging level, or None when neither flag was given.

    Raises:
        EasyCSVUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise EasyCSVUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return None


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Render a Python object as a CSV header line and one data line.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase log verbosity (-v info, -vv debug, -vvv trace).",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Only log critical errors.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the EasyCSV CLI."""
    ctx.ensure_object(dict)
    level = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level() or logging.WARNING
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("Log level set to %s", logging.getLevelName(level))


cli.add_command(render_command)

cli.add_command(formatters_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
