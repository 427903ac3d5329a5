# topmark:header:start
#
#   project      : EasyCSV
#   file         : errors.py
#   file_relpath : src/easycsv/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the EasyCSV CLI.

Raise these from commands to exit with a standardized message and exit code.
"""

from __future__ import annotations

import click

from easycsv.cli.exit_codes import ExitCode


class EasyCSVCliError(click.ClickException):
    """Base class for all EasyCSV CLI errors."""

    exit_code = ExitCode.FAILURE


class EasyCSVUsageError(EasyCSVCliError):
    """Error for command-line invocation errors (invalid target or flags)."""

    exit_code = ExitCode.USAGE_ERROR


class EasyCSVConfigError(EasyCSVCliError):
    """Error for configuration errors (invalid options file or values)."""

    exit_code = ExitCode.CONFIG_ERROR


class EasyCSVUnexpectedError(EasyCSVCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
