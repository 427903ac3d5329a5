# topmark:header:start
#
#   project      : EasyCSV
#   file         : version.py
#   file_relpath : src/easycsv/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV `version` command.

Prints the current EasyCSV version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from easycsv.constants import EASYCSV_VERSION


@click.command(
    name="version",
    help="Show the current version of EasyCSV.",
)
def version_command() -> None:
    """Show the current version of EasyCSV."""
    click.echo(EASYCSV_VERSION)
