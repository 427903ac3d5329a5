# topmark:header:start
#
#   project      : EasyCSV
#   file         : render.py
#   file_relpath : src/easycsv/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV `render` command.

Imports an object from ``module:attribute``, renders it with `EasyCSV` and
prints the two-line result. A callable attribute (typically a class or a factory
function) is called without arguments to obtain the source object.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from easycsv.cli.errors import EasyCSVConfigError, EasyCSVUnexpectedError, EasyCSVUsageError
from easycsv.config.logging import get_logger
from easycsv.config.options import CsvOptions, load_options
from easycsv.constants import DEFAULT_CONFIG_NAME
from easycsv.core import EasyCSV
from easycsv.errors import EasyCSVError
from easycsv.formatters.builtins import register_builtin_formatters

if TYPE_CHECKING:
    from easycsv.config.logging import EasyCSVLogger

logger: EasyCSVLogger = get_logger(__name__)


def resolve_target(target: str) -> Any:
    """Import ``module:attr.path`` and return the source object it designates.

    Args:
        target (str): Import path such as ``"myapp.models:make_order"``.

    Returns:
        Any: The attribute, or the result of calling it when it is callable.

    Raises:
        EasyCSVUsageError: If the target is malformed or cannot be imported.
        EasyCSVUnexpectedError: If calling the target raises.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise EasyCSVUsageError(f"TARGET must look like 'module:attribute', got {target!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise EasyCSVUsageError(f"Cannot import module '{module_name}': {exc}") from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise EasyCSVUsageError(f"'{module_name}' has no attribute '{attr_path}'") from exc
    if callable(obj):
        logger.debug("Calling %s to obtain the source object", target)
        try:
            obj = obj()
        except TypeError as exc:
            raise EasyCSVUsageError(f"Cannot call '{target}' without arguments: {exc}") from exc
        except Exception as exc:
            raise EasyCSVUnexpectedError(f"Calling '{target}' failed: {exc}") from exc
    return obj


def parse_pattern(value: str) -> tuple[str, str]:
    """Split a ``NAME=PATTERN`` option value.

    Raises:
        EasyCSVUsageError: If ``value`` has no ``=`` or an empty name.
    """
    name, sep, pattern = value.partition("=")
    if not sep or not name:
        raise EasyCSVUsageError(f"--pattern expects NAME=PATTERN, got {value!r}")
    return name, pattern


def _load_options(config_path: Path | None) -> CsvOptions:
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.is_file():
            return CsvOptions()
        config_path = candidate
    try:
        return load_options(config_path)
    except ValueError as exc:
        raise EasyCSVConfigError(f"{config_path}: {exc}") from exc


@click.command(
    name="render",
    help="Render TARGET (module:attribute) as CSV.",
    epilog="""
If TARGET is callable it is called without arguments to produce the object.
Options are read from --config, else from ./easycsv.toml when present.
""",
)
@click.argument("target")
@click.option("--separator", "-s", default=None, help="Column delimiter (default ',').")
@click.option(
    "--pattern",
    "-p",
    "patterns",
    multiple=True,
    metavar="NAME=PATTERN",
    help="Per-attribute pattern override; may be repeated.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Options file (easycsv.toml, or pyproject.toml with [tool.easycsv]).",
)
@click.option(
    "--builtins/--no-builtins",
    default=True,
    show_default=True,
    help="Register the bundled Decimal/date/datetime/str formatters.",
)
def render_command(
    *,
    target: str,
    separator: str | None,
    patterns: tuple[str, ...],
    config_path: Path | None,
    builtins: bool,
) -> None:
    """Render one object as a CSV header line plus a data line.

    Args:
        target (str): ``module:attribute`` import path of the source object.
        separator (str | None): Column delimiter overriding the options file.
        patterns (tuple[str, ...]): ``NAME=PATTERN`` overrides.
        config_path (Path | None): Explicit options file.
        builtins (bool): Whether to register the bundled formatters.
    """
    options = _load_options(config_path)
    overrides = [parse_pattern(p) for p in patterns]

    if builtins:
        register_builtin_formatters()

    source = resolve_target(target)
    try:
        csv = EasyCSV(source, options=options)
        if separator is not None:
            csv.set_separator(separator)
        for name, pattern in overrides:
            csv.set_field_pattern(name, pattern)
        text = csv.build()
    except ValueError as exc:
        # InvalidArgumentError (TARGET is None) and empty separators.
        raise EasyCSVUsageError(str(exc)) from exc
    except EasyCSVError as exc:
        raise EasyCSVUnexpectedError(str(exc)) from exc

    click.echo(text)
