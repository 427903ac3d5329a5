# topmark:header:start
#
#   project      : EasyCSV
#   file         : formatters.py
#   file_relpath : src/easycsv/cli/commands/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV `formatters` command.

Lists the formatters in the process-wide registry together with the primitive
types that are rendered without one.
"""

from __future__ import annotations

import json

import click

from easycsv.formatters.builtins import register_builtin_formatters
from easycsv.policy import PRIMITIVE_TYPES
from easycsv.registry import get_default_registry


@click.command(
    name="formatters",
    help="List registered formatters and primitive types.",
)
@click.option(
    "--builtins/--no-builtins",
    default=True,
    show_default=True,
    help="Register the bundled formatters before listing.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text.")
def formatters_command(*, builtins: bool, as_json: bool) -> None:
    """List registered formatters.

    Args:
        builtins (bool): Whether to register the bundled formatters first.
        as_json (bool): Emit a JSON document instead of aligned text.
    """
    registry = get_default_registry()
    if builtins:
        register_builtin_formatters(registry)

    metas = list(registry.iter_meta())
    primitives = sorted(tp.__name__ for tp in PRIMITIVE_TYPES)

    if as_json:
        payload = {
            "formatters": [
                {
                    "type": m.type_name,
                    "formatter": m.formatter,
                    "default_pattern": m.default_pattern,
                    "description": m.description,
                }
                for m in metas
            ],
            "primitives": primitives,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    if not metas:
        click.echo("No formatters registered.")
    else:
        width = max(len(m.type_name) for m in metas)
        for m in metas:
            line = f"{m.type_name:<{width}}  {m.formatter}  default={m.default_pattern!r}"
            if m.description:
                line += f"  ({m.description})"
            click.echo(line)
    click.echo(f"Primitive types: {', '.join(primitives)}")
