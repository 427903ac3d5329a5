# topmark:header:start
#
#   project      : EasyCSV
#   file         : test_formatters_cmd.py
#   file_relpath : tests/cli/test_formatters_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `easycsv formatters` and `easycsv version`."""

from __future__ import annotations

import json
from typing import Callable, Sequence

from click.testing import Result

from easycsv.cli.exit_codes import ExitCode
from easycsv.constants import EASYCSV_VERSION
from easycsv.registry import get_default_registry
from tests.sample_models import Money, MoneyFormatter

RunCli = Callable[[Sequence[str]], Result]


def test_formatters_lists_builtins(run_cli: RunCli) -> None:
    result = run_cli(["formatters"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines = result.stdout.splitlines()
    assert [line.split()[0] for line in lines[:-1]] == [
        "datetime.date",
        "datetime.datetime",
        "decimal.Decimal",
        "str",
    ]
    assert lines[-1] == "Primitive types: bool, complex, float, int"


def test_formatters_without_builtins(run_cli: RunCli) -> None:
    result = run_cli(["formatters", "--no-builtins"])
    assert result.stdout.splitlines() == [
        "No formatters registered.",
        "Primitive types: bool, complex, float, int",
    ]


def test_formatters_json_includes_custom_formatter(run_cli: RunCli) -> None:
    get_default_registry().register(Money, MoneyFormatter())
    result = run_cli(["formatters", "--no-builtins", "--json"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload = json.loads(result.stdout)
    assert payload == {
        "formatters": [
            {
                "type": "tests.sample_models.Money",
                "formatter": "MoneyFormatter",
                "default_pattern": "0.00",
                "description": "Money amount",
            }
        ],
        "primitives": ["bool", "complex", "float", "int"],
    }


def test_version_outputs_installed_version(run_cli: RunCli) -> None:
    result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout.strip() == EASYCSV_VERSION


def test_group_without_command_shows_usage(run_cli: RunCli) -> None:
    result = run_cli([])
    assert "render" in result.output
