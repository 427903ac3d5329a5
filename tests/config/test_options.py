# topmark:header:start
#
#   project      : EasyCSV
#   file         : test_options.py
#   file_relpath : tests/config/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for :mod:`easycsv.config.options` (TOML loading and freeze/thaw)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from easycsv.config.options import (
    CsvOptions,
    MutableCsvOptions,
    load_options,
    options_from_mapping,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    options = CsvOptions()
    assert options.separator == ","
    assert options.line_separator == "\n"
    assert dict(options.patterns) == {}


def test_freeze_and_thaw_round_trip() -> None:
    draft = MutableCsvOptions(separator=";")
    draft.patterns["amount"] = "0"
    frozen = draft.freeze()

    draft.patterns["amount"] = "0.0"
    assert frozen.patterns["amount"] == "0"

    thawed = frozen.thaw()
    thawed.separator = "\t"
    assert frozen.separator == ";"
    assert thawed.freeze().separator == "\t"


def test_frozen_options_are_immutable() -> None:
    frozen = CsvOptions()
    with pytest.raises(AttributeError):
        frozen.separator = ";"  # type: ignore[misc]
    with pytest.raises(TypeError):
        MutableCsvOptions().freeze().patterns["x"] = "y"  # type: ignore[index]


def test_from_mapping_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        options = options_from_mapping({"separator": ";", "quote": '"'}, origin="test")
    assert options.separator == ";"
    assert any("quote" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "data",
    [
        {"separator": ""},
        {"separator": 1},
        {"line_separator": ""},
        {"patterns": "amount=0"},
        {"patterns": {"amount": 0}},
    ],
)
def test_from_mapping_rejects_invalid_values(data: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        options_from_mapping(data)


def test_load_easycsv_toml(tmp_path: Path) -> None:
    path = tmp_path / "easycsv.toml"
    path.write_text(
        'separator = ";"\nline_separator = "\\r\\n"\n\n[patterns]\namount = "0"\n',
        encoding="utf-8",
    )
    options = load_options(path)
    assert options.separator == ";"
    assert options.line_separator == "\r\n"
    assert dict(options.patterns) == {"amount": "0"}


def test_load_pyproject_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.easycsv]\nseparator = "|"\n'
        '\n[tool.easycsv.patterns]\nissued = "%d/%m/%Y"\n',
        encoding="utf-8",
    )
    options = load_options(path)
    assert options.separator == "|"
    assert dict(options.patterns) == {"issued": "%d/%m/%Y"}


def test_pyproject_without_section_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_options(path) == CsvOptions()


def test_malformed_toml_yields_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "easycsv.toml"
    path.write_text("separator = \n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        options = load_options(path)
    assert options == CsvOptions()
    assert any("Invalid TOML" in r.getMessage() for r in caplog.records)


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_options(tmp_path / "nope.toml") == CsvOptions()


def test_invalid_value_in_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "easycsv.toml"
    path.write_text('separator = ""\n', encoding="utf-8")
    with pytest.raises(ValueError, match="separator"):
        load_options(path)
