# topmark:header:start
#
#   project      : EasyCSV
#   file         : __init__.py
#   file_relpath : src/easycsv/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for EasyCSV: rendering options and logging setup."""

from __future__ import annotations

from easycsv.config.options import (
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_SEPARATOR,
    CsvOptions,
    MutableCsvOptions,
    load_options,
    options_from_mapping,
)

__all__ = [
    "DEFAULT_LINE_SEPARATOR",
    "DEFAULT_SEPARATOR",
    "CsvOptions",
    "MutableCsvOptions",
    "load_options",
    "options_from_mapping",
]
