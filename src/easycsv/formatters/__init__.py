# topmark:header:start
#
#   project      : EasyCSV
#   file         : __init__.py
#   file_relpath : src/easycsv/formatters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field formatter contract and the bundled sample formatters."""

from __future__ import annotations

from easycsv.formatters.base import BaseFormatter, FieldFormatter

__all__ = [
    "BaseFormatter",
    "FieldFormatter",
]
