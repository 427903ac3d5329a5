# topmark:header:start
#
#   project      : EasyCSV
#   file         : __init__.py
#   file_relpath : src/easycsv/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for EasyCSV (``easycsv`` console script)."""

from __future__ import annotations
