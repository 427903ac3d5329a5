# topmark:header:start
#
#   project      : EasyCSV
#   file         : __init__.py
#   file_relpath : src/easycsv/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``easycsv`` CLI."""

from __future__ import annotations
