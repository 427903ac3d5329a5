# topmark:header:start
#
#   project      : EasyCSV
#   file         : __main__.py
#   file_relpath : src/easycsv/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running EasyCSV via ``python -m easycsv``.

Delegates to :func:`easycsv.cli.main.cli`, the same entry point as the
``easycsv`` console script.

Examples:
    Render an object produced by a factory function::

        python -m easycsv render myapp.models:sample_order
"""

from __future__ import annotations

from easycsv.cli.main import cli

if __name__ == "__main__":
    cli()
