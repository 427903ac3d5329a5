# topmark:header:start
#
#   project      : EasyCSV
#   file         : constants.py
#   file_relpath : src/easycsv/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

EASYCSV_VERSION: str = get_version("easycsv")

DEFAULT_CONFIG_NAME: str = "easycsv.toml"
