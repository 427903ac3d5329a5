# topmark:header:start
#
#   project      : EasyCSV
#   file         : errors.py
#   file_relpath : src/easycsv/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for the EasyCSV library.

Setup mistakes (binding a missing source, building without one) are raised
immediately. Failures while rendering a single attribute are never raised: they
are logged and the column is rendered as an empty string.
"""

from __future__ import annotations


class EasyCSVError(Exception):
    """Base class for all EasyCSV exceptions."""


class InvalidArgumentError(EasyCSVError, ValueError):
    """Raised when an `EasyCSV` is constructed without a source object."""


class UnsupportedOperationError(EasyCSVError, RuntimeError):
    """Raised when a missing source is bound to an existing `EasyCSV`."""


class InvalidCsvSourceError(EasyCSVError):
    """Raised when `EasyCSV.build()` runs while no source object is bound."""

    def __init__(self, message: str = "no source object bound; call set_source() first") -> None:
        super().__init__(message)
