# topmark:header:start
#
#   project      : EasyCSV
#   file         : __init__.py
#   file_relpath : src/easycsv/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EasyCSV package.

EasyCSV renders the declared attributes of one Python object as a CSV header
line plus a single data line. Attribute types are mapped to text by pluggable
formatters kept in a type-keyed registry.
"""

from __future__ import annotations

from easycsv.config.options import CsvOptions
from easycsv.core import EasyCSV
from easycsv.errors import (
    EasyCSVError,
    InvalidArgumentError,
    InvalidCsvSourceError,
    UnsupportedOperationError,
)
from easycsv.formatters.base import BaseFormatter, FieldFormatter
from easycsv.introspection import FieldDescriptor, get_fields
from easycsv.policy import is_primitive_or_wrapper
from easycsv.registry import (
    FormatterRegistry,
    contains_formatter,
    find_formatter,
    get_default_registry,
    register_formatter,
)

__all__ = [
    "BaseFormatter",
    "CsvOptions",
    "EasyCSV",
    "EasyCSVError",
    "FieldDescriptor",
    "FieldFormatter",
    "FormatterRegistry",
    "InvalidArgumentError",
    "InvalidCsvSourceError",
    "UnsupportedOperationError",
    "contains_formatter",
    "find_formatter",
    "get_default_registry",
    "get_fields",
    "is_primitive_or_wrapper",
    "register_formatter",
]
