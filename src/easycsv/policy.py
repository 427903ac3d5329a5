# topmark:header:start
#
#   project      : EasyCSV
#   file         : policy.py
#   file_relpath : src/easycsv/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type support policy: which declared attribute types become CSV columns."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from easycsv.registry import FormatterRegistry

# Exact types rendered without a registered formatter. ``str`` is deliberately
# absent: text needs a formatter (see `easycsv.formatters.builtins.TextFormatter`).
PRIMITIVE_TYPES: Final[frozenset[type]] = frozenset({bool, int, float, complex})


def is_primitive_or_wrapper(tp: object) -> bool:
    """Return True if ``tp`` is exactly one of the primitive types.

    Subclasses (``IntEnum``, custom ``int`` subclasses) are not primitive.
    """
    return isinstance(tp, type) and tp in PRIMITIVE_TYPES


def is_type_supported(tp: object, registry: FormatterRegistry) -> bool:
    """Return True if attributes declared as ``tp`` are serialized.

    Args:
        tp (object): A declared attribute type. Non-type annotations (unresolved
            strings, unions) are never supported.
        registry (FormatterRegistry): Registry consulted for custom formatters.

    Returns:
        bool: True for primitive types and types with a registered formatter.
    """
    return is_primitive_or_wrapper(tp) or registry.contains(tp)
