# topmark:header:start
#
#   project      : EasyCSV
#   file         : base.py
#   file_relpath : src/easycsv/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for field formatters.

A formatter turns one attribute value into the text of a CSV cell. Formatters
are registered per concrete type in a
[`FormatterRegistry`][easycsv.registry.FormatterRegistry] and are looked up by
the *runtime* type of the value being rendered.

Lifecycle
---------
1) `EasyCSV` finds the formatter registered for ``type(value)``.
2) It picks the per-attribute pattern override, or ``get_default_pattern()``.
3) It calls ``format(value, pattern)`` and uses the result verbatim.

The pattern is advisory: an implementation may ignore it and apply a fixed
rendering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldFormatter(Protocol):
    """Protocol for a type-specific value formatter."""

    def format(self, value: Any, pattern: str) -> str:
        """Render ``value`` as cell text.

        Args:
            value (Any): The attribute value; never None.
            pattern (str): The effective pattern (override or default).

        Returns:
            str: The rendered text.
        """
        ...

    def get_default_pattern(self) -> str:
        """Return the pattern used when no per-attribute override is configured."""
        ...


class BaseFormatter(ABC):
    """Convenience base class implementing the `FieldFormatter` protocol.

    Subclasses set ``default_pattern`` (and optionally ``description``) as class
    attributes and implement `format`. A different default pattern can be
    passed to the constructor.

    Attributes:
        default_pattern (str): Pattern used when no override is configured.
        description (str): Short human-readable description (used by ``easycsv formatters``).
    """

    default_pattern: str = ""
    description: str = ""

    def __init__(self, default_pattern: str | None = None) -> None:
        if default_pattern is not None:
            self.default_pattern = default_pattern

    @abstractmethod
    def format(self, value: Any, pattern: str) -> str:
        """Render ``value`` as cell text, honoring ``pattern`` where meaningful."""

    def get_default_pattern(self) -> str:
        """Return the pattern used when no per-attribute override is configured."""
        return self.default_pattern

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(default_pattern={self.default_pattern!r})"
