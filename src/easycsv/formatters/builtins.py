# topmark:header:start
#
#   project      : EasyCSV
#   file         : builtins.py
#   file_relpath : src/easycsv/formatters/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Opt-in formatters for common standard-library types.

Nothing here is registered on import. Call `register_builtin_formatters` to
bind these formatters to ``Decimal``, ``date``, ``datetime`` and ``str``.
"""

from __future__ import annotations

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Any

from easycsv.config.logging import get_logger
from easycsv.formatters.base import BaseFormatter
from easycsv.registry import get_default_registry

if TYPE_CHECKING:
    from easycsv.config.logging import EasyCSVLogger
    from easycsv.registry import FormatterRegistry

logger: EasyCSVLogger = get_logger(__name__)


def fraction_digits(pattern: str) -> tuple[int, int]:
    """Return the ``(minimum, maximum)`` decimal places of a ``0.0#``-style mask.

    Only the part after the last ``.`` counts: each ``0`` is a digit that is
    always printed, each ``#`` a digit printed only when it is not a trailing
    zero. ``"0"`` and ``""`` mean no decimals.

    Raises:
        ValueError: If the fractional part contains anything but ``0`` or ``#``.
    """
    _, sep, fraction = pattern.rpartition(".")
    if not sep:
        return 0, 0
    if fraction.strip("0#"):
        raise ValueError(f"Invalid decimal pattern: {pattern!r}")
    return fraction.count("0"), len(fraction)


class DecimalFormatter(BaseFormatter):
    """Fixed-point rendering with half-up rounding.

    The pattern is a mask such as ``"0.00"`` (two decimals), ``"0.0#"`` (one or
    two) or ``"0"`` (none). Accepts ``Decimal``, ``int`` and ``float`` values;
    floats are converted through their shortest ``repr`` so ``19.5`` stays
    ``19.5``.
    """

    default_pattern = "0.00"
    description = "Fixed-point number, half-up rounding (mask: 0.00)"

    def format(self, value: Any, pattern: str) -> str:
        minimum, maximum = fraction_digits(pattern)
        try:
            number = value if isinstance(value, Decimal) else Decimal(repr(value))
        except InvalidOperation as exc:
            raise ValueError(f"Not a number: {value!r}") from exc
        quantum = Decimal(1).scaleb(-maximum)
        with localcontext() as ctx:
            # Large magnitudes need more than the default 28 significant digits.
            ctx.prec = max(ctx.prec, number.adjusted() + maximum + 2)
            text = format(number.quantize(quantum, rounding=ROUND_HALF_UP), "f")
        if maximum > minimum:
            whole, _, fraction = text.partition(".")
            fraction = fraction[:minimum] + fraction[minimum:].rstrip("0")
            text = f"{whole}.{fraction}" if fraction else whole
        return text


class DateFormatter(BaseFormatter):
    """``strftime`` rendering for dates."""

    default_pattern = "%Y-%m-%d"
    description = "strftime layout"

    def format(self, value: Any, pattern: str) -> str:
        return value.strftime(pattern)


class DateTimeFormatter(DateFormatter):
    """``strftime`` rendering for datetimes."""

    default_pattern = "%Y-%m-%dT%H:%M:%S"


class TextFormatter(BaseFormatter):
    """Verbatim text; the pattern is ignored."""

    description = "Text as-is (no quoting)"

    def format(self, value: Any, pattern: str) -> str:
        return str(value)


def register_builtin_formatters(registry: FormatterRegistry | None = None) -> FormatterRegistry:
    """Register the formatters of this module.

    Args:
        registry (FormatterRegistry | None): Target registry; defaults to the
            process-wide registry.

    Returns:
        FormatterRegistry: The registry that was populated.
    """
    target = registry if registry is not None else get_default_registry()
    target.register(Decimal, DecimalFormatter())
    target.register(dt.date, DateFormatter())
    target.register(dt.datetime, DateTimeFormatter())
    target.register(str, TextFormatter())
    logger.debug("Registered builtin formatters in %r", target)
    return target
