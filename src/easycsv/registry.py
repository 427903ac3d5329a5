# topmark:header:start
#
#   project      : EasyCSV
#   file         : registry.py
#   file_relpath : src/easycsv/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter registry: maps concrete types to field formatters.

Lookups are by **exact** type: a formatter registered for ``datetime.date`` is
not used for a ``datetime.datetime`` value. Registering a formatter for a type
that already has one replaces it (last writer wins).

A process-wide default registry is shared by every `EasyCSV` that is not given
an explicit ``registry=``. Register formatters before building any snapshot that
relies on them.

Typical usage:
    ```python
    from easycsv.registry import FormatterRegistry, register_formatter

    @register_formatter(Money)
    class MoneyFormatter(BaseFormatter):
        default_pattern = "0.00"
        ...

    # Isolated registry (tests, multi-tenant processes):
    registry = FormatterRegistry()
    registry.register(Money, MoneyFormatter())
    ```

Warning:
    Mutations of the default registry operate on global state shared across the
    process. In tests, use `FormatterRegistry.temporary` or a dedicated registry
    instance to ensure cleanup.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping, TypeVar

from easycsv.config.logging import get_logger
from easycsv.formatters.base import FieldFormatter

if TYPE_CHECKING:
    from easycsv.config.logging import EasyCSVLogger

logger: EasyCSVLogger = get_logger(__name__)

F = TypeVar("F", bound=type)


def type_name(tp: type) -> str:
    """Return the dotted ``module.QualName`` of a type (``int`` for builtins)."""
    module: str = getattr(tp, "__module__", "") or ""
    qualname: str = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
    if module in ("", "builtins"):
        return qualname
    return f"{module}.{qualname}"


@dataclass(frozen=True)
class FormatterMeta:
    """Stable, serializable metadata about a registered formatter."""

    type_name: str
    formatter: str
    default_pattern: str
    description: str = ""


class FormatterRegistry:
    """Thread-safe table of ``type -> FieldFormatter`` entries.

    Notes:
        - Reads and writes are serialized with an ``RLock``; a formatter
          registered from one thread is visible to lookups from another.
        - There is at most one formatter per exact type.
    """

    def __init__(self, entries: Mapping[type, FieldFormatter] | None = None) -> None:
        self._lock = RLock()
        self._formatters: dict[type, FieldFormatter] = {}
        for tp, formatter in (entries or {}).items():
            self.register(tp, formatter)

    def contains(self, tp: object) -> bool:
        """Return True if a formatter is registered for exactly ``tp``."""
        with self._lock:
            return isinstance(tp, type) and tp in self._formatters

    def find(self, tp: type) -> FieldFormatter | None:
        """Return the formatter registered for exactly ``tp``.

        Args:
            tp (type): The runtime type of a value.

        Returns:
            FieldFormatter | None: The formatter if found, else None.
        """
        with self._lock:
            return self._formatters.get(tp)

    def register(self, tp: type, formatter: FieldFormatter) -> None:
        """Register ``formatter`` for values whose type is exactly ``tp``.

        Args:
            tp (type): Concrete type served by the formatter.
            formatter (FieldFormatter): Formatter instance.

        Raises:
            TypeError: If ``tp`` is not a type, or ``formatter`` does not implement
                the `FieldFormatter` contract (e.g. a class was passed instead of
                an instance).
        """
        if not isinstance(tp, type):
            raise TypeError(f"Formatter key must be a type, got {tp!r}")
        if isinstance(formatter, type) or not isinstance(formatter, FieldFormatter):
            raise TypeError(
                f"{formatter!r} does not implement format() and get_default_pattern()"
            )
        with self._lock:
            previous: FieldFormatter | None = self._formatters.get(tp)
            self._formatters[tp] = formatter
        if previous is not None and previous is not formatter:
            logger.info(
                "Replacing formatter for %s: %r -> %r", type_name(tp), previous, formatter
            )
        else:
            logger.debug("Registered formatter %r for %s", formatter, type_name(tp))

    def unregister(self, tp: type) -> bool:
        """Remove the formatter registered for ``tp``.

        Returns:
            bool: True if an entry was removed, else False.
        """
        with self._lock:
            existed = self._formatters.pop(tp, None) is not None
        if existed:
            logger.debug("Unregistered formatter for %s", type_name(tp))
        return existed

    def clear(self) -> None:
        """Remove every registered formatter."""
        with self._lock:
            self._formatters.clear()

    def types(self) -> tuple[type, ...]:
        """Return registered types, sorted by dotted name."""
        with self._lock:
            return tuple(sorted(self._formatters, key=type_name))

    def as_mapping(self) -> Mapping[type, FieldFormatter]:
        """Return a **read-only** snapshot of the registry.

        Returns:
            Mapping[type, FieldFormatter]: A `MappingProxyType` over a copy of the
                current entries; later registrations are not reflected.
        """
        with self._lock:
            return MappingProxyType(dict(self._formatters))

    def iter_meta(self) -> Iterator[FormatterMeta]:
        """Iterate over stable metadata for registered formatters, sorted by type name.

        Yields:
            FormatterMeta: Serializable metadata about each formatter.
        """
        snapshot = self.as_mapping()
        for tp in sorted(snapshot, key=type_name):
            formatter = snapshot[tp]
            yield FormatterMeta(
                type_name=type_name(tp),
                formatter=type(formatter).__name__,
                default_pattern=formatter.get_default_pattern(),
                description=getattr(formatter, "description", "") or "",
            )

    @contextmanager
    def temporary(self, tp: type, formatter: FieldFormatter) -> Iterator[FormatterRegistry]:
        """Register ``formatter`` for the duration of a ``with`` block.

        The previous entry for ``tp`` (if any) is restored on exit.
        """
        with self._lock:
            previous: FieldFormatter | None = self._formatters.get(tp)
        self.register(tp, formatter)
        try:
            yield self
        finally:
            if previous is None:
                self.unregister(tp)
            else:
                self.register(tp, previous)

    def __len__(self) -> int:
        with self._lock:
            return len(self._formatters)

    def __contains__(self, tp: object) -> bool:
        return self.contains(tp)

    def __repr__(self) -> str:
        names = ", ".join(type_name(tp) for tp in self.types())
        return f"FormatterRegistry([{names}])"


_default_registry = FormatterRegistry()


def get_default_registry() -> FormatterRegistry:
    """Return the process-wide registry used when no registry is injected."""
    return _default_registry


def register_formatter(
    tp: type, *args: Any, registry: FormatterRegistry | None = None, **kwargs: Any
) -> Callable[[F], F]:
    """Class decorator registering a formatter class for ``tp``.

    The decorated class is instantiated with ``*args`` / ``**kwargs`` at
    decoration time and the instance is registered.

    Args:
        tp (type): Concrete type served by the formatter.
        *args (Any): Positional arguments for the formatter constructor.
        registry (FormatterRegistry | None): Target registry; defaults to the
            process-wide registry.
        **kwargs (Any): Keyword arguments for the formatter constructor.

    Returns:
        Callable[[F], F]: A decorator returning the class unchanged.
    """
    target: FormatterRegistry = registry if registry is not None else _default_registry

    def decorator(cls: F) -> F:
        target.register(tp, cls(*args, **kwargs))
        return cls

    return decorator


def contains_formatter(tp: object) -> bool:
    """Return True if the default registry has a formatter for exactly ``tp``."""
    return _default_registry.contains(tp)


def find_formatter(tp: type) -> FieldFormatter | None:
    """Return the default registry's formatter for exactly ``tp``."""
    return _default_registry.find(tp)
