# topmark:header:start
#
#   project      : EasyCSV
#   file         : introspection.py
#   file_relpath : src/easycsv/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover the declared attributes of a source object's type.

Declared attributes are the class-level annotations of the type and its bases,
walked base-first so that inherited attributes come before the subclass's own.
Dataclasses use `dataclasses.fields`, which yields the same order. ``ClassVar``
annotations are skipped; private (``_name``) attributes are kept.

The declared type of each attribute is resolved with `typing.get_type_hints`.
``Optional[T]`` and ``T | None`` are reduced to ``T``. When the class's hints
cannot be resolved as a whole (e.g. a forward reference to an undefined name),
each annotation is resolved on its own; one that still fails keeps its raw
string form, which the type support policy treats as unsupported.

Descriptors are cached per type in a bounded LRU cache, so repeated
introspection of the same type returns the same tuple.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import operator
import sys
import types
import typing
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Final, Union

from easycsv.config.logging import get_logger

if TYPE_CHECKING:
    from easycsv.config.logging import EasyCSVLogger

logger: EasyCSVLogger = get_logger(__name__)

# Least recently introspected types are evicted beyond this many entries.
DESCRIPTOR_CACHE_SIZE: Final[int] = 256


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared attribute of a source type.

    Attributes:
        name (str): Attribute name, used as the column header.
        declared_type (Any): The declared (annotated) type, after ``Optional`` unwrapping.
        accessor (Callable[[Any], Any]): Reads the attribute from a source instance.
            May raise (e.g. ``AttributeError`` for an annotated but unset attribute).
    """

    name: str
    declared_type: Any
    accessor: Callable[[Any], Any] = dataclasses.field(repr=False, compare=False)

    def read(self, source: object) -> Any:
        """Return the current value of this attribute on ``source``."""
        return self.accessor(source)


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar", "t.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _own_annotations(klass: type) -> dict[str, Any]:
    """Return the annotations declared directly on ``klass`` (unevaluated where possible)."""
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        # Python 3.14+: deferred annotations referencing undefined names.
        if sys.version_info >= (3, 14):
            import annotationlib

            return dict(
                annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)
            )
        raise


def unwrap_optional(tp: Any) -> Any:
    """Reduce ``Optional[T]`` / ``T | None`` to ``T``; other types are returned unchanged."""
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _declared_annotations(cls: type) -> dict[str, tuple[Any, type]]:
    """Collect ``name -> (raw annotation, declaring class)`` in declaration order, bases first."""
    collected: dict[str, tuple[Any, type]] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, annotation in _own_annotations(klass).items():
            if _is_classvar(annotation):
                continue
            # Redeclared in a subclass: keeps the base position, takes the new type.
            collected[name] = (annotation, klass)

    if dataclasses.is_dataclass(cls):
        # InitVar pseudo-fields are not attributes.
        return {f.name: collected.get(f.name, (f.type, cls)) for f in dataclasses.fields(cls)}
    return collected


def _resolve_one(name: str, annotation: Any, owner: type) -> Any:
    """Resolve a single string annotation in the namespace of its declaring class."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(owner.__module__)
    globalns: dict[str, Any] = dict(vars(module)) if module is not None else {}
    holder = types.SimpleNamespace(__annotations__={name: annotation})
    try:
        return typing.get_type_hints(holder, globalns, dict(vars(owner)))[name]
    except Exception as exc:
        logger.debug("Cannot resolve annotation %r of %s: %s", annotation, owner.__qualname__, exc)
        return annotation


def _resolve_hints(cls: type) -> dict[str, Any] | None:
    try:
        return typing.get_type_hints(cls)
    except Exception as exc:  # NameError, TypeError from unresolvable annotations
        logger.debug("Cannot resolve type hints of %s: %s", cls.__qualname__, exc)
        return None


@functools.lru_cache(maxsize=DESCRIPTOR_CACHE_SIZE)
def describe_type(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the declared attributes of ``cls`` as an immutable, ordered tuple.

    Args:
        cls (type): The runtime type of a source object.

    Returns:
        tuple[FieldDescriptor, ...]: One descriptor per declared attribute.
    """
    raw = _declared_annotations(cls)
    hints = _resolve_hints(cls)

    descriptors: list[FieldDescriptor] = []
    for name, (annotation, owner) in raw.items():
        if hints is not None and name in hints:
            declared = hints[name]
        else:
            declared = _resolve_one(name, annotation, owner)
        declared = unwrap_optional(declared)
        descriptors.append(
            FieldDescriptor(name=name, declared_type=declared, accessor=operator.attrgetter(name))
        )
    logger.trace(
        "Introspected %s: %s",
        cls.__qualname__,
        ", ".join(f"{d.name}: {d.declared_type!r}" for d in descriptors) or "<no attributes>",
    )
    return tuple(descriptors)


def get_fields(source: object) -> tuple[FieldDescriptor, ...]:
    """Return the declared attributes of ``type(source)``.

    Args:
        source (object): Any object; only its type is inspected.

    Returns:
        tuple[FieldDescriptor, ...]: Descriptors in declaration order.
    """
    return describe_type(type(source))


def clear_cache() -> None:
    """Forget cached descriptors (needed only if classes are re-annotated at runtime)."""
    describe_type.cache_clear()
