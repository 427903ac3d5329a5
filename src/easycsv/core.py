# topmark:header:start
#
#   project      : EasyCSV
#   file         : core.py
#   file_relpath : src/easycsv/core.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render one object as a two-line CSV snapshot.

`EasyCSV` binds a source object, discovers its declared attributes, keeps the
ones whose declared type is supported, and renders a header line of attribute
names followed by one data line of formatted values:

```python
@dataclass
class Order:
    id: int
    active: bool

EasyCSV(Order(42, True)).build()  # "id,active\\n42,true"
```

Columns are selected by the attribute's *declared* type, while values are
formatted by looking up the formatter registered for the value's *runtime*
type. A value whose runtime type has neither a formatter nor a primitive
rendering yields an empty cell.

Instances are not meant to be mutated from several threads; use one `EasyCSV`
per thread.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from easycsv.config.logging import get_logger
from easycsv.config.options import CsvOptions, validate_separator
from easycsv.errors import InvalidArgumentError, InvalidCsvSourceError, UnsupportedOperationError
from easycsv.introspection import FieldDescriptor, get_fields
from easycsv.policy import is_primitive_or_wrapper
from easycsv.policy import is_type_supported as _is_type_supported
from easycsv.registry import get_default_registry

if TYPE_CHECKING:
    from easycsv.config.logging import EasyCSVLogger
    from easycsv.formatters.base import FieldFormatter
    from easycsv.registry import FormatterRegistry

logger: EasyCSVLogger = get_logger(__name__)


def primitive_text(value: Any) -> str:
    """Return the canonical text of a primitive value (``true`` / ``false`` for bools)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EasyCSV:
    """CSV snapshot builder for a single source object.

    Args:
        source (object): The object to render; must not be None.
        registry (FormatterRegistry | None): Formatter registry; defaults to the
            process-wide registry.
        options (CsvOptions | None): Separators and initial pattern overrides.

    Raises:
        InvalidArgumentError: If ``source`` is None.
    """

    def __init__(
        self,
        source: object,
        *,
        registry: FormatterRegistry | None = None,
        options: CsvOptions | None = None,
    ) -> None:
        if source is None:
            raise InvalidArgumentError("source object must not be None")
        self._set_defaults(registry, options)
        self._source: object | None = source
        self._fields = get_fields(source)

    @classmethod
    def builder(
        cls,
        *,
        registry: FormatterRegistry | None = None,
        options: CsvOptions | None = None,
    ) -> EasyCSV:
        """Return an instance with no source bound; call `set_source` before `build`."""
        instance = cls.__new__(cls)
        instance._set_defaults(registry, options)
        return instance

    def _set_defaults(self, registry: FormatterRegistry | None, options: CsvOptions | None) -> None:
        opts: CsvOptions = options if options is not None else CsvOptions()
        self._registry: FormatterRegistry = (
            registry if registry is not None else get_default_registry()
        )
        self._separator: str = opts.separator
        self._line_separator: str = opts.line_separator
        self._field_patterns: dict[str, str] = dict(opts.patterns)
        self._source = None
        self._fields: tuple[FieldDescriptor, ...] = ()

    # --- configuration -------------------------------------------------------

    @property
    def source(self) -> object | None:
        """The bound source object, or None for an unbound builder."""
        return self._source

    @property
    def registry(self) -> FormatterRegistry:
        """The formatter registry consulted by this instance."""
        return self._registry

    @property
    def separator(self) -> str:
        """The column delimiter (``","`` by default)."""
        return self._separator

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        """Declared attributes of the bound source, unfiltered, in declaration order."""
        return self._fields

    def get_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return a read-only snapshot of the current attribute descriptors."""
        return self._fields

    @property
    def field_patterns(self) -> Mapping[str, str]:
        """Read-only view of the per-attribute pattern overrides."""
        return MappingProxyType(self._field_patterns)

    def set_source(self, source: object) -> EasyCSV:
        """Bind a new source object and re-derive its attributes.

        Pattern overrides are kept; entries for attributes the new source lacks
        are simply unused.

        Raises:
            UnsupportedOperationError: If ``source`` is None.
        """
        if source is None:
            raise UnsupportedOperationError("can't set a None source object")
        self._source = source
        self._fields = get_fields(source)
        logger.debug("Bound source %s (%d attributes)", type(source).__qualname__, len(self._fields))
        return self

    def set_field_pattern(self, field_name: str, pattern: str) -> EasyCSV:
        """Set the pattern override for ``field_name`` (case-sensitive, not validated)."""
        self._field_patterns[field_name] = pattern
        return self

    def set_separator(self, separator: str) -> EasyCSV:
        """Set the column delimiter.

        Raises:
            ValueError: If ``separator`` is empty.
        """
        self._separator = validate_separator(separator)
        return self

    # --- rendering -----------------------------------------------------------

    def is_type_supported(self, tp: object) -> bool:
        """Return True if attributes declared as ``tp`` become columns."""
        return _is_type_supported(tp, self._registry)

    def supported_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return the attributes that become columns, in column order."""
        return tuple(f for f in self._fields if self.is_type_supported(f.declared_type))

    def get_formatted_value(self, field_name: str, field_value: Any) -> str:
        """Render one named value as cell text.

        Args:
            field_name (str): A case-sensitive attribute name, used to look up a
                pattern override.
            field_value (Any): The value to render.

        Returns:
            str: The formatted text; ``""`` for None and for values with neither a
                registered formatter nor a primitive type.
        """
        if field_value is None:
            logger.debug("Attribute '%s' is None; rendering empty cell", field_name)
            return ""
        value_type = type(field_value)
        formatter: FieldFormatter | None = self._registry.find(value_type)
        if formatter is not None:
            pattern = self._field_patterns.get(field_name)
            if pattern is None:
                pattern = formatter.get_default_pattern()
            return formatter.format(field_value, pattern)
        if is_primitive_or_wrapper(value_type):
            return primitive_text(field_value)
        logger.trace(
            "No formatter for %s (attribute '%s'); rendering empty cell",
            value_type.__qualname__,
            field_name,
        )
        return ""

    def _render_cell(self, descriptor: FieldDescriptor) -> str:
        try:
            return self.get_formatted_value(descriptor.name, descriptor.read(self._source))
        except Exception as exc:
            logger.error(
                "Cannot render attribute '%s' of %s: %s",
                descriptor.name,
                type(self._source).__qualname__,
                exc,
            )
            return ""

    def build(self) -> str:
        """Render the header line and the data line.

        Returns:
            str: ``header + line_separator + row``.

        Raises:
            InvalidCsvSourceError: If no source object is bound.
        """
        if self._source is None:
            raise InvalidCsvSourceError()
        columns = self.supported_fields()
        header = self._separator.join(f.name for f in columns)
        row = self._separator.join(self._render_cell(f) for f in columns)
        logger.trace("Built %d column(s) for %s", len(columns), type(self._source).__qualname__)
        return f"{header}{self._line_separator}{row}"

    def __repr__(self) -> str:
        bound = type(self._source).__qualname__ if self._source is not None else None
        return f"EasyCSV(source={bound}, separator={self._separator!r})"
