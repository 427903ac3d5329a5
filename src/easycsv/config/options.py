# topmark:header:start
#
#   project      : EasyCSV
#   file         : options.py
#   file_relpath : src/easycsv/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering options and their TOML loader.

Options are immutable (`CsvOptions`); use `MutableCsvOptions` to stage edits and
`freeze()` the result. ``thaw()`` goes the other way.

Options can be read from ``easycsv.toml`` (top-level keys) or from the
``[tool.easycsv]`` table of ``pyproject.toml``:

```toml
[tool.easycsv]
separator = ";"
line_separator = "\\n"

[tool.easycsv.patterns]
amount = "0"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Mapping, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from easycsv.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from easycsv.config.logging import EasyCSVLogger

logger: EasyCSVLogger = get_logger(__name__)

DEFAULT_SEPARATOR: Final[str] = ","
DEFAULT_LINE_SEPARATOR: Final[str] = "\n"

KEY_SEPARATOR: Final[str] = "separator"
KEY_LINE_SEPARATOR: Final[str] = "line_separator"
KEY_PATTERNS: Final[str] = "patterns"

PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "easycsv")


def validate_separator(value: object, *, key: str = KEY_SEPARATOR) -> str:
    """Return ``value`` if it is a non-empty string.

    Raises:
        ValueError: If ``value`` is empty or not a string.
    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True)
class CsvOptions:
    """Immutable rendering options.

    Attributes:
        separator (str): Token delimiter between columns.
        line_separator (str): Break between the header line and the data line.
        patterns (Mapping[str, str]): Initial per-attribute pattern overrides.
    """

    separator: str = DEFAULT_SEPARATOR
    line_separator: str = DEFAULT_LINE_SEPARATOR
    patterns: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def thaw(self) -> MutableCsvOptions:
        """Return a mutable copy of these options."""
        return MutableCsvOptions(
            separator=self.separator,
            line_separator=self.line_separator,
            patterns=dict(self.patterns),
        )


@dataclass
class MutableCsvOptions:
    """Mutable builder for `CsvOptions`."""

    separator: str = DEFAULT_SEPARATOR
    line_separator: str = DEFAULT_LINE_SEPARATOR
    patterns: dict[str, str] = field(default_factory=dict)

    def merge_mapping(self, data: Mapping[str, Any], *, origin: str = "<mapping>") -> None:
        """Apply the recognized keys of ``data``; unknown keys are logged and ignored.

        Raises:
            ValueError: If a separator is empty or patterns are not a string table.
        """
        for key, value in data.items():
            if key == KEY_SEPARATOR:
                self.separator = validate_separator(value, key=key)
            elif key == KEY_LINE_SEPARATOR:
                self.line_separator = validate_separator(value, key=key)
            elif key == KEY_PATTERNS:
                if not isinstance(value, Mapping):
                    raise ValueError(f"'{KEY_PATTERNS}' must be a table, got {value!r}")
                for name, pattern in cast("Mapping[object, object]", value).items():
                    if not isinstance(pattern, str):
                        raise ValueError(f"Pattern for '{name}' must be a string")
                    self.patterns[str(name)] = pattern
            else:
                logger.warning("Ignoring unknown option '%s' in %s", key, origin)

    def freeze(self) -> CsvOptions:
        """Return an immutable snapshot of these options."""
        return CsvOptions(
            separator=validate_separator(self.separator, key=KEY_SEPARATOR),
            line_separator=validate_separator(self.line_separator, key=KEY_LINE_SEPARATOR),
            patterns=MappingProxyType(dict(self.patterns)),
        )


def options_from_mapping(data: Mapping[str, Any], *, origin: str = "<mapping>") -> CsvOptions:
    """Build `CsvOptions` from defaults overlaid with ``data``."""
    draft = MutableCsvOptions()
    draft.merge_mapping(data, origin=origin)
    return draft.freeze()


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
    return {}


def load_options(path: Path) -> CsvOptions:
    """Load options from ``easycsv.toml`` or the ``[tool.easycsv]`` table of ``pyproject.toml``.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        CsvOptions: Defaults overlaid with the file's settings. Unreadable files
            and a missing ``[tool.easycsv]`` section yield the defaults.

    Raises:
        ValueError: If the file holds invalid option values.
    """
    logger.debug("Loading options from %s", path)
    data: dict[str, Any] = load_toml_dict(path)

    if path.name == "pyproject.toml":
        section: Any = data
        for key in PYPROJECT_SECTION:
            section = section.get(key, {}) if isinstance(section, dict) else {}
        if not section:
            logger.info("[tool.easycsv] section missing in %s; using defaults", path)
        data = cast("dict[str, Any]", section) if isinstance(section, dict) else {}

    return options_from_mapping(data, origin=str(path))
