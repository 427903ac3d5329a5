# topmark:header:start
#
#   project      : EasyCSV
#   file         : sample_models.py
#   file_relpath : tests/sample_models.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source types shared by the test suite (also used as CLI render targets).

Types live at module level so their annotations resolve through
`typing.get_type_hints`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Optional

from easycsv.formatters.base import BaseFormatter
from easycsv.formatters.builtins import DecimalFormatter


class Money:
    """A currency amount; rendered by `MoneyFormatter`."""

    def __init__(self, amount: float | Decimal) -> None:
        self.amount = amount

    def __repr__(self) -> str:
        return f"Money({self.amount!r})"


class Coins(Money):
    """A `Money` subtype with no formatter of its own."""


class MoneyFormatter(BaseFormatter):
    """Fixed-point money; delegates the pattern to `DecimalFormatter`."""

    default_pattern = "0.00"
    description = "Money amount"

    def format(self, value: Any, pattern: str) -> str:
        return DecimalFormatter().format(value.amount, pattern)


class ExplodingFormatter(BaseFormatter):
    """A formatter that always fails."""

    def format(self, value: Any, pattern: str) -> str:
        raise RuntimeError("formatter exploded")


@dataclass
class Flags:
    id: int
    active: bool


@dataclass
class Labeled:
    id: int
    label: str


@dataclass
class Invoice:
    amount: Money


@dataclass
class Priced:
    sku: int
    price: Money
    tax: Money


class Empty:
    """No declared attributes."""


class Vault:
    """One readable attribute, one sealed attribute, one unset attribute."""

    id: int
    pin: int
    balance: float
    missing: int

    def __init__(self) -> None:
        self.id = 7
        self.balance = 2.5

    @property  # type: ignore[no-redef]
    def pin(self) -> int:
        raise PermissionError("pin is sealed")


@dataclass
class Base:
    a: int
    b: float


@dataclass
class Child(Base):
    c: bool = False


class Plain:
    """A non-dataclass with private, class-level and unset attributes."""

    counter: ClassVar[int] = 0
    _secret: int
    visible: float
    note: Optional[int]
    tags: list[str]

    def __init__(self) -> None:
        self._secret = 3
        self.visible = 1.25
        self.note = None
        self.tags = ["x"]


class Forward:
    """References a name that does not exist anywhere."""

    known: int
    unknown: UndefinedType  # type: ignore[name-defined]  # noqa: F821

    def __init__(self) -> None:
        self.known = 5
        self.unknown = object()


@dataclass
class Numbers:
    whole: int
    ratio: float
    wave: complex
    flag: bool
    extras: dict[str, int] = field(default_factory=dict)


def make_flags() -> Flags:
    """Factory used by the CLI tests."""
    return Flags(id=42, active=True)


def make_labeled() -> Labeled:
    """Factory with a text attribute (needs the builtin text formatter)."""
    return Labeled(id=1, label="x")


def make_none() -> None:
    """Factory returning no object (CLI error path)."""
    return None


def make_broken() -> Flags:
    """Factory that fails while building its object."""
    raise RuntimeError("database unavailable")


SAMPLE_INVOICE = Invoice(amount=Money(19.5))


class Partial:
    """Mixes resolvable and unresolvable annotations."""

    amount: Optional[Money]
    flags: Flags
    ghost: MissingType  # type: ignore[name-defined]  # noqa: F821

    def __init__(self) -> None:
        self.amount = Money(1)
        self.flags = Flags(id=1, active=True)
        self.ghost = None
