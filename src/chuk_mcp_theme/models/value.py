"""
Value nodes - the parsed form of a base token value string.

A closed set of variants. Anything that turns a node into text must
handle every variant explicitly and fail loudly on an unknown one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_theme.constants import ValueKind


@dataclass(frozen=True)
class PaletteRef:
    """Reference to a named palette color: "black palette"."""

    ref: str

    kind: ClassVar[ValueKind] = ValueKind.PALETTE


@dataclass(frozen=True)
class Px:
    """Absolute length in pixels."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.PX


@dataclass(frozen=True)
class Rem:
    """Length relative to the root font size."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.REM


@dataclass(frozen=True)
class Em:
    """Length relative to the parent font size."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.EM


@dataclass(frozen=True)
class Base:
    """Multiple of the base spacing unit."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.BASE


@dataclass(frozen=True)
class InnerGutter:
    """Multiple of the inner gutter."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.INNER_GUTTER


@dataclass(frozen=True)
class Absolute:
    """Unitless number (z-index, line-height, opacity)."""

    value: float

    kind: ClassVar[ValueKind] = ValueKind.ABSOLUTE


ValueNode = PaletteRef | Px | Rem | Em | Base | InnerGutter | Absolute

# Numeric variants by kind, used by the parser's alias table
NUMERIC_NODES: dict[ValueKind, type[Px | Rem | Em | Base | InnerGutter | Absolute]] = {
    ValueKind.PX: Px,
    ValueKind.REM: Rem,
    ValueKind.EM: Em,
    ValueKind.BASE: Base,
    ValueKind.INNER_GUTTER: InnerGutter,
    ValueKind.ABSOLUTE: Absolute,
}
