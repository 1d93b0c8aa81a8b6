"""
Value parser - the token value mini-language.

Grammar:
    value := <key> "palette"
           | <number> <unit>
    unit  := one of the aliases in UNIT_ALIASES (may span two words,
             e.g. "inner gutter")

Examples:
    parse_value("black palette")  -> PaletteRef("black")
    parse_value("1 rem")          -> Rem(1)
    parse_value("2 inner gutter") -> InnerGutter(2)
"""

from __future__ import annotations

import math
from decimal import Decimal

from chuk_mcp_theme.constants import (
    INNER_GUTTER_VAR,
    PALETTE_KEYWORD,
    SPACE_BASE_VAR,
    UNIT_ALIASES,
)
from chuk_mcp_theme.errors import ParseError
from chuk_mcp_theme.models.value import (
    NUMERIC_NODES,
    Absolute,
    Base,
    Em,
    InnerGutter,
    PaletteRef,
    Px,
    Rem,
    ValueNode,
)


def parse_value(value: str) -> ValueNode:
    """
    Parse a theme value string into a ValueNode.

    Args:
        value: Raw token value, e.g. "black palette" or "1.5 em"

    Returns:
        The typed value node

    Raises:
        ParseError: If the first part is not a number or the unit is unknown
    """
    parts = value.strip().split()

    # Palette references skip numeric parsing entirely
    if len(parts) > 1 and parts[1] == PALETTE_KEYWORD:
        return PaletteRef(ref=parts[0])

    number = _parse_number(parts[0]) if parts else None
    if number is None:
        raise ParseError(
            f'Invalid value: "{value}". First part must be a number.',
            value=value,
        )

    unit = " ".join(parts[1:])
    kind = UNIT_ALIASES.get(unit)
    if kind is None:
        valid = ", ".join([*UNIT_ALIASES, PALETTE_KEYWORD])
        raise ParseError(f'Unknown unit: "{unit}". Valid units: {valid}', value=value)

    return NUMERIC_NODES[kind](value=number)


def resolve_value_node(node: ValueNode) -> str:
    """
    Resolve a value node to a CSS variable reference or literal.

    Raises:
        TypeError: For an object that is not a known value node
    """
    if isinstance(node, PaletteRef):
        return f"var(--color-{node.ref})"
    if isinstance(node, Px):
        return f"{format_number(node.value)}px"
    if isinstance(node, Rem):
        return f"{format_number(node.value)}rem"
    if isinstance(node, Em):
        return f"{format_number(node.value)}em"
    if isinstance(node, Base):
        return SPACE_BASE_VAR
    if isinstance(node, InnerGutter):
        return INNER_GUTTER_VAR
    if isinstance(node, Absolute):
        return format_number(node.value)
    raise TypeError(f"Unhandled value node: {node!r}")


def format_number(value: float) -> str:
    """
    Render a number the way CSS tooling prints it.

    1 not 1.0, and 1.5 stays 1.5. Exponent form only below 1e-6 or from
    1e21 up, with an explicit sign and no padding: 1e-7, 1e+21.
    """
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))

    text = repr(number)
    if "e" not in text:
        return text
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")

    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _parse_number(token: str) -> float | None:
    """Parse a numeric token, returning None for anything that isn't a finite number."""
    # float() also takes digit separators and spelled-out infinities
    if "_" in token:
        return None
    try:
        number = float(token)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
