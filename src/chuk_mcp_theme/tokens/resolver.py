"""
Reference resolver - palette lookups on raw token strings.

This path works on raw strings with a substring check, not on parsed
value nodes. Any value containing "palette" is treated as a palette
reference keyed by its first word; everything else passes through, so
literal CSS lengths like "1rem" come out untouched.
"""

from __future__ import annotations

from chuk_mcp_theme.constants import PALETTE_KEYWORD
from chuk_mcp_theme.errors import PaletteReferenceError
from chuk_mcp_theme.models.theme import Theme


def is_palette_reference(value: str) -> bool:
    """Check whether a raw value is treated as a palette reference."""
    return PALETTE_KEYWORD in value


def palette_ref_key(value: str) -> str:
    """Extract the palette key (first word) from a reference string."""
    parts = value.split()
    return parts[0] if parts else ""


def resolve_node(theme: Theme, value: str) -> str:
    """
    Resolve a theme value reference to its actual value.

    Examples:
        resolve_node(theme, "black palette")  # "#000"
        resolve_node(theme, "1rem")           # "1rem"

    Raises:
        PaletteReferenceError: If the referenced color is not in the palette
    """
    if not is_palette_reference(value):
        return value

    ref = palette_ref_key(value)
    palette = theme.base.palette
    if ref not in palette:
        raise PaletteReferenceError(
            f"Palette color \"{ref}\" not found in theme '{theme.name}'",
            ref=ref,
            available=tuple(palette),
        )
    return palette[ref]


def resolve_css_value(theme: Theme, value: str) -> str:
    """
    Resolve a value that might contain theme references.

    Entry point used by the CSS generator for spacing, size, zIndex
    and container values.
    """
    if is_palette_reference(value):
        return resolve_node(theme, value)
    return value


def validate_palette_references(
    theme: Theme,
    value: str,
    field_name: str | None = None,
) -> None:
    """
    Validate that a palette reference in a value exists in the theme.

    Args:
        theme: Theme providing the palette
        value: Raw token value
        field_name: Optional dotted path for the error message (e.g. "light.bg.root")

    Raises:
        PaletteReferenceError: Naming the missing key, the field and the available colors
    """
    if not is_palette_reference(value):
        return

    ref = palette_ref_key(value)
    palette = theme.base.palette
    if ref in palette:
        return

    context = f" in {field_name}" if field_name else ""
    available = tuple(palette)
    raise PaletteReferenceError(
        f'Invalid palette reference "{ref}"{context}. Available colors: {", ".join(available)}',
        ref=ref,
        field_name=field_name,
        available=available,
    )


def validate_theme_palette_references(theme: Theme) -> None:
    """
    Validate every palette reference in a theme, stopping at the first failure.

    Checks light.bg, dark.bg, base.spacing and base.size, in that order.
    """
    sections: list[tuple[str, dict[str, str]]] = [
        ("light.bg", theme.light.bg),
        ("dark.bg", theme.dark.bg),
        ("base.spacing", theme.base.spacing),
        ("base.size", theme.base.size),
    ]
    for prefix, tokens in sections:
        for field, value in tokens.items():
            validate_palette_references(theme, value, f"{prefix}.{field}")
