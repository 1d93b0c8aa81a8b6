"""
CSS variable generator - theme to custom-property stylesheet.

Output is three blocks, always in this order:

    :root {      light-mode semantic variables (--mode-*)
    }

    .dark {      dark-mode semantic variables (--mode-*)
    }

    @theme {     palette, semantic aliases, spacing, size, z, container
    }

Within each block, lines follow the theme's own insertion order, so the
same theme always produces byte-identical output.
"""

from __future__ import annotations

from chuk_mcp_theme.constants import (
    CSS_PREFIXES,
    DARK_SELECTOR,
    LIGHT_SELECTOR,
    MODE_PREFIX,
    THEME_SELECTOR,
)
from chuk_mcp_theme.models.theme import Theme
from chuk_mcp_theme.tokens.resolver import (
    palette_ref_key,
    resolve_css_value,
    validate_theme_palette_references,
)

INDENT = "  "


def build_css_variables(theme: Theme) -> str:
    """
    Generate CSS variables from a theme definition.

    Args:
        theme: The theme to compile

    Returns:
        The stylesheet text, without trailing newline

    Raises:
        PaletteReferenceError: If any palette reference is broken (nothing is generated)
    """
    validate_theme_palette_references(theme)

    light_lines = _mode_lines(theme.light.bg)
    dark_lines = _mode_lines(theme.dark.bg)
    theme_lines = _theme_lines(theme)

    blocks = [
        _block(LIGHT_SELECTOR, light_lines),
        _block(DARK_SELECTOR, dark_lines),
        _block(THEME_SELECTOR, theme_lines),
    ]
    return "\n\n".join(blocks)


def _mode_lines(bg: dict[str, str]) -> list[str]:
    """One --mode-<key> line per semantic background, pointing at its palette color."""
    color = CSS_PREFIXES["palette"]
    return [
        _declaration(f"{MODE_PREFIX}-{key}", f"var(--{color}-{palette_ref_key(value)})")
        for key, value in bg.items()
    ]


def _theme_lines(theme: Theme) -> list[str]:
    """Build the @theme block body in fixed category order."""
    color = CSS_PREFIXES["palette"]
    lines: list[str] = []

    # Palette colors
    for key, value in theme.base.palette.items():
        lines.append(_declaration(f"{color}-{key}", value))

    # Semantic color aliases (keys shared by both modes)
    for key in theme.light.bg:
        lines.append(_declaration(f"{color}-{key}", f"var(--{MODE_PREFIX}-{key})"))

    # Scales, resolved through the raw-string path
    for category, tokens in theme.base.iter_categories():
        if category == "palette" or category not in CSS_PREFIXES:
            continue
        prefix = CSS_PREFIXES[category]
        for key, value in tokens.items():
            lines.append(_declaration(f"{prefix}-{key}", resolve_css_value(theme, value)))

    return lines


def _declaration(name: str, value: str) -> str:
    return f"{INDENT}--{name}: {value};"


def _block(selector: str, lines: list[str]) -> str:
    body = "\n".join(lines)
    return f"{selector} {{\n{body}\n}}"
