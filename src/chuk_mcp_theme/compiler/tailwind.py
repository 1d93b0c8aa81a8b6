"""
Tailwind config generator - theme to variable-reference mapping.

Purely structural: no validation, no resolution. Every base token
becomes var(--<category>-<key>) using the raw category name (palette,
spacing, size, zIndex, container), not the CSS generator's prefixes.
"""

from __future__ import annotations

from chuk_mcp_theme.models.theme import TailwindThemeConfig, Theme


def build_tailwind_config(theme: Theme) -> TailwindThemeConfig:
    """
    Build Tailwind theme configuration from theme tokens.

    Routing:
        palette   -> colors
        spacing   -> spacing
        size      -> sizes
        zIndex    -> zIndex
        container -> sizes, keyed "container-<key>"

    Any other category is ignored.
    """
    colors: dict[str, str] = {}
    spacing: dict[str, str] = {}
    sizes: dict[str, str] = {}
    z_index: dict[str, str] = {}

    for category, tokens in theme.base.iter_categories():
        for key in tokens:
            var_name = f"var(--{category}-{key})"

            if category == "palette":
                colors[key] = var_name
            elif category == "spacing":
                spacing[key] = var_name
            elif category == "size":
                sizes[key] = var_name
            elif category == "zIndex":
                z_index[key] = var_name
            elif category == "container":
                sizes[f"container-{key}"] = var_name

    return TailwindThemeConfig(
        colors=colors,
        spacing=spacing,
        sizes=sizes,
        z_index=z_index,
    )
