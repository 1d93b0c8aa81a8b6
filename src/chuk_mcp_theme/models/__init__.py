"""
Pydantic models and value nodes for the theme system.

This module provides:
- Theme: Complete design-token definition
- ThemeBaseTokens: palette, spacing, size, zIndex, container
- ThemeModeTokens: light/dark semantic backgrounds
- TailwindThemeConfig: Tailwind variable-reference mapping
- ValueNode: Parsed token value variants
"""

from chuk_mcp_theme.models.theme import (
    TailwindThemeConfig,
    Theme,
    ThemeBaseTokens,
    ThemeMetadata,
    ThemeModeTokens,
)
from chuk_mcp_theme.models.value import (
    Absolute,
    Base,
    Em,
    InnerGutter,
    PaletteRef,
    Px,
    Rem,
    ValueNode,
)

__all__ = [
    "Absolute",
    "Base",
    "Em",
    "InnerGutter",
    "PaletteRef",
    "Px",
    "Rem",
    "TailwindThemeConfig",
    "Theme",
    "ThemeBaseTokens",
    "ThemeMetadata",
    "ThemeModeTokens",
    "ValueNode",
]
