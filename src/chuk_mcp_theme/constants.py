"""
Constants and enums for the theme system.

No magic strings - use enums and module-level tables for constrained values.
"""

from enum import Enum


class ValueKind(str, Enum):
    """Kinds of parsed token values."""

    PALETTE = "palette"
    PX = "px"
    REM = "rem"
    EM = "em"
    BASE = "base"
    INNER_GUTTER = "innerGutter"
    ABSOLUTE = "absolute"


# Keyword marking a palette reference: "<key> palette"
PALETTE_KEYWORD = "palette"

# Unit aliases accepted by the value grammar (case-sensitive, many-to-one)
UNIT_ALIASES: dict[str, ValueKind] = {
    "px": ValueKind.PX,
    "pixel": ValueKind.PX,
    "pixels": ValueKind.PX,
    "rem": ValueKind.REM,
    "root": ValueKind.REM,
    "em": ValueKind.EM,
    "parent": ValueKind.EM,
    "base": ValueKind.BASE,
    "spacing": ValueKind.BASE,
    "innerGutter": ValueKind.INNER_GUTTER,
    "inner gutter": ValueKind.INNER_GUTTER,
    "abs": ValueKind.ABSOLUTE,
    "absolute": ValueKind.ABSOLUTE,
}

# Fixed references emitted for scale-relative values
SPACE_BASE_VAR = "var(--space-base)"
INNER_GUTTER_VAR = "var(--inner-gutter)"

# Base token categories, in the order the generators emit them
BASE_CATEGORIES: tuple[str, ...] = ("palette", "spacing", "size", "zIndex", "container")

# CSS custom-property prefixes used inside the @theme block
CSS_PREFIXES: dict[str, str] = {
    "palette": "color",
    "spacing": "space",
    "size": "size",
    "zIndex": "z",
    "container": "container",
}

# Prefix for per-mode semantic variables (:root / .dark)
MODE_PREFIX = "mode"

# Selectors for the three blocks of the stylesheet
LIGHT_SELECTOR = ":root"
DARK_SELECTOR = ".dark"
THEME_SELECTOR = "@theme"

# Schema version - frozen for v1
SCHEMA_VERSION = "theme/v1"

# Default output destinations for the generator
DEFAULT_CSS_PATH = "./styles/theme.css"
DEFAULT_TS_PATH = "./lib/generated/tailwind-theme.ts"

# Built-in theme used when none is named
DEFAULT_THEME_NAME = "demo"
