"""
Theme models - the design-token source of truth.

A theme is five base token categories plus light and dark semantic
background mappings. The models only describe structure; palette
references are checked by the validator, not here, so that a Tailwind
config can still be derived from a theme with broken references.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theme.constants import BASE_CATEGORIES, SCHEMA_VERSION


def _coerce_token_map(value: Any) -> Any:
    """Stringify numeric keys and values coming from YAML (zIndex: {modal: 10})."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        return value

    def stringify(item: Any) -> Any:
        if isinstance(item, bool):
            return item
        if isinstance(item, int | float):
            return str(item)
        return item

    return {stringify(k): stringify(v) for k, v in value.items()}


class ThemeBaseTokens(BaseModel):
    """
    Base tokens that define the core design system.

    Every category maps a token name to a raw value string. Insertion
    order is preserved and drives output order. Unknown categories are
    kept as extras and ignored by both generators.
    """

    palette: dict[str, str] = Field(
        default_factory=dict,
        description="Color name to literal CSS color (e.g. '#0070f3')",
    )
    spacing: dict[str, str] = Field(
        default_factory=dict,
        description="Spacing scale (e.g. 'sm': '0.5rem')",
    )
    size: dict[str, str] = Field(
        default_factory=dict,
        description="Size scale (e.g. 'small': '2rem')",
    )
    z_index: dict[str, str] = Field(
        default_factory=dict,
        alias="zIndex",
        description="Stacking order (e.g. 'modal': '10')",
    )
    container: dict[str, str] = Field(
        default_factory=dict,
        description="Container breakpoints (e.g. 'md': '64rem')",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    @field_validator("palette", "spacing", "size", "z_index", "container", mode="before")
    @classmethod
    def coerce_tokens(cls, v: Any) -> Any:
        """Accept numeric YAML scalars as token names and values."""
        return _coerce_token_map(v)

    def iter_categories(self) -> Iterator[tuple[str, dict[str, str]]]:
        """
        Yield (category, tokens) pairs using the wire category names.

        Declared categories come first in BASE_CATEGORIES order, whatever
        order the YAML lists them in, followed by any extra mapping-valued
        categories in declaration order.
        """
        declared = {
            field.alias or name: getattr(self, name)
            for name, field in type(self).model_fields.items()
        }
        for category in BASE_CATEGORIES:
            yield category, declared[category]

        for name, tokens in (self.model_extra or {}).items():
            if isinstance(tokens, dict):
                yield name, tokens


class ThemeModeTokens(BaseModel):
    """Mode-specific tokens for light/dark mode."""

    bg: dict[str, str] = Field(
        default_factory=dict,
        description="Semantic name to palette reference (e.g. 'surface': 'gray palette')",
    )

    model_config = {"frozen": True}

    @field_validator("bg", mode="before")
    @classmethod
    def coerce_bg(cls, v: Any) -> Any:
        """Accept numeric YAML scalars as semantic names."""
        return _coerce_token_map(v)


class Theme(BaseModel):
    """
    Complete theme definition.

    Immutable value handed whole to the generators.
    """

    schema_version: str = Field(SCHEMA_VERSION, alias="schema")
    name: str = Field(..., description="Theme identifier (informational)")
    description: str = Field("", description="Theme description")

    base: ThemeBaseTokens = Field(default_factory=ThemeBaseTokens)
    light: ThemeModeTokens = Field(default_factory=ThemeModeTokens)
    dark: ThemeModeTokens = Field(default_factory=ThemeModeTokens)

    model_config = {"frozen": True, "populate_by_name": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        base: dict[str, Any] = {
            category: dict(tokens) for category, tokens in self.base.iter_categories()
        }
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "base": base,
            "light": {"bg": dict(self.light.bg)},
            "dark": {"bg": dict(self.dark.bg)},
        }


class TailwindThemeConfig(BaseModel):
    """
    Tailwind theme config - symbolic variable references per bucket.

    Values are never resolved; each is a var(--<category>-<key>) string.
    """

    colors: dict[str, str] = Field(default_factory=dict)
    spacing: dict[str, str] = Field(default_factory=dict)
    sizes: dict[str, str] = Field(default_factory=dict)
    z_index: dict[str, str] = Field(default_factory=dict, alias="zIndex")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to the wire shape: colors, spacing, sizes, zIndex."""
        return {
            "colors": dict(self.colors),
            "spacing": dict(self.spacing),
            "sizes": dict(self.sizes),
            "zIndex": dict(self.z_index),
        }


class ThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    name: str
    description: str
    palette_size: int
    semantic_colors: tuple[str, ...]

    model_config = {"frozen": True}

    @classmethod
    def from_theme(cls, theme: Theme) -> ThemeMetadata:
        """Create metadata from a theme."""
        return cls(
            name=theme.name,
            description=theme.description,
            palette_size=len(theme.base.palette),
            semantic_colors=tuple(theme.light.bg),
        )
