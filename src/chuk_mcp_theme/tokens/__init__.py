"""
Design token value language.

Two deliberately separate paths:
- parser: strict grammar turning "1.5 em" / "black palette" into value nodes
- resolver: loose substring check on raw strings, used for validation and CSS output
"""

from chuk_mcp_theme.tokens.parser import format_number, parse_value, resolve_value_node
from chuk_mcp_theme.tokens.resolver import (
    is_palette_reference,
    palette_ref_key,
    resolve_css_value,
    resolve_node,
    validate_palette_references,
    validate_theme_palette_references,
)

__all__ = [
    "format_number",
    "is_palette_reference",
    "palette_ref_key",
    "parse_value",
    "resolve_css_value",
    "resolve_node",
    "resolve_value_node",
    "validate_palette_references",
    "validate_theme_palette_references",
]
