"""
Compilation pipeline - transforms a theme into build artifacts.

The pipeline:
    Theme YAML → Theme (in-memory)
    → validation (palette references)
    → CSS custom properties (:root / .dark / @theme)
    → Tailwind variable-reference config (dict / TypeScript)
"""

from chuk_mcp_theme.compiler.css import build_css_variables
from chuk_mcp_theme.compiler.tailwind import build_tailwind_config
from chuk_mcp_theme.compiler.writer import (
    build_tailwind_css,
    build_tailwind_ts,
    generate_tailwind_config,
    generate_theme_css,
    render_tailwind_ts,
)

__all__ = [
    "build_css_variables",
    "build_tailwind_config",
    "build_tailwind_css",
    "build_tailwind_ts",
    "generate_tailwind_config",
    "generate_theme_css",
    "render_tailwind_ts",
]
