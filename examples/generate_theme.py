#!/usr/bin/env python3
"""
Example: Compiling a theme to CSS and Tailwind config.

Loads the built-in demo theme, validates it, and writes the stylesheet
and TypeScript config into a temporary directory.

Usage:
    python examples/generate_theme.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_theme.compiler import build_tailwind_config, build_tailwind_css, build_tailwind_ts
from chuk_mcp_theme.themes import ThemeLoader, validate_theme


def main() -> None:
    """Demonstrate theme compilation."""
    print("CHUK Theme Compiler Demo")
    print("=" * 40)
    print()

    loader = ThemeLoader()

    print("Available themes:")
    for meta in loader.list_themes():
        print(f"  {meta.name}: {meta.palette_size} colors, semantic {', '.join(meta.semantic_colors)}")
    print()

    theme = loader.get_theme("demo")
    if not theme:
        print("Failed to load theme")
        return

    print(validate_theme(theme))
    print()

    config = build_tailwind_config(theme)
    print("Tailwind colors:")
    for key, ref in config.colors.items():
        print(f"  {key}: {ref}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        css_path = build_tailwind_css(theme, "styles/theme.css", Path(tmp))
        ts_path = build_tailwind_ts(theme, "lib/generated/tailwind-theme.ts", Path(tmp))

        print(f"Wrote {css_path.name}:")
        print(css_path.read_text())
        print()
        print(f"Wrote {ts_path.name} ({len(ts_path.read_text())} bytes)")


if __name__ == "__main__":
    main()
