"""
Theme writers - persist generated CSS and Tailwind config.

Text is always generated before the filesystem is touched, so a theme
that fails validation leaves no file or directory behind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from chuk_mcp_theme.compiler.css import build_css_variables
from chuk_mcp_theme.compiler.tailwind import build_tailwind_config
from chuk_mcp_theme.models.theme import TailwindThemeConfig, Theme

logger = logging.getLogger(__name__)

TS_HEADER = "// Auto-generated from theme tokens\n// Do not edit manually\n"


def generate_theme_css(theme: Theme) -> str:
    """Generate theme CSS variables without writing to a file."""
    return build_css_variables(theme)


def generate_tailwind_config(theme: Theme) -> TailwindThemeConfig:
    """Generate the Tailwind config object without writing to a file."""
    return build_tailwind_config(theme)


def render_tailwind_ts(theme: Theme) -> str:
    """
    Render the Tailwind config as a TypeScript module.

    The module exports a single `themeTailwind` const usable from
    tailwind.config.ts.
    """
    config = build_tailwind_config(theme).to_dict()
    body = json.dumps(config, indent=2, ensure_ascii=False)
    return f"{TS_HEADER}\nexport const themeTailwind = {body} as const;\n"


def build_tailwind_css(theme: Theme, output_path: str | Path, base_dir: Path | None = None) -> Path:
    """
    Generate and write theme CSS variables to a file.

    Args:
        theme: Theme configuration
        output_path: Destination, relative paths resolve against base_dir
        base_dir: Directory for relative paths (default: current directory)

    Returns:
        Absolute path of the written file
    """
    css = build_css_variables(theme)
    full_path = _write_text(css, output_path, base_dir)
    logger.info(f"Generated CSS variables at {full_path}")
    return full_path


def build_tailwind_ts(theme: Theme, output_path: str | Path, base_dir: Path | None = None) -> Path:
    """
    Generate and write the Tailwind theme config as TypeScript.

    Args:
        theme: Theme configuration
        output_path: Destination, relative paths resolve against base_dir
        base_dir: Directory for relative paths (default: current directory)

    Returns:
        Absolute path of the written file
    """
    content = render_tailwind_ts(theme)
    full_path = _write_text(content, output_path, base_dir)
    logger.info(f"Generated Tailwind config at {full_path}")
    return full_path


def _write_text(text: str, output_path: str | Path, base_dir: Path | None) -> Path:
    """Write text to a path, creating parent directories as needed."""
    full_path = ((base_dir or Path.cwd()) / Path(output_path)).resolve()
    full_path.parent.mkdir(parents=True, exist_ok=True)
    full_path.write_text(text, encoding="utf-8")
    return full_path
