#!/usr/bin/env python3
"""
Theme generator command line.

Compiles a theme into the CSS variables file and the Tailwind
TypeScript config:

    chuk-theme-generate                          # built-in demo theme
    chuk-theme-generate --theme slate
    chuk-theme-generate --theme ./brand.yaml --css app/theme.css
    chuk-theme-generate --theme slate --check    # validate only
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chuk_mcp_theme.compiler import build_tailwind_css, build_tailwind_ts
from chuk_mcp_theme.constants import DEFAULT_CSS_PATH, DEFAULT_THEME_NAME, DEFAULT_TS_PATH
from chuk_mcp_theme.errors import ThemeError
from chuk_mcp_theme.models.theme import Theme
from chuk_mcp_theme.themes import ThemeLoader, ValidationSeverity, validate_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-theme-generate",
        description="Generate CSS variables and Tailwind config from a theme",
    )
    parser.add_argument(
        "--theme",
        default=DEFAULT_THEME_NAME,
        help=f"Theme name or path to a theme YAML file (default: {DEFAULT_THEME_NAME})",
    )
    parser.add_argument(
        "--themes-dir",
        type=Path,
        default=Path("themes"),
        help="Project themes directory searched before the library (default: ./themes)",
    )
    parser.add_argument(
        "--css",
        default=DEFAULT_CSS_PATH,
        help=f"CSS output path (default: {DEFAULT_CSS_PATH})",
    )
    parser.add_argument(
        "--ts",
        default=DEFAULT_TS_PATH,
        help=f"TypeScript output path (default: {DEFAULT_TS_PATH})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the theme and report issues without writing files",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def load_theme(name_or_path: str, themes_dir: Path) -> Theme:
    """
    Load a theme by file path or by name.

    Raises:
        ThemeError: If the file is invalid or no theme has that name
    """
    loader = ThemeLoader(project_path=themes_dir)

    path = Path(name_or_path)
    if path.suffix in (".yaml", ".yml") or path.is_file():
        return loader.load_file(path)

    theme = loader.get_theme(name_or_path)
    if theme is None:
        available = ", ".join(t.name for t in loader.list_themes())
        raise ThemeError(f"Theme not found: {name_or_path}. Available themes: {available}")
    return theme


def check_theme(theme: Theme) -> bool:
    """Log a validation report; return True when the theme has no errors."""
    result = validate_theme(theme)
    for issue in result.issues:
        if issue.severity == ValidationSeverity.ERROR:
            logger.error(str(issue))
        elif issue.severity == ValidationSeverity.WARNING:
            logger.warning(str(issue))
        else:
            logger.debug(str(issue))

    if result.is_valid:
        logger.info(f"Theme '{theme.name}' is valid ({len(result.warnings)} warnings)")
    return result.is_valid


def main(argv: list[str] | None = None) -> int:
    """Run the generator; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    css_path: Path | None = None
    try:
        theme = load_theme(args.theme, args.themes_dir)

        if args.check:
            return 0 if check_theme(theme) else 1

        logger.info(f"Generating theme files for '{theme.name}'")
        css_path = build_tailwind_css(theme, args.css)
        build_tailwind_ts(theme, args.ts)
    except (ThemeError, OSError) as e:
        # The stylesheet and the config are produced together or not at all
        if css_path is not None:
            css_path.unlink(missing_ok=True)
        logger.error(f"Theme generation failed: {e}")
        return 1

    logger.info("Theme generation completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
