#!/usr/bin/env python3
"""
Async Theme MCP Server using chuk-mcp-server

This server exposes the design-token compiler as MCP tools. A theme is
a YAML file holding a palette, spacing/size/zIndex/container scales and
light/dark semantic backgrounds; the server compiles it to CSS custom
properties and a Tailwind variable-reference config.

The server provides tools for:
- Listing, describing and copying themes
- Parsing token values ("1.5 em", "black palette")
- Validating palette references
- Generating CSS and Tailwind artifacts
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theme.themes import ThemeLoader
from chuk_mcp_theme.tools import register_compilation_tools, register_theme_tools

logger = logging.getLogger(__name__)

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = BASE_PATH / "themes"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "themes" / "library"


def create_server(
    themes_dir: Path = THEMES_DIR,
    output_dir: Path = OUTPUT_DIR,
    library_path: Path = LIBRARY_PATH,
) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Build the MCP server with every theme tool registered.

    Args:
        themes_dir: Project themes directory (overrides the library)
        output_dir: Directory for generated CSS/TypeScript
        library_path: Built-in theme library

    Returns:
        The server and a name -> tool function mapping
    """
    mcp = ChukMCPServer("chuk-mcp-theme")
    loader = ThemeLoader(library_path=library_path, project_path=themes_dir)

    tools: dict[str, Any] = {}
    tools.update(register_theme_tools(mcp, loader))
    tools.update(register_compilation_tools(mcp, loader, output_dir))

    logger.info("CHUK Theme MCP Server initialized")
    logger.info(f"  Library path: {library_path}")
    logger.info(f"  Themes dir: {themes_dir}")
    logger.info(f"  Output dir: {output_dir}")
    logger.debug(f"  Tools: {', '.join(sorted(tools))}")

    return mcp, tools
