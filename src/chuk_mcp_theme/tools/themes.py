"""
Theme tools - MCP tools for theme discovery.

Tools for listing themes, getting theme details, and copying library
themes into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theme.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theme_tools(
    mcp: ChukMCPServer,
    loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register theme discovery tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theme_list_themes() -> str:
        """
        List available themes.

        Returns all themes from the library and project with
        basic metadata.

        Returns:
            JSON string with list of theme summaries

        Example:
            theme_list_themes()
        """
        try:
            themes = loader.list_themes()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "name": t.name,
                            "description": t.description,
                            "palette_size": t.palette_size,
                            "semantic_colors": list(t.semantic_colors),
                        }
                        for t in themes
                    ],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_list_themes"] = theme_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def theme_describe_theme(name: str) -> str:
        """
        Get the full token set of a theme.

        Returns the palette, scales and light/dark semantic mappings
        exactly as defined.

        Args:
            name: Theme name

        Returns:
            JSON string with theme details

        Example:
            theme_describe_theme(name="demo")
        """
        try:
            theme = loader.get_theme(name)
            if theme is None:
                return json.dumps({"status": "error", "message": f"Theme not found: {name}"})

            return json.dumps({"status": "success", "theme": theme.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_describe_theme"] = theme_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def theme_copy_theme_to_project(name: str) -> str:
        """
        Copy a library theme into the project for customization.

        The project copy takes precedence over the library version.

        Args:
            name: Theme name

        Returns:
            JSON string with the path of the copied file

        Example:
            theme_copy_theme_to_project(name="slate")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": f"Theme not found in library: {name}"}
                )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": f"Copied '{name}' to project",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_copy_theme_to_project"] = theme_copy_theme_to_project

    return tools
