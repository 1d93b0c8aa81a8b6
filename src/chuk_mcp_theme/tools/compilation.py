"""
Compilation tools - MCP tools for CSS and Tailwind output.

Tools for parsing token values, validating themes, and generating the
stylesheet and Tailwind config.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_theme.compiler import (
    build_css_variables,
    build_tailwind_config,
    build_tailwind_css,
    build_tailwind_ts,
)
from chuk_mcp_theme.errors import ThemeError
from chuk_mcp_theme.themes import ThemeLoader, validate_theme
from chuk_mcp_theme.tokens import parse_value, resolve_value_node

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_compilation_tools(
    mcp: ChukMCPServer,
    loader: ThemeLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register compilation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The theme loader
        output_dir: Directory for generated files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def not_found(name: str) -> str:
        return json.dumps({"status": "error", "message": f"Theme not found: {name}"})

    @mcp.tool  # type: ignore[arg-type]
    async def theme_parse_value(value: str) -> str:
        """
        Parse a token value string.

        Accepts "<key> palette" references and "<number> <unit>" values
        (px, rem, em, base, innerGutter, absolute and their aliases).

        Args:
            value: Token value, e.g. "1.5 em" or "black palette"

        Returns:
            JSON string with the value kind and its CSS form

        Example:
            theme_parse_value(value="16 px")
        """
        try:
            node = parse_value(value)
            return json.dumps(
                {
                    "status": "success",
                    "kind": node.kind.value,
                    "css": resolve_value_node(node),
                }
            )
        except ThemeError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_parse_value"] = theme_parse_value

    @mcp.tool  # type: ignore[arg-type]
    async def theme_validate(name: str) -> str:
        """
        Validate a theme.

        Reports broken palette references, light/dark key mismatches
        and unused colors.

        Args:
            name: Theme name

        Returns:
            JSON string with validity and issues

        Example:
            theme_validate(name="demo")
        """
        try:
            theme = loader.get_theme(name)
            if theme is None:
                return not_found(name)

            result = validate_theme(theme)
            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "issues": [issue.to_dict() for issue in result.issues],
                }
            )
        except Exception as e:
            logger.exception("Failed to validate theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_validate"] = theme_validate

    @mcp.tool  # type: ignore[arg-type]
    async def theme_build_css(name: str) -> str:
        """
        Generate the CSS variables for a theme.

        Args:
            name: Theme name

        Returns:
            JSON string containing the stylesheet

        Example:
            theme_build_css(name="demo")
        """
        try:
            theme = loader.get_theme(name)
            if theme is None:
                return not_found(name)

            return json.dumps({"status": "success", "css": build_css_variables(theme)})
        except ThemeError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build CSS")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_build_css"] = theme_build_css

    @mcp.tool  # type: ignore[arg-type]
    async def theme_build_tailwind_config(name: str) -> str:
        """
        Generate the Tailwind variable-reference config for a theme.

        Args:
            name: Theme name

        Returns:
            JSON string with colors, spacing, sizes and zIndex

        Example:
            theme_build_tailwind_config(name="demo")
        """
        try:
            theme = loader.get_theme(name)
            if theme is None:
                return not_found(name)

            config = build_tailwind_config(theme)
            return json.dumps({"status": "success", "config": config.to_dict()})
        except Exception as e:
            logger.exception("Failed to build Tailwind config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_build_tailwind_config"] = theme_build_tailwind_config

    @mcp.tool  # type: ignore[arg-type]
    async def theme_generate(
        name: str,
        css_name: str | None = None,
        ts_name: str | None = None,
    ) -> str:
        """
        Write the CSS and TypeScript artifacts for a theme.

        Files go to the output directory.

        Args:
            name: Theme name
            css_name: Optional CSS filename (default: <name>.css)
            ts_name: Optional TypeScript filename (default: <name>-tailwind.ts)

        Returns:
            JSON string with the written paths

        Example:
            theme_generate(name="demo")
        """
        try:
            theme = loader.get_theme(name)
            if theme is None:
                return not_found(name)

            css_path = build_tailwind_css(theme, css_name or f"{name}.css", output_dir)
            ts_path = build_tailwind_ts(theme, ts_name or f"{name}-tailwind.ts", output_dir)

            return json.dumps(
                {
                    "status": "success",
                    "css_path": str(css_path),
                    "ts_path": str(ts_path),
                }
            )
        except ThemeError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate theme files")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_generate"] = theme_generate

    return tools
