"""
MCP tool implementations.

Tools are organized by domain:
- themes - Theme discovery and project copies
- compilation - Value parsing, validation, CSS/Tailwind output
"""

from chuk_mcp_theme.tools.compilation import register_compilation_tools
from chuk_mcp_theme.tools.themes import register_theme_tools

__all__ = [
    "register_compilation_tools",
    "register_theme_tools",
]
