"""
Theme library - loading and checking theme definitions.

This module provides:
- ThemeLoader: YAML discovery across library and project directories
- ThemeValidator: Diagnostic report (references, mode keys, usage)
"""

from chuk_mcp_theme.themes.loader import ThemeLoader
from chuk_mcp_theme.themes.validator import (
    ThemeValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_theme,
)

__all__ = [
    "ThemeLoader",
    "ThemeValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_theme",
]
