"""
Theme loader - discovers and loads theme definitions.

Themes can come from:
1. Built-in library (shipped with package)
2. Project themes (user's project/themes directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_theme.constants import SCHEMA_VERSION
from chuk_mcp_theme.errors import ThemeError
from chuk_mcp_theme.models.theme import Theme, ThemeMetadata

logger = logging.getLogger(__name__)


class ThemeLoader:
    """
    Discovers and loads theme definitions.

    Themes are loaded from YAML files in the library and project directories.
    Project themes override library themes with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theme loader.

        Args:
            library_path: Path to built-in theme library
            project_path: Path to project themes directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Theme] = {}

    def list_themes(self) -> list[ThemeMetadata]:
        """
        List all available themes.

        Returns themes from both library and project, with project
        themes taking precedence.
        """
        themes: dict[str, ThemeMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                theme = self._load_theme_file(path)
                if theme:
                    themes[theme.name] = ThemeMetadata.from_theme(theme)

        return list(themes.values())

    def get_theme(self, name: str) -> Theme | None:
        """
        Get a theme by name.

        Project themes take precedence over library themes.

        Args:
            name: Theme name (file stem)

        Returns:
            Theme if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            theme_file = directory / f"{name}.yaml"
            if theme_file.exists():
                theme = self._load_theme_file(theme_file)
                if theme:
                    self._cache[name] = theme
                    return theme

        return None

    def load_file(self, path: Path) -> Theme:
        """
        Load a theme from a YAML file.

        Raises:
            ThemeError: If the file can't be read or doesn't describe a theme
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ThemeError(f"Cannot read theme file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ThemeError(f"Theme file {path} does not contain a mapping")

        return self.parse_theme(data)

    def parse_theme(self, data: dict[str, Any]) -> Theme:
        """
        Parse a theme from YAML data.

        Raises:
            ThemeError: On an unsupported schema or invalid structure
        """
        schema = data.get("schema", SCHEMA_VERSION)
        if schema != SCHEMA_VERSION:
            raise ThemeError(f"Unsupported theme schema: {schema} (expected {SCHEMA_VERSION})")

        try:
            return Theme.model_validate(data)
        except ValidationError as e:
            raise ThemeError(f"Invalid theme '{data.get('name', 'unknown')}': {e}") from e

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Theme already exists in project: {name}")

        dest_file.write_text(library_file.read_text(encoding="utf-8"), encoding="utf-8")

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def save_to_project(self, theme: Theme) -> Path:
        """
        Save a theme to the project directory as YAML.

        Returns:
            Path to the saved file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{theme.name}.yaml"
        content = yaml.safe_dump(
            theme.to_yaml_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        path.write_text(content, encoding="utf-8")

        self._cache[theme.name] = theme
        return path

    def _load_theme_file(self, path: Path) -> Theme | None:
        """Load a theme, skipping (and logging) files that fail to load."""
        try:
            return self.load_file(path)
        except ThemeError as e:
            logger.warning(f"Skipping theme file {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the theme cache."""
        self._cache.clear()
