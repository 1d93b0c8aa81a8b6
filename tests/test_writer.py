"""
Tests for the CSS and TypeScript file writers.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_theme.compiler import (
    build_css_variables,
    build_tailwind_config,
    build_tailwind_css,
    build_tailwind_ts,
    generate_tailwind_config,
    generate_theme_css,
    render_tailwind_ts,
)
from chuk_mcp_theme.errors import PaletteReferenceError
from chuk_mcp_theme.models import Theme


class TestGenerate:
    """Tests for the in-memory generators."""

    def test_generate_theme_css(self, test_theme: Theme):
        """Test the in-memory stylesheet."""
        assert generate_theme_css(test_theme) == build_css_variables(test_theme)

    def test_generate_tailwind_config(self, test_theme: Theme):
        """Test the in-memory config."""
        assert generate_tailwind_config(test_theme) == build_tailwind_config(test_theme)

    def test_render_tailwind_ts(self, test_theme: Theme):
        """The TS module is a header plus JSON with 'as const'."""
        content = render_tailwind_ts(test_theme)
        assert content.startswith("// Auto-generated from theme tokens\n// Do not edit manually\n\n")
        assert content.endswith(" as const;\n")

        body = content.split("export const themeTailwind = ", 1)[1].rsplit(" as const;", 1)[0]
        config = json.loads(body)
        assert config["spacing"]["sm"] == "var(--spacing-sm)"
        assert config["zIndex"]["modal"] == "var(--zIndex-modal)"
        assert '\n  "colors": {\n    "primary": "var(--palette-primary)",' in content


class TestWriters:
    """Tests for build_tailwind_css and build_tailwind_ts."""

    def test_write_css(self, test_theme: Theme, temp_dir: Path):
        """Test writing the stylesheet."""
        path = build_tailwind_css(test_theme, "styles/theme.css", temp_dir)
        assert path == (temp_dir / "styles" / "theme.css").resolve()
        assert path.read_text(encoding="utf-8") == build_css_variables(test_theme)

    def test_write_ts(self, test_theme: Theme, temp_dir: Path):
        """Test writing the TS config."""
        path = build_tailwind_ts(test_theme, "lib/generated/tailwind-theme.ts", temp_dir)
        assert path.read_text(encoding="utf-8") == render_tailwind_ts(test_theme)

    def test_absolute_path(self, test_theme: Theme, temp_dir: Path):
        """Absolute paths ignore the base directory."""
        target = temp_dir / "abs" / "theme.css"
        assert build_tailwind_css(test_theme, target) == target.resolve()
        assert target.exists()

    def test_relative_to_cwd(self, test_theme: Theme, temp_dir: Path, monkeypatch):
        """Relative paths resolve against the working directory."""
        monkeypatch.chdir(temp_dir)
        path = build_tailwind_css(test_theme, "./styles/theme.css")
        assert path == (temp_dir / "styles" / "theme.css").resolve()

    def test_nothing_written_on_failure(self, broken_theme: Theme, temp_dir: Path):
        """Validation failures leave no file or directory."""
        with pytest.raises(PaletteReferenceError):
            build_tailwind_css(broken_theme, "styles/theme.css", temp_dir)
        assert not (temp_dir / "styles").exists()

    def test_ts_written_for_broken_theme(self, broken_theme: Theme, temp_dir: Path):
        """The config side never validates."""
        path = build_tailwind_ts(broken_theme, "theme.ts", temp_dir)
        assert path.exists()

    def test_rewrite_is_identical(self, test_theme: Theme, temp_dir: Path):
        """Rewriting gives byte-identical output."""
        first = build_tailwind_css(test_theme, "theme.css", temp_dir).read_bytes()
        second = build_tailwind_css(test_theme, "theme.css", temp_dir).read_bytes()
        assert first == second

    def test_logs_destination(self, test_theme: Theme, temp_dir: Path, caplog):
        """Each write logs its destination."""
        with caplog.at_level("INFO", logger="chuk_mcp_theme.compiler.writer"):
            path = build_tailwind_ts(test_theme, "theme.ts", temp_dir)
        assert f"Generated Tailwind config at {path}" in caplog.text
