"""
Tests for MCP tools.

Tests the MCP tool implementations for theme discovery and compilation.
"""

import json
from pathlib import Path

import pytest
import yaml

from chuk_mcp_theme.themes import ThemeLoader
from chuk_mcp_theme.tools.compilation import register_compilation_tools
from chuk_mcp_theme.tools.themes import register_theme_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def loader(library_path: Path, temp_dir: Path, theme_data: dict) -> ThemeLoader:
    """Loader with the library plus a project holding a valid and a broken theme."""
    project = temp_dir / "themes"
    project.mkdir()
    (project / "test-theme.yaml").write_text(yaml.safe_dump(theme_data, sort_keys=False))

    theme_data["name"] = "broken"
    theme_data["light"]["bg"]["background"] = "nonexistent palette"
    (project / "broken.yaml").write_text(yaml.safe_dump(theme_data, sort_keys=False))

    return ThemeLoader(library_path=library_path, project_path=project)


@pytest.fixture
def theme_tools(loader: ThemeLoader) -> dict:
    return register_theme_tools(MockMCPServer("test"), loader)


@pytest.fixture
def compilation_tools(loader: ThemeLoader, temp_dir: Path) -> dict:
    return register_compilation_tools(MockMCPServer("test"), loader, temp_dir / "output")


class TestThemeTools:
    """Tests for theme discovery tools."""

    def test_registers_on_server(self, loader: ThemeLoader):
        """Test that every tool is registered."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, loader)
        assert set(tools) == set(mcp.tools)

    @pytest.mark.asyncio
    async def test_list_themes(self, theme_tools: dict):
        """Test listing library and project themes."""
        data = json.loads(await theme_tools["theme_list_themes"]())
        assert data["status"] == "success"
        names = {t["name"] for t in data["themes"]}
        assert {"demo", "slate", "test-theme", "broken"} <= names
        assert data["count"] == len(data["themes"])

    @pytest.mark.asyncio
    async def test_describe_theme(self, theme_tools: dict):
        """Test describing a theme."""
        data = json.loads(await theme_tools["theme_describe_theme"](name="demo"))
        assert data["status"] == "success"
        assert data["theme"]["base"]["palette"]["blue"] == "#00f"

    @pytest.mark.asyncio
    async def test_describe_missing(self, theme_tools: dict):
        """Unknown themes are errors."""
        data = json.loads(await theme_tools["theme_describe_theme"](name="nope"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_copy_to_project(self, theme_tools: dict, loader: ThemeLoader):
        """A second copy of the same theme is refused."""
        data = json.loads(await theme_tools["theme_copy_theme_to_project"](name="slate"))
        assert data["status"] == "success"
        assert Path(data["path"]).parent == loader.project_path

        again = json.loads(await theme_tools["theme_copy_theme_to_project"](name="slate"))
        assert again["status"] == "error"


class TestCompilationTools:
    """Tests for compilation tools."""

    @pytest.mark.asyncio
    async def test_parse_value(self, compilation_tools: dict):
        """Test parsing a px value."""
        data = json.loads(await compilation_tools["theme_parse_value"](value="16 px"))
        assert data == {"status": "success", "kind": "px", "css": "16px"}

    @pytest.mark.asyncio
    async def test_parse_palette_value(self, compilation_tools: dict):
        """Palette values report their variable."""
        data = json.loads(await compilation_tools["theme_parse_value"](value="black palette"))
        assert data["kind"] == "palette"
        assert data["css"] == "var(--color-black)"

    @pytest.mark.asyncio
    async def test_parse_value_error(self, compilation_tools: dict):
        """Parse failures come back as errors."""
        data = json.loads(await compilation_tools["theme_parse_value"](value="1 xyz"))
        assert data["status"] == "error"
        assert "Unknown unit" in data["message"]

    @pytest.mark.asyncio
    async def test_validate(self, compilation_tools: dict):
        """Validation issues are returned, not raised."""
        data = json.loads(await compilation_tools["theme_validate"](name="broken"))
        assert data["status"] == "success"
        assert data["valid"] is False
        assert data["issues"][0]["code"] == "INVALID_PALETTE_REF"

    @pytest.mark.asyncio
    async def test_build_css(self, compilation_tools: dict):
        """Test generating CSS."""
        data = json.loads(await compilation_tools["theme_build_css"](name="test-theme"))
        assert data["status"] == "success"
        assert "--mode-background: var(--color-white);" in data["css"]

    @pytest.mark.asyncio
    async def test_build_css_broken(self, compilation_tools: dict):
        """Broken references stop CSS generation."""
        data = json.loads(await compilation_tools["theme_build_css"](name="broken"))
        assert data["status"] == "error"
        assert "light.bg.background" in data["message"]

    @pytest.mark.asyncio
    async def test_build_tailwind_config_broken(self, compilation_tools: dict):
        """Config generation doesn't validate."""
        data = json.loads(await compilation_tools["theme_build_tailwind_config"](name="broken"))
        assert data["status"] == "success"
        assert data["config"]["colors"]["primary"] == "var(--palette-primary)"

    @pytest.mark.asyncio
    async def test_generate(self, compilation_tools: dict, temp_dir: Path):
        """Both files land in the output directory."""
        data = json.loads(await compilation_tools["theme_generate"](name="demo"))
        assert data["status"] == "success"
        assert Path(data["css_path"]) == (temp_dir / "output" / "demo.css").resolve()
        assert Path(data["ts_path"]).read_text().startswith("// Auto-generated")

    @pytest.mark.asyncio
    async def test_generate_broken_writes_nothing(self, compilation_tools: dict, temp_dir: Path):
        """A failed build creates no output."""
        data = json.loads(await compilation_tools["theme_generate"](name="broken"))
        assert data["status"] == "error"
        assert not (temp_dir / "output").exists()

    @pytest.mark.asyncio
    async def test_missing_theme(self, compilation_tools: dict):
        """Every theme-taking tool reports unknown names."""
        for tool in ("theme_validate", "theme_build_css", "theme_generate"):
            data = json.loads(await compilation_tools[tool](name="nope"))
            assert data["status"] == "error"
