"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theme.models import Theme


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in theme library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_theme" / "themes" / "library"


@pytest.fixture
def theme_data() -> dict:
    """Raw theme mapping, as it would come out of YAML."""
    return {
        "name": "test-theme",
        "base": {
            "palette": {
                "primary": "#0070f3",
                "white": "#ffffff",
                "black": "#000000",
                "gray": "#888888",
            },
            "spacing": {"sm": "0.5rem", "md": "1rem", "lg": "2rem"},
            "size": {"small": "2rem", "medium": "2.5rem", "large": "3rem"},
            "zIndex": {"dropdown": "1000", "modal": "1400"},
            "container": {"sm": "40rem", "md": "64rem", "lg": "80rem"},
        },
        "light": {
            "bg": {
                "background": "white palette",
                "text": "black palette",
                "primary": "primary palette",
            }
        },
        "dark": {
            "bg": {
                "background": "black palette",
                "text": "white palette",
                "primary": "primary palette",
            }
        },
    }


@pytest.fixture
def test_theme(theme_data: dict) -> Theme:
    """A valid theme covering every token category."""
    return Theme.model_validate(theme_data)


@pytest.fixture
def broken_theme(theme_data: dict) -> Theme:
    """A theme whose light mode references a missing palette color."""
    theme_data["light"]["bg"]["background"] = "nonexistent palette"
    return Theme.model_validate(theme_data)
