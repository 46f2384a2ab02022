import os

import pytest

from masked_maze.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    load_settings,
    resolve_seed,
)
from masked_maze.errors import MazeConfigurationError

ENV_VARS = ("MAZE_WIDTH", "MAZE_HEIGHT", "MAZE_BREADCRUMBS", "MAZE_MASK")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test from an empty directory with no MAZE_* variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    """Test the settings used when nothing is configured."""
    settings = load_settings()

    assert settings.width == DEFAULT_WIDTH
    assert settings.height == DEFAULT_HEIGHT
    assert settings.breadcrumbs is True
    assert settings.mask_path is None


def test_environment_overrides(monkeypatch):
    """Test that MAZE_* variables replace the defaults."""
    monkeypatch.setenv("MAZE_WIDTH", "12")
    monkeypatch.setenv("MAZE_HEIGHT", "8")
    monkeypatch.setenv("MAZE_BREADCRUMBS", "off")
    monkeypatch.setenv("MAZE_MASK", "heart.pbm")

    settings = load_settings()

    assert (settings.width, settings.height) == (12, 8)
    assert settings.breadcrumbs is False
    assert settings.mask_path == "heart.pbm"


def test_malformed_integer(monkeypatch):
    """Test that a non-numeric size is a configuration error."""
    monkeypatch.setenv("MAZE_WIDTH", "wide")

    with pytest.raises(MazeConfigurationError, match="MAZE_WIDTH"):
        load_settings()


@pytest.mark.parametrize("seed", [0, 7, 123456])
def test_explicit_seed_kept(seed):
    """Test that a given seed is used as-is."""
    assert resolve_seed(seed) == seed


@pytest.mark.parametrize("seed", [None, -1])
def test_clock_seed(seed):
    """Test that a missing seed is replaced with a microsecond count."""
    assert 0 <= resolve_seed(seed) < 1_000_000


def test_dotenv_file(tmp_path):
    """Test that a .env file in the working directory is picked up."""
    (tmp_path / ".env").write_text("MAZE_WIDTH=9\nMAZE_BREADCRUMBS=0\n")
    try:
        settings = load_settings()
    finally:
        for name in ENV_VARS:
            os.environ.pop(name, None)

    assert settings.width == 9
    assert settings.height == DEFAULT_HEIGHT
    assert settings.breadcrumbs is False


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("Yes", True), ("off", False)])
def test_breadcrumb_switch_values(monkeypatch, value, expected):
    """Test the accepted spellings of MAZE_BREADCRUMBS."""
    monkeypatch.setenv("MAZE_BREADCRUMBS", value)

    assert load_settings().breadcrumbs is expected


def test_malformed_switch(monkeypatch):
    """Test that an unrecognised MAZE_BREADCRUMBS value is a configuration error."""
    monkeypatch.setenv("MAZE_BREADCRUMBS", "maybe")

    with pytest.raises(MazeConfigurationError, match="MAZE_BREADCRUMBS"):
        load_settings()
