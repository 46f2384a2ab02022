import os
import time
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from masked_maze.errors import MazeConfigurationError

DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 50


@dataclass
class MazeSettings:
    """Defaults for the command line, read from the environment or a .env file."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    breadcrumbs: bool = True
    mask_path: str | None = None


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise MazeConfigurationError(
            f"{name} must be an integer, not {value!r}."
        ) from None


def _bool_from_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise MazeConfigurationError(f"{name} must be on or off, not {value!r}.")


def load_settings() -> MazeSettings:
    """
    Build settings from MAZE_WIDTH, MAZE_HEIGHT, MAZE_BREADCRUMBS and MAZE_MASK.

    A local .env file is loaded first; variables already set in the process
    environment win over it.
    """
    load_dotenv(find_dotenv(usecwd=True))  # does nothing if no file is present

    return MazeSettings(
        width=_int_from_env("MAZE_WIDTH", DEFAULT_WIDTH),
        height=_int_from_env("MAZE_HEIGHT", DEFAULT_HEIGHT),
        breadcrumbs=_bool_from_env("MAZE_BREADCRUMBS", True),
        mask_path=os.getenv("MAZE_MASK") or None,
    )


def resolve_seed(seed: int | None) -> int:
    """Return seed unchanged, or pick one from the clock when it is None or -1."""
    if seed is None or seed == -1:
        # Microseconds of the current second
        return time.time_ns() // 1000 % 1_000_000
    return seed
