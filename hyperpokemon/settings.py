"""Filesystem locations used by the plugin."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_BACKGROUNDS_DIR = PACKAGE_DIR / "backgrounds"
DEFAULT_GIFS_DIR = PACKAGE_DIR / "pokecursors"

DATA_DIR_ENV = "HYPERPOKEMON_DATA_DIR"
BACKGROUNDS_DIR_ENV = "HYPERPOKEMON_BACKGROUNDS_DIR"
GIFS_DIR_ENV = "HYPERPOKEMON_GIFS_DIR"


@dataclass(frozen=True)
class PluginPaths:
    """Directories holding the theme dataset and its media."""

    data_dir: Path = DEFAULT_DATA_DIR
    backgrounds_dir: Path = DEFAULT_BACKGROUNDS_DIR
    gifs_dir: Path = DEFAULT_GIFS_DIR

    @classmethod
    def from_environment(cls) -> PluginPaths:
        """Build paths from environment overrides, falling back to bundled directories.

        Returns:
            A PluginPaths instance.
        """
        return cls(
            data_dir=_env_path(DATA_DIR_ENV, DEFAULT_DATA_DIR),
            backgrounds_dir=_env_path(BACKGROUNDS_DIR_ENV, DEFAULT_BACKGROUNDS_DIR),
            gifs_dir=_env_path(GIFS_DIR_ENV, DEFAULT_GIFS_DIR),
        )


def _env_path(variable: str, default: Path) -> Path:
    """Read a directory override from the environment.

    Args:
        variable: Environment variable name.
        default: Directory used when the variable is unset or empty.

    Returns:
        The resolved directory path.
    """
    override = os.environ.get(variable)
    if override:
        return Path(override).expanduser()
    return default
