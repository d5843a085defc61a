"""Locations of the background image and tab icon for a theme."""

from __future__ import annotations

import os
import sys
from typing import NamedTuple

from hyperpokemon.settings import PluginPaths

WINDOWS_PLATFORM = "win32"
IMAGE_EXTENSION = ".png"
GIF_EXTENSION = ".gif"


class MediaPaths(NamedTuple):
    """Background image and animated tab icon of a theme."""

    image: str
    gif: str


def normalize_css_path(path: str, platform: str | None = None) -> str:
    """Prepare a filesystem path for embedding in a CSS ``url()``.

    Args:
        path: Native filesystem path.
        platform: Target platform name (as in ``sys.platform``). Defaults to the current one.

    Returns:
        The path with forward slashes on Windows, unchanged elsewhere.
    """
    target = platform if platform is not None else sys.platform
    if target == WINDOWS_PLATFORM:
        return path.replace("\\", "/")
    return path


def locate_assets(
    theme_name: str,
    paths: PluginPaths | None = None,
    platform: str | None = None,
) -> MediaPaths:
    """Build the media paths for a theme.

    Files are not checked for existence. Theme names always come from the
    dataset, so they are joined as-is.

    Args:
        theme_name: Resolved theme name.
        paths: Media directories. Defaults to the environment configuration.
        platform: Target platform name. Defaults to the current one.

    Returns:
        The image and gif paths.
    """
    directories = paths if paths is not None else PluginPaths.from_environment()
    image = os.path.join(directories.backgrounds_dir, theme_name) + IMAGE_EXTENSION
    gif = os.path.join(directories.gifs_dir, theme_name) + GIF_EXTENSION
    return MediaPaths(
        image=normalize_css_path(image, platform),
        gif=normalize_css_path(gif, platform),
    )
