"""Pokémon themes for the Hyper terminal."""

from hyperpokemon.logger import configure_logging, disable_logging
from hyperpokemon.plugin import decorate_config
from hyperpokemon.themes import DataLoadError, Palette, ThemeDataset, get_themes, load_themes

__all__ = [
    "DataLoadError",
    "Palette",
    "ThemeDataset",
    "configure_logging",
    "decorate_config",
    "disable_logging",
    "get_themes",
    "load_themes",
]
