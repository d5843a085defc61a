"""Resolve a theme token to a concrete theme."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import NamedTuple

from hyperpokemon.logger import get_logger
from hyperpokemon.themes import (
    DEFAULT_THEME_NAME,
    RANDOM_TOKEN,
    Palette,
    ThemeDataset,
)

logger = get_logger(__name__)


class ResolvedTheme(NamedTuple):
    """A theme name and its palette."""

    name: str
    palette: Palette


def resolve_theme(token: str, dataset: ThemeDataset, rng: random.Random | None = None) -> ResolvedTheme:
    """Resolve a theme token against the dataset.

    The token is matched case-insensitively after trimming, in this order:
    ``"random"`` picks any pokemon, a category name picks a theme from that
    category, a pokemon name selects that pokemon. Anything else resolves to
    the default theme.

    Args:
        token: Theme name, category name, or "random".
        dataset: Theme dataset to search.
        rng: Random generator for the random picks.

    Returns:
        The resolved theme.
    """
    name = token.strip().lower()
    generator = rng or random

    if name == RANDOM_TOKEN:
        return _random_theme(dataset.pokemon, generator)

    if name in dataset:
        # Category such as `fire` or `trainers`
        return _random_theme(dataset[name], generator)

    if name in dataset.pokemon:
        return ResolvedTheme(name, dataset.pokemon[name])

    logger.debug(f"Unknown theme {token!r}, using {DEFAULT_THEME_NAME!r}")
    return ResolvedTheme(DEFAULT_THEME_NAME, dataset.fallback)


def _random_theme(category: Mapping[str, Palette], rng: random.Random) -> ResolvedTheme:
    """Pick a theme uniformly from a category.

    Args:
        category: Mapping of theme name to palette.
        rng: Random generator.

    Returns:
        The picked theme.
    """
    name = rng.choice(list(category))
    return ResolvedTheme(name, category[name])
