"""User options read from the host configuration."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass

from hyperpokemon.logger import get_logger
from hyperpokemon.themes import DEFAULT_THEME_NAME

logger = get_logger(__name__)


@dataclass(frozen=True)
class Options:
    """Canonical plugin options.

    ``pokemon`` is already a single token: when the host lists several,
    the pick is made once while resolving.
    """

    pokemon: str = DEFAULT_THEME_NAME
    poketab: bool = False
    unibody: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], rng: random.Random | None = None) -> Options:
        """Create options from a host configuration, applying defaults for invalid values.

        Args:
            data: Host configuration mapping.
            rng: Random generator used to pick among several pokemon tokens.

        Returns:
            An Options instance.
        """
        return cls(
            pokemon=_pick_token(data.get("pokemon"), rng or random),
            poketab=_coerce_flag(data.get("poketab"), default=False),
            unibody=_coerce_flag(data.get("unibody"), default=True),
        )


def resolve_options(raw: Mapping[str, object], rng: random.Random | None = None) -> Options:
    """Resolve the plugin options from a host configuration.

    Never raises: malformed values fall back to their defaults.

    Args:
        raw: Host configuration mapping.
        rng: Random generator used to pick among several pokemon tokens.

    Returns:
        The resolved options.
    """
    options = Options.from_mapping(raw, rng)
    logger.debug(f"Resolved options: {options}")
    return options


def _pick_token(value: object, rng: random.Random) -> str:
    """Reduce the raw ``pokemon`` value to a single token.

    Args:
        value: Raw value (string, sequence of strings, or anything else).
        rng: Random generator for sequences.

    Returns:
        The chosen token, or the default theme name.
    """
    if isinstance(value, list | tuple):
        if not value:
            return DEFAULT_THEME_NAME
        value = rng.choice(value)
    if isinstance(value, str) and value:
        return value
    return DEFAULT_THEME_NAME


def _coerce_flag(value: object, *, default: bool) -> bool:
    """Read a "true"/"false" option.

    Only the literal opposite of the default flips the result.

    Args:
        value: Raw option value.
        default: Value used for anything but the opposite literal.

    Returns:
        Boolean option value.
    """
    # Python hosts may pass real booleans
    if isinstance(value, bool):
        return value
    opposite = "false" if default else "true"
    if value == opposite:
        return not default
    return default
