"""Entry point called by the terminal host to decorate its configuration."""

from __future__ import annotations

import random
from collections.abc import Mapping

from hyperpokemon.assets import locate_assets
from hyperpokemon.logger import get_logger
from hyperpokemon.options import resolve_options
from hyperpokemon.selector import resolve_theme
from hyperpokemon.settings import PluginPaths
from hyperpokemon.synthesizer import synthesize
from hyperpokemon.themes import ThemeDataset, get_themes

logger = get_logger(__name__)


def decorate_config(
    config: Mapping[str, object],
    dataset: ThemeDataset | None = None,
    rng: random.Random | None = None,
    platform: str | None = None,
    paths: PluginPaths | None = None,
) -> dict[str, object]:
    """Merge the theme's colors and stylesheet into a host configuration.

    The input mapping is left untouched. Host keys the plugin does not own
    are passed through, and the generated stylesheet is appended to the
    host's ``css``.

    Args:
        config: Host configuration.
        dataset: Theme dataset. Defaults to the cached bundled dataset.
        rng: Random generator for random theme picks.
        platform: Target platform for path normalization. Defaults to the current one.
        paths: Data and media directories. Defaults to the environment configuration.

    Returns:
        A new configuration dictionary.

    Raises:
        DataLoadError: If the theme dataset cannot be loaded.
    """
    directories = paths if paths is not None else PluginPaths.from_environment()
    themes = dataset if dataset is not None else get_themes(directories.data_dir)

    options = resolve_options(config, rng)
    resolved = resolve_theme(options.pokemon, themes, rng)
    assets = locate_assets(resolved.name, directories, platform)
    style = synthesize(options, resolved, assets)
    logger.debug(f"Decorating with theme {resolved.name!r} (poketab={options.poketab}, unibody={options.unibody})")

    host_css = config.get("css") or ""
    return {
        **config,
        **style.to_config(),
        "termCSS": config.get("termCSS") or "",
        "css": f"{host_css}\n{style.css}",
    }
