"""Shared test fixtures for hyperpokemon."""

import random
from pathlib import Path

import pytest

from hyperpokemon.settings import PluginPaths
from hyperpokemon.themes import ThemeDataset, load_themes

SAMPLE_TYPES = """\
fire:
  charmander:
    primary: "#F08030"
    secondary: "#FCE38A"
    tertiary: "#C23B22"
    unibody: "#F08030"
  vulpix:
    primary: "#E0724A"
    secondary: "#FFF1DC"
    tertiary: "#8E3B1F"
    unibody: "#E0724A"
water:
  squirtle:
    primary: "#7EC8E3"
    secondary: "#1D3557"
    tertiary: "#B5651D"
    unibody: "#7EC8E3"
"""

SAMPLE_POKEMON = """\
pokemon:
  pikachu:
    primary: "#F6D55C"
    secondary: "#3A2E1A"
    tertiary: "#C9302C"
    unibody: "#F6D55C"
  charmander:
    primary: "#F08030"
    secondary: "#FCE38A"
    tertiary: "#C23B22"
    unibody: "#F08030"
  vulpix:
    primary: "#E0724A"
    secondary: "#FFF1DC"
    tertiary: "#8E3B1F"
    unibody: "#E0724A"
  squirtle:
    primary: "#7EC8E3"
    secondary: "#1D3557"
    tertiary: "#B5651D"
    unibody: "#7EC8E3"
  Lapras:
    primary: "#5DA9E9"
    secondary: "#F2EAD3"
    tertiary: "#3D5A80"
    unibody: "#4A90C9"
"""

SAMPLE_TRAINERS = """\
trainers:
  misty:
    primary: "#F2A541"
    secondary: "#1D4E89"
    tertiary: "#D1495B"
    unibody: "#F2A541"
  brock:
    primary: "#8C6A48"
    secondary: "#F2E6D0"
    tertiary: "#4E6B3A"
    unibody: "#8C6A48"
"""


def write_theme_files(
    directory: Path,
    types: str = SAMPLE_TYPES,
    pokemon: str = SAMPLE_POKEMON,
    trainers: str = SAMPLE_TRAINERS,
) -> Path:
    """Write a set of theme files into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "types.yml").write_text(types, encoding="utf-8")
    (directory / "pokemon.yml").write_text(pokemon, encoding="utf-8")
    (directory / "trainers.yml").write_text(trainers, encoding="utf-8")
    return directory


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the sample theme files."""
    return write_theme_files(tmp_path / "data")


@pytest.fixture
def dataset(data_dir: Path) -> ThemeDataset:
    """Theme dataset loaded from the sample files."""
    return load_themes(data_dir)


@pytest.fixture
def plugin_paths(tmp_path: Path, data_dir: Path) -> PluginPaths:
    """Plugin paths pointing at the sample data and temporary media directories."""
    return PluginPaths(
        data_dir=data_dir,
        backgrounds_dir=tmp_path / "backgrounds",
        gifs_dir=tmp_path / "pokecursors",
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def theme_writer():
    """Return a helper that writes theme files into a directory."""
    return write_theme_files
