"""Theme dataset for hyperpokemon.

The bundled YAML files map a category name to a mapping of theme name to
palette. Every file contributes one or more top-level categories and the
files are merged into a single read-only dataset:

    pokemon:
      pikachu:
        primary: "#F6D55C"
        secondary: "#3A2E1A"
        tertiary: "#C9302C"
        unibody: "#F6D55C"
"""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from types import MappingProxyType

import yaml
from textual.color import Color, ColorParseError

from hyperpokemon.logger import get_logger
from hyperpokemon.settings import DEFAULT_DATA_DIR

logger = get_logger(__name__)

POKEMON_CATEGORY = "pokemon"
DEFAULT_THEME_NAME = "pikachu"
RANDOM_TOKEN = "random"

# Later files win when two files define the same category
THEME_FILES: tuple[str, ...] = ("types.yml", "pokemon.yml", "trainers.yml")


class DataLoadError(Exception):
    """Raised when a theme data file is missing, unreadable, or malformed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class Palette:
    """The four colors that define a theme."""

    primary: str
    secondary: str
    tertiary: str
    unibody: str


PALETTE_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(Palette))


@dataclass(frozen=True)
class ThemeDataset:
    """Read-only mapping of category name to theme name to palette."""

    categories: Mapping[str, Mapping[str, Palette]]

    @property
    def pokemon(self) -> Mapping[str, Palette]:
        """The flat list of pokemon themes."""
        return self.categories[POKEMON_CATEGORY]

    @property
    def fallback(self) -> Palette:
        """Palette of the default theme."""
        return self.pokemon[DEFAULT_THEME_NAME]

    def theme_names(self, category: str) -> tuple[str, ...]:
        """Return the ordered theme names of a category.

        Args:
            category: Category name.

        Returns:
            Theme names in dataset order.
        """
        return tuple(self.categories[category])

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def __getitem__(self, category: str) -> Mapping[str, Palette]:
        return self.categories[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], source: Path | None = None) -> ThemeDataset:
        """Validate raw category data and freeze it into a dataset.

        Args:
            data: Mapping of category name to mapping of theme name to palette fields.
            source: Path reported in errors.

        Returns:
            An immutable ThemeDataset.

        Raises:
            DataLoadError: If the data does not describe valid palettes.
        """
        categories: dict[str, Mapping[str, Palette]] = {}
        # Theme name -> owning category, for every category but pokemon
        owners: dict[str, str] = {}
        for category_name, themes in data.items():
            if not isinstance(themes, Mapping):
                raise DataLoadError(f"Category {category_name!r} is not a mapping", source)
            if not themes:
                raise DataLoadError(f"Category {category_name!r} has no themes", source)
            category = _normalize_name(category_name)
            if category in categories:
                raise DataLoadError(f"Category {category_name!r} is defined more than once", source)

            palettes: dict[str, Palette] = {}
            for theme_name, raw_palette in themes.items():
                name = _normalize_name(theme_name)
                if name in palettes:
                    raise DataLoadError(f"Theme {category_name}.{theme_name} is defined more than once", source)
                if category != POKEMON_CATEGORY:
                    if name in owners:
                        raise DataLoadError(
                            f"Theme {name!r} appears in both {owners[name]!r} and {category!r}",
                            source,
                        )
                    owners[name] = category
                palettes[name] = _parse_palette(f"{category_name}.{theme_name}", raw_palette, source)
            categories[category] = MappingProxyType(palettes)

        if POKEMON_CATEGORY not in categories:
            raise DataLoadError(f"Theme data has no {POKEMON_CATEGORY!r} category", source)
        if DEFAULT_THEME_NAME not in categories[POKEMON_CATEGORY]:
            raise DataLoadError(
                f"Category {POKEMON_CATEGORY!r} has no {DEFAULT_THEME_NAME!r} theme",
                source,
            )
        return cls(categories=MappingProxyType(categories))


def load_themes(data_dir: Path | None = None) -> ThemeDataset:
    """Read and merge every bundled theme file.

    Args:
        data_dir: Directory holding the theme files. Defaults to the bundled data.

    Returns:
        The merged theme dataset.

    Raises:
        DataLoadError: If any file is missing, unreadable, or malformed.
    """
    directory = data_dir if data_dir is not None else DEFAULT_DATA_DIR
    merged: dict[str, object] = {}
    for filename in THEME_FILES:
        path = directory / filename
        merged.update(_read_theme_file(path))

    dataset = ThemeDataset.from_mapping(merged, directory)
    logger.debug(
        f"Loaded {sum(len(themes) for themes in dataset.categories.values())} themes "
        f"in {len(dataset)} categories from {directory}"
    )
    return dataset


@functools.lru_cache(maxsize=8)
def get_themes(data_dir: Path | None = None) -> ThemeDataset:
    """Return the theme dataset, loading it once per directory.

    Args:
        data_dir: Directory holding the theme files. Defaults to the bundled data.

    Returns:
        The cached theme dataset.
    """
    return load_themes(data_dir)


def _read_theme_file(path: Path) -> Mapping[str, object]:
    """Parse a single YAML theme file.

    Args:
        path: File to read.

    Returns:
        The top-level mapping of the file.

    Raises:
        DataLoadError: If the file cannot be read or does not hold a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Failed to read theme file {path}: {exc}", path) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataLoadError(f"Failed to parse theme file {path}: {exc}", path) from exc

    if not isinstance(data, dict):
        raise DataLoadError(f"Theme file {path} does not contain a mapping", path)
    return data


def _parse_palette(label: str, raw: object, source: Path | None) -> Palette:
    """Build a palette from raw YAML data.

    Args:
        label: Dotted category.theme label used in errors.
        raw: Raw palette value.
        source: Path reported in errors.

    Returns:
        The validated palette.

    Raises:
        DataLoadError: If a field is missing or is not a color.
    """
    if not isinstance(raw, Mapping):
        raise DataLoadError(f"Theme {label!r} is not a mapping", source)

    values: dict[str, str] = {}
    for name in PALETTE_FIELDS:
        value = raw.get(name)
        if not isinstance(value, str):
            raise DataLoadError(f"Theme {label!r} is missing color {name!r}", source)
        try:
            Color.parse(value)
        except ColorParseError as exc:
            raise DataLoadError(f"Theme {label!r} has invalid {name} color {value!r}", source) from exc
        values[name] = value
    return Palette(**values)


def _normalize_name(name: object) -> str:
    return str(name).strip().lower()
