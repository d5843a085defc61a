"""Color scheme and stylesheet generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import Template

from hyperpokemon.assets import MediaPaths
from hyperpokemon.colors import DerivedColors, derive_colors
from hyperpokemon.options import Options
from hyperpokemon.selector import ResolvedTheme

STYLES_DIR = Path(__file__).parent / "styles"
STYLESHEET_TEMPLATE = STYLES_DIR / "hyper.css"
POKETAB_TEMPLATE = STYLES_DIR / "poketab.css"

ANSI_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "lightBlack",
    "lightRed",
    "lightGreen",
    "lightYellow",
    "lightBlue",
    "lightMagenta",
    "lightCyan",
    "lightWhite",
)

# Slots painted with the tertiary color; every other slot uses secondary
TERTIARY_ANSI_COLORS = frozenset({"black", "green", "lightBlack"})


@dataclass(frozen=True)
class ColorScheme:
    """Terminal colors handed to the host."""

    background_color: str
    border_color: str
    cursor_color: str
    foreground_color: str
    selection_color: str
    ansi_colors: tuple[tuple[str, str], ...]

    def to_config(self) -> dict[str, object]:
        """Serialize the scheme using the host's configuration keys.

        Returns:
            Dictionary of host color settings.
        """
        return {
            "backgroundColor": self.background_color,
            "borderColor": self.border_color,
            "cursorColor": self.cursor_color,
            "foregroundColor": self.foreground_color,
            "selectionColor": self.selection_color,
            "colors": dict(self.ansi_colors),
        }


@dataclass(frozen=True)
class StyleOutput:
    """Everything the plugin adds to the host configuration."""

    scheme: ColorScheme
    css: str
    colors: DerivedColors

    def to_config(self) -> dict[str, object]:
        """Return the color settings to merge into the host configuration.

        The stylesheet is kept separate because it is appended to the
        host's own CSS rather than replacing it.

        Returns:
            Dictionary of host color settings.
        """
        return self.scheme.to_config()


def build_color_scheme(colors: DerivedColors) -> ColorScheme:
    """Map derived colors onto the host's color settings.

    Args:
        colors: Derived theme colors.

    Returns:
        The color scheme.
    """
    ansi_colors = tuple(
        (name, colors.tertiary if name in TERTIARY_ANSI_COLORS else colors.secondary)
        for name in ANSI_COLOR_NAMES
    )
    return ColorScheme(
        background_color=colors.transparent,
        border_color=colors.background,
        cursor_color=colors.secondary,
        foreground_color=colors.secondary,
        selection_color=colors.selection,
        ansi_colors=ansi_colors,
    )


def render_css(colors: DerivedColors, image_path: str) -> str:
    """Fill the stylesheet template.

    The tab icon rule is only emitted when there is an icon to show.

    Args:
        colors: Derived theme colors.
        image_path: Background image location.

    Returns:
        The stylesheet text.
    """
    poketab = ""
    if colors.tab_icon_content:
        poketab = _load_template(POKETAB_TEMPLATE).substitute(tab_icon_content=colors.tab_icon_content)

    return _load_template(STYLESHEET_TEMPLATE).substitute(
        image_path=image_path,
        background=colors.background,
        secondary=colors.secondary,
        active_tab=colors.active_tab,
        inactive_tab=colors.inactive_tab,
        poketab=poketab,
    )


def synthesize(options: Options, resolved: ResolvedTheme, assets: MediaPaths) -> StyleOutput:
    """Build the color scheme and stylesheet for a resolved theme.

    Args:
        options: Resolved plugin options.
        resolved: Theme chosen for this pass.
        assets: Media paths of the theme.

    Returns:
        The style output.
    """
    colors = derive_colors(resolved.palette, options, assets.gif)
    return StyleOutput(
        scheme=build_color_scheme(colors),
        css=render_css(colors, assets.image),
        colors=colors,
    )


def _load_template(path: Path) -> Template:
    return Template(path.read_text(encoding="utf-8"))
