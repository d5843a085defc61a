"""Secondary colors derived from a theme palette.

All arithmetic goes through :class:`textual.color.Color`, so palette entries
may use any notation it parses (``#rgb``, ``#rrggbb``, ``rgb(...)``, names).
"""

from __future__ import annotations

from dataclasses import dataclass

from textual.color import Color

from hyperpokemon.options import Options
from hyperpokemon.themes import Palette

LIGHT_TAB_TEXT = "#FAFAFA"
DARK_TAB_TEXT = "#383A42"

SELECTION_ALPHA = 0.3
INACTIVE_TAB_DARKEN = 0.1

# YIQ threshold on a 0-255 scale
DARK_THRESHOLD = 128


@dataclass(frozen=True)
class DerivedColors:
    """Colors used by the color scheme and the stylesheet."""

    background: str
    secondary: str
    tertiary: str
    selection: str
    transparent: str
    active_tab: str
    inactive_tab: str
    tab_icon_content: str


def is_dark(value: str) -> bool:
    """Check whether a color reads as dark.

    Args:
        value: CSS color string.

    Returns:
        True if the YIQ brightness is below the threshold.
    """
    return Color.parse(value).brightness * 255 < DARK_THRESHOLD


def darken(value: str, amount: float) -> str:
    """Reduce the HSL lightness of a color by a fraction of itself.

    Args:
        value: CSS color string.
        amount: Fraction between 0 and 1; 0.1 keeps 90% of the lightness.

    Returns:
        Hex color string.
    """
    color = Color.parse(value)
    hue, saturation, lightness = color.hsl
    darker = Color.from_hsl(hue, saturation, lightness * (1 - amount))
    return darker.with_alpha(color.a).hex


def with_alpha(value: str, alpha: float) -> str:
    """Set the alpha channel of a color.

    Args:
        value: CSS color string.
        alpha: New alpha between 0 and 1.

    Returns:
        CSS ``rgba(...)`` string.
    """
    color = Color.parse(value).with_alpha(alpha)
    return f"rgba({color.r}, {color.g}, {color.b}, {alpha:g})"


def derive_colors(palette: Palette, options: Options, gif_path: str) -> DerivedColors:
    """Derive every color the stylesheet needs from a palette.

    Args:
        palette: Theme palette.
        options: Resolved plugin options.
        gif_path: Location of the tab icon, used when poketab is enabled.

    Returns:
        The derived colors.
    """
    active_tab = LIGHT_TAB_TEXT if is_dark(palette.secondary) else DARK_TAB_TEXT
    return DerivedColors(
        background=palette.unibody if options.unibody else palette.primary,
        secondary=palette.secondary,
        tertiary=palette.tertiary,
        selection=with_alpha(palette.primary, SELECTION_ALPHA),
        transparent=with_alpha(palette.secondary, 0),
        active_tab=active_tab,
        inactive_tab=darken(active_tab, INACTIVE_TAB_DARKEN),
        tab_icon_content=gif_path if options.poketab else "",
    )
