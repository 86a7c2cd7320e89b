"""
Blend colors: layer an overlay color's explicit attributes onto a base.

The overlay wins wherever it sets something. When the two colors use
different modes a 16-color base is upgraded to 256 colors, while a
256-color base keeps its colors under a 16-color overlay. Underline is
inherited in every case and never cleared.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Iterable

from colorspec.core.color import ColorMode

if TYPE_CHECKING:
    from colorspec.core.color import Color


def _overlay_colors(base: Color, overlay: Color) -> Color:
    """Take the overlay's fg and bg wherever it has them."""
    return replace(
        base,
        fg=overlay.fg if overlay.has_fg else base.fg,
        bg=overlay.bg if overlay.has_bg else base.bg,
    )


def merge(base: Color, overlay: Color) -> Color:
    """Return ``base`` with ``overlay`` blended on top. Neither input changes."""
    pair = (base.mode, overlay.mode)

    if pair == (ColorMode.EXTENDED_256, ColorMode.EXTENDED_256):
        merged = _overlay_colors(base, overlay)
    elif pair == (ColorMode.BASIC_16, ColorMode.BASIC_16):
        inherited = replace(
            base,
            bold=base.bold or overlay.bold,
            bright=base.bright or overlay.bright,
        )
        merged = _overlay_colors(inherited, overlay)
    elif pair == (ColorMode.BASIC_16, ColorMode.EXTENDED_256):
        # Upgrade: the base's 16-color attributes are dropped
        upgraded = replace(
            base,
            mode=ColorMode.EXTENDED_256,
            fg=None,
            bg=None,
            bold=False,
            bright=False,
        )
        merged = _overlay_colors(upgraded, overlay)
    else:
        # 256-color base, 16-color overlay: colors stay as they are
        merged = base

    if overlay.underline and not merged.underline:
        merged = replace(merged, underline=True)
    return merged


def blend_all(colors: Iterable[Color]) -> Color:
    """Blend a sequence of colors left to right, starting from no color."""
    from colorspec.core.color import Color

    result = Color()
    for color in colors:
        result = merge(result, color)
    return result
