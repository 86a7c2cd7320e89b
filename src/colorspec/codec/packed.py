"""
Packed integer form of a Color, for storing colors as a single number.

Layout (low to high):
    0x000000FF  foreground index
    0x0000FF00  background index
    0x00010000  bright
    0x00020000  bold
    0x00040000  underline
    0x00080000  256-color mode
    0x00100000  foreground present
    0x00200000  background present

The identity color packs to 0.
"""

from colorspec.core.color import Color, ColorMode

FG_MASK = 0x000000FF
BG_MASK = 0x0000FF00
BG_SHIFT = 8
BRIGHT = 0x00010000
BOLD = 0x00020000
UNDERLINE = 0x00040000
MODE_256 = 0x00080000
HAS_FG = 0x00100000
HAS_BG = 0x00200000


def pack(color: Color) -> int:
    """Encode a Color as an integer."""
    value = 0
    if color.has_fg:
        value |= HAS_FG | color.fg
    if color.has_bg:
        value |= HAS_BG | (color.bg << BG_SHIFT)
    if color.is_256:
        value |= MODE_256
    if color.bright:
        value |= BRIGHT
    if color.bold:
        value |= BOLD
    if color.underline:
        value |= UNDERLINE
    return value


def unpack(value: int) -> Color:
    """
    Decode an integer produced by pack().

    Bits outside the layout are ignored, as are index bits without their
    presence flag. Bold and bright are dropped in 256-color mode.
    """
    if value < 0:
        raise ValueError(f"Packed color must be non-negative, got {value}")

    is_256 = bool(value & MODE_256)
    return Color(
        fg=value & FG_MASK if value & HAS_FG else None,
        bg=(value & BG_MASK) >> BG_SHIFT if value & HAS_BG else None,
        mode=ColorMode.EXTENDED_256 if is_256 else ColorMode.BASIC_16,
        bold=bool(value & BOLD) and not is_256,
        bright=bool(value & BRIGHT) and not is_256,
        underline=bool(value & UNDERLINE),
    )
