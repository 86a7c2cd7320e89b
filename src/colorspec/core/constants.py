"""Shared constants for color specs and SGR rendering."""

from enum import IntEnum

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


class NamedColor(IntEnum):
    """The basic 8 colors, indexed so that SGR fg = 29 + index, bg = 39 + index."""
    NOCOLOR = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8


# Name -> palette index, as accepted in specs
COLOR_NAMES: dict[str, int] = {
    color.name.lower(): int(color)
    for color in NamedColor
    if color is not NamedColor.NOCOLOR
}

# Palette index -> name, as written back out ("nocolor" has no text)
INDEX_NAMES: dict[int, str] = {index: name for name, index in COLOR_NAMES.items()}
INDEX_NAMES[NamedColor.NOCOLOR] = ""

# 256-color palette layout
CUBE_BASE = 16          # 6x6x6 color cube starts here
CUBE_SIZE = 6
GREY_BASE = 232         # 24-step grayscale ramp starts here
GREY_LEVELS = 24
PALETTE_SIZE = 256

# 16-color SGR offsets, added to a NamedColor index
FG_OFFSET = 29          # red (2) -> 31
BG_OFFSET = 39          # red (2) -> 41
BRIGHT_BG_OFFSET = 99   # red (2) -> 101

# SGR parameters
SGR_BOLD = "1"
SGR_UNDERLINE = "4"
