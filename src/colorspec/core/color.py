"""Color representation for terminal color specs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from colorspec.core.constants import COLOR_NAMES, PALETTE_SIZE, NamedColor


class ColorMode(Enum):
    """How fg/bg indices are interpreted when rendering."""
    BASIC_16 = "16"         # 8 named colors plus bold/bright (SGR 30-37, 40-47, 100-107)
    EXTENDED_256 = "256"    # Direct palette indices (SGR 38;5;n, 48;5;n)


ColorRef = Union[NamedColor, str, None]


def _named_index(color: ColorRef) -> Optional[int]:
    """Resolve a NamedColor or basic color name to an index, None when unset."""
    if isinstance(color, str):
        name = color.lower()
        if name in ("", "nocolor"):
            return None
        try:
            return COLOR_NAMES[name]
        except KeyError:
            raise ValueError(f"Unknown color name: {color!r}") from None
    if color is None or color == NamedColor.NOCOLOR:
        return None
    return int(NamedColor(color))


@dataclass(frozen=True)
class Color:
    """
    A terminal color: optional foreground and background plus style flags.

    The default value has nothing set and renders text unchanged. ``fg`` and
    ``bg`` are NamedColor indices in BASIC_16 mode and palette indices in
    EXTENDED_256 mode; ``None`` means unset (index 0 is a real color).
    Bold and bright only exist in BASIC_16 mode.

    Example:
        >>> Color.parse("bold red on bright blue").colorize("hi")
        '\\x1b[1;104;31mhi\\x1b[0m'
    """
    fg: Optional[int] = None
    bg: Optional[int] = None
    mode: ColorMode = ColorMode.BASIC_16
    bold: bool = False
    bright: bool = False
    underline: bool = False

    def __post_init__(self) -> None:
        for label, index in (("fg", self.fg), ("bg", self.bg)):
            if index is not None and not 0 <= index < PALETTE_SIZE:
                raise ValueError(f"{label} index must be 0-255, got {index}")
        if self.mode is ColorMode.EXTENDED_256 and (self.bold or self.bright):
            raise ValueError("bold and bright are not available in 256-color mode")

    @classmethod
    def from_components(
        cls,
        fg: ColorRef = None,
        bg: ColorRef = None,
        underline: bool = False,
        bold: bool = False,
        bright: bool = False,
    ) -> Color:
        """Create a 16-color Color from named colors and style flags."""
        return cls(
            fg=_named_index(fg),
            bg=_named_index(bg),
            mode=ColorMode.BASIC_16,
            bold=bold,
            bright=bright,
            underline=underline,
        )

    @classmethod
    def from_256(
        cls,
        fg: Optional[int] = None,
        bg: Optional[int] = None,
        underline: bool = False,
    ) -> Color:
        """Create a Color from 256-color palette indices."""
        return cls(fg=fg, bg=bg, mode=ColorMode.EXTENDED_256, underline=underline)

    @classmethod
    def parse(cls, spec: str) -> Color:
        """Parse a textual spec such as ``"underline grey5 on rgb012"``."""
        from colorspec.codec.spec_parser import parse
        return parse(spec)

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Decode a packed integer produced by ``int(color)``."""
        from colorspec.codec.packed import unpack
        return unpack(value)

    def copy(self) -> Color:
        """Create a copy of this color."""
        return replace(self)

    @property
    def has_fg(self) -> bool:
        return self.fg is not None

    @property
    def has_bg(self) -> bool:
        return self.bg is not None

    @property
    def is_256(self) -> bool:
        return self.mode is ColorMode.EXTENDED_256

    @property
    def is_identity(self) -> bool:
        """True if rendering with this color leaves text untouched."""
        return (
            self.fg is None
            and self.bg is None
            and not self.bold
            and not self.bright
            and not self.underline
        )

    def blend(self, other: Color) -> Color:
        """Return this color with ``other`` layered on top."""
        from colorspec.core.blend import merge
        return merge(self, other)

    def colorize(self, text: str) -> str:
        """Wrap text in the escape sequences for this color."""
        from colorspec.render.terminal import colorize
        return colorize(self, text)

    def fg_name(self) -> str:
        from colorspec.render.terminal import fg_name
        return fg_name(self)

    def bg_name(self) -> str:
        from colorspec.render.terminal import bg_name
        return bg_name(self)

    def to_spec_string(self) -> str:
        """Canonical textual spec for this color."""
        from colorspec.render.terminal import to_spec_string
        return to_spec_string(self)

    def __str__(self) -> str:
        return self.to_spec_string()

    def __int__(self) -> int:
        from colorspec.codec.packed import pack
        return pack(self)
