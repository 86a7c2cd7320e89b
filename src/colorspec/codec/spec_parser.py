"""Parse textual color specs such as "bold red on bright blue"."""

from __future__ import annotations

import re
from typing import Callable, NoReturn, Optional

import structlog

from colorspec.core.color import Color, ColorMode
from colorspec.core.constants import (
    COLOR_NAMES,
    CUBE_BASE,
    CUBE_SIZE,
    GREY_BASE,
    GREY_LEVELS,
    PALETTE_SIZE,
)
from colorspec.errors import InvalidColorSpec

log = structlog.get_logger()


class SpecParser:
    """
    Parser that accumulates spec tokens into a single Color.

    Supports the following constructs, in any order:
        [bold] [bright] [underline] [color] [on color]

    Where [color] is one of:
        black, red, green, yellow, blue, magenta, cyan, white
        greyN / grayN  0 <= N <= 23       palette 232 + N
        rgbRGB         0 <= R,G,B <= 5    palette 16 + R*36 + G*6 + B
        colorN         0 <= N <= 255      palette N

    Underscores count as spaces, so the old "on_red" form works. Style
    words apply to the whole spec; color words go to the foreground until
    "on" is seen, and to the background after it.
    """

    # Prefix plus numeric suffix; a prefix match with a bad suffix is an error
    GREY_PATTERN = re.compile(r'gr[ae]y([0-9]+)')
    RGB_PATTERN = re.compile(r'rgb([0-9])([0-9])([0-9])')
    COLOR_PATTERN = re.compile(r'color([0-9]+)')

    def __init__(self) -> None:
        self._spec = ""
        self._reset()
        self._matchers: tuple[Callable[[str, str], bool], ...] = (
            self._match_keyword,
            self._match_name,
            self._match_grey,
            self._match_rgb,
            self._match_color,
        )

    def _reset(self) -> None:
        self.fg: Optional[int] = None
        self.bg: Optional[int] = None
        self.mode = ColorMode.BASIC_16
        self.bold = False
        self.bright = False
        self.underline = False
        self.on_background = False

    def parse(self, spec: str) -> Color:
        """Parse a whole spec, raising InvalidColorSpec on the first bad token."""
        self._spec = spec
        self._reset()

        for token in spec.replace('_', ' ').split(' '):
            if not token:
                continue
            word = token.lower()
            for matcher in self._matchers:
                if matcher(word, token):
                    break
            else:
                self._reject(token)

        return Color(
            fg=self.fg,
            bg=self.bg,
            mode=self.mode,
            bold=self.bold,
            bright=self.bright,
            underline=self.underline,
        )

    def _reject(self, token: str) -> NoReturn:
        log.debug("Rejected color token", token=token, spec=self._spec)
        raise InvalidColorSpec(token, self._spec)

    def _set_index(self, index: int) -> None:
        """Assign a color index to whichever side is currently targeted."""
        if self.on_background:
            self.bg = index
        else:
            self.fg = index

    def _set_palette_index(self, index: int) -> None:
        self._set_index(index)
        self.mode = ColorMode.EXTENDED_256
        self.bold = False
        self.bright = False

    def _match_keyword(self, word: str, token: str) -> bool:
        if word == 'bold':
            self.bold = True
            self.mode = ColorMode.BASIC_16
        elif word == 'bright':
            self.bright = True
            self.mode = ColorMode.BASIC_16
        elif word == 'underline':
            self.underline = True
        elif word == 'on':
            self.on_background = True
        else:
            return False
        return True

    def _match_name(self, word: str, token: str) -> bool:
        index = COLOR_NAMES.get(word)
        if index is None:
            return False
        self._set_index(index)
        return True

    def _match_grey(self, word: str, token: str) -> bool:
        if not word.startswith(('grey', 'gray')):
            return False
        match = self.GREY_PATTERN.fullmatch(word)
        if not match or int(match.group(1)) >= GREY_LEVELS:
            self._reject(token)
        self._set_palette_index(GREY_BASE + int(match.group(1)))
        return True

    def _match_rgb(self, word: str, token: str) -> bool:
        if not word.startswith('rgb'):
            return False
        match = self.RGB_PATTERN.fullmatch(word)
        if not match:
            self._reject(token)
        r, g, b = (int(digit) for digit in match.groups())
        if max(r, g, b) >= CUBE_SIZE:
            self._reject(token)
        self._set_palette_index(CUBE_BASE + r * CUBE_SIZE * CUBE_SIZE + g * CUBE_SIZE + b)
        return True

    def _match_color(self, word: str, token: str) -> bool:
        if not word.startswith('color'):
            return False
        match = self.COLOR_PATTERN.fullmatch(word)
        if not match or int(match.group(1)) >= PALETTE_SIZE:
            self._reject(token)
        self._set_palette_index(int(match.group(1)))
        return True


def parse(spec: str) -> Color:
    """Parse a textual color spec into a Color."""
    return SpecParser().parse(spec)
