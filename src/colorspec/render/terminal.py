"""
Render Colors as ANSI escape sequences, and back into spec text.

    red                  ESC[31m      (fg 29 + index)
    bold underline red   ESC[1;4;31m
    on red               ESC[41m      (bg 39 + index)
    on bright red        ESC[101m     (bg 99 + index)
    256 fg               ESC[38;5;Nm
    256 bg               ESC[48;5;Nm
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from colorspec.core.color import ColorMode
from colorspec.core.constants import (
    BG_OFFSET,
    BRIGHT_BG_OFFSET,
    CSI,
    FG_OFFSET,
    INDEX_NAMES,
    RESET,
    SGR_BOLD,
    SGR_UNDERLINE,
)

if TYPE_CHECKING:
    from colorspec.core.color import Color


def colorize(color: Color, text: str) -> str:
    """Wrap text in the SGR sequences for color, followed by a reset."""
    if color.is_identity:
        return text

    parts: list[str] = []

    if color.mode is ColorMode.EXTENDED_256:
        if color.underline:
            parts.append(f"{CSI}{SGR_UNDERLINE}m")
        if color.has_fg:
            parts.append(f"{CSI}38;5;{color.fg}m")
        if color.has_bg:
            parts.append(f"{CSI}48;5;{color.bg}m")
    else:
        sgr_parts: list[str] = []
        if color.bold:
            sgr_parts.append(SGR_BOLD)
        if color.underline:
            sgr_parts.append(SGR_UNDERLINE)
        if color.has_bg:
            offset = BRIGHT_BG_OFFSET if color.bright else BG_OFFSET
            sgr_parts.append(str(offset + color.bg))
        if color.has_fg:
            sgr_parts.append(str(FG_OFFSET + color.fg))
        parts.append(f"{CSI}{';'.join(sgr_parts)}m")

    parts.append(text)
    parts.append(RESET)
    return ''.join(parts)


def colorize_spec(text: str, spec: str) -> str:
    """Parse spec and colorize text with it. Raises InvalidColorSpec."""
    from colorspec.codec.spec_parser import parse
    return colorize(parse(spec), text)


def _index_name(color: Color, index: Optional[int]) -> str:
    if index is None:
        return ""
    if color.mode is ColorMode.EXTENDED_256:
        return f"color{index}"
    return INDEX_NAMES.get(index, "")


def fg_name(color: Color) -> str:
    """Spec name of the foreground: a basic name, colorN, or "" if none."""
    return _index_name(color, color.fg)


def bg_name(color: Color) -> str:
    """Spec name of the background: a basic name, colorN, or "" if none."""
    return _index_name(color, color.bg)


def to_spec_string(color: Color) -> str:
    """
    Canonical spec text: bold, underline, fg, then "on [bright] bg".

    Parsing the result gives back an equal Color for any color whose
    indices have names in its mode.
    """
    words: list[str] = []

    if color.bold:
        words.append("bold")
    # Standalone slot: with no "on" segment, bright would be lost on re-parse
    if color.bright and not color.has_bg:
        words.append("bright")
    if color.underline:
        words.append("underline")

    foreground = fg_name(color)
    if foreground:
        words.append(foreground)

    background = bg_name(color)
    if background:
        words.append("on")
        if color.bright:
            words.append("bright")
        words.append(background)

    return ' '.join(words)
