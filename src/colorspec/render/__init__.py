"""Renderers for outputting Colors as escape sequences or spec text."""

from colorspec.render.terminal import (
    colorize,
    colorize_spec,
    fg_name,
    bg_name,
    to_spec_string,
)

__all__ = ["colorize", "colorize_spec", "fg_name", "bg_name", "to_spec_string"]
