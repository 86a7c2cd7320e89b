"""Core value types for terminal color specs."""

from colorspec.core.color import Color, ColorMode
from colorspec.core.constants import NamedColor
from colorspec.core.blend import merge, blend_all

__all__ = ["Color", "ColorMode", "NamedColor", "merge", "blend_all"]
