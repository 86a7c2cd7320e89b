"""
colorspec: terminal color specs for Python

Parse color descriptions like "bold red on bright blue", blend them, and
render them as ANSI escape sequences.

Quick Start:
    >>> import colorspec
    >>> color = colorspec.parse("underline rgb520 on grey3")
    >>> print(color.colorize("warning"))
    >>> print(colorspec.colorize("done", "green"))

Features:
    - Basic colors with bold, bright, and underline
    - 256-color palette via colorN, rgbRGB, and greyN
    - Blending with 16 to 256-color upgrades
    - Canonical spec text and packed integer forms
    - JSON themes of named color rules
"""

import structlog

from colorspec.log_config import configure_structlog

# Library logging stays quiet unless the application enables it
if not structlog.is_configured():
    configure_structlog()

__version__ = "0.1.0"

# Core types
from colorspec.core.color import Color, ColorMode
from colorspec.core.constants import NamedColor
from colorspec.core.blend import merge, blend_all

# Parsing and rendering
from colorspec.codec.spec_parser import parse
from colorspec.render.terminal import colorize_spec as colorize

# Errors
from colorspec.errors import ColorSpecError, InvalidColorSpec, ThemeError

# Configuration
from colorspec.theme import Theme

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "NamedColor",
    "merge",
    "blend_all",
    # Parsing and rendering
    "parse",
    "colorize",
    # Errors
    "ColorSpecError",
    "InvalidColorSpec",
    "ThemeError",
    # Configuration
    "Theme",
]
