"""Conversions between Colors and their textual and packed forms."""

from colorspec.codec.spec_parser import SpecParser, parse
from colorspec.codec.packed import pack, unpack

__all__ = ["SpecParser", "parse", "pack", "unpack"]
