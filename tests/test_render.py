"""Tests for escape sequence rendering and spec text."""

import pytest

import colorspec
from colorspec import Color, InvalidColorSpec, parse
from colorspec.codec.packed import MODE_256, unpack


class TestColorize:
    """Rendering colors around text."""

    def test_identity_returns_text(self) -> None:
        assert Color().colorize("plain") == "plain"
        assert colorspec.colorize("plain", "") == "plain"

    def test_foreground(self) -> None:
        assert parse("red").colorize("x") == "\x1b[31mx\x1b[0m"
        assert parse("black").colorize("x") == "\x1b[30mx\x1b[0m"

    def test_background(self) -> None:
        assert parse("on red").colorize("x") == "\x1b[41mx\x1b[0m"
        assert parse("on bright red").colorize("x") == "\x1b[101mx\x1b[0m"

    def test_parameter_order(self) -> None:
        assert parse("red on blue underline bold").colorize("x") == "\x1b[1;4;44;31mx\x1b[0m"

    def test_underline_only(self) -> None:
        assert parse("underline").colorize("x") == "\x1b[4mx\x1b[0m"

    def test_bright_without_background(self) -> None:
        # Nothing to put in the sequence, but the reset still follows
        assert parse("bright").colorize("x") == "\x1b[mx\x1b[0m"

    def test_256_foreground(self) -> None:
        assert parse("color200").colorize("x") == "\x1b[38;5;200mx\x1b[0m"

    def test_256_full(self) -> None:
        assert parse("underline grey5 on rgb012").colorize("x") == (
            "\x1b[4m\x1b[38;5;237m\x1b[48;5;24mx\x1b[0m"
        )

    def test_256_empty(self) -> None:
        assert Color.from_256().colorize("x") == "x"

    def test_unpacked_empty_256(self) -> None:
        assert unpack(MODE_256).colorize("x") == "x"

    def test_blend_with_empty_256(self) -> None:
        assert parse("bold red").blend(Color.from_256()).colorize("x") == "x"

    def test_colorize_spec_propagates_errors(self) -> None:
        with pytest.raises(InvalidColorSpec):
            colorspec.colorize("x", "bold mauve")


class TestNames:
    """fg_name and bg_name lookups."""

    def test_basic_names(self) -> None:
        color = parse("cyan on magenta")
        assert color.fg_name() == "cyan"
        assert color.bg_name() == "magenta"

    def test_palette_names(self) -> None:
        color = parse("rgb000 on grey0")
        assert color.fg_name() == "color16"
        assert color.bg_name() == "color232"

    def test_unset(self) -> None:
        assert Color().fg_name() == ""
        assert Color().bg_name() == ""
        assert Color.from_256(fg=9).bg_name() == ""

    def test_unnamed_16_color_index(self) -> None:
        assert parse("color200 bold").fg_name() == ""


class TestSpecString:
    """Canonical spec text."""

    def test_order(self) -> None:
        assert parse("underline red on bright green bold").to_spec_string() == (
            "bold underline red on bright green"
        )

    def test_color_after_on_is_background(self) -> None:
        assert parse("on bright green underline red bold").to_spec_string() == (
            "bold underline on bright red"
        )

    def test_identity(self) -> None:
        assert Color().to_spec_string() == ""

    def test_palette(self) -> None:
        assert parse("grey5 on rgb012").to_spec_string() == "color237 on color24"

    def test_bright_without_background(self) -> None:
        assert parse("red bright").to_spec_string() == "bright red"

    @pytest.mark.parametrize("spec", [
        "",
        "red",
        "bold red",
        "bright red",
        "underline",
        "on bright blue",
        "bold underline white on bright black",
        "on_green",
        "BLUE on Yellow",
        "color0",
        "grey5 on rgb123",
        "underline color200 on color17",
        "bold color100",
    ])
    def test_round_trip(self, spec: str) -> None:
        color = parse(spec)
        assert parse(color.to_spec_string()) == color
