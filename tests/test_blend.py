"""Tests for blending colors."""

import pytest

from colorspec import Color, blend_all, merge, parse
from colorspec.core.color import ColorMode


class TestSameMode:
    """Blending colors of the same mode."""

    def test_256_overlay_wins(self) -> None:
        base = parse("color1 on color2")
        assert base.blend(parse("on color3")) == Color.from_256(fg=1, bg=3)
        assert base.blend(parse("color4")) == Color.from_256(fg=4, bg=2)

    def test_16_overlay_wins(self) -> None:
        blended = parse("bold red").blend(parse("bright on blue"))
        assert blended == Color(fg=2, bg=5, bold=True, bright=True)

    def test_16_styles_are_additive(self) -> None:
        blended = parse("bold bright red").blend(parse("green"))
        assert blended.bold is True
        assert blended.bright is True
        assert blended.fg == 3

    def test_unset_overlay_keeps_base(self) -> None:
        base = parse("red on white")
        assert base.blend(Color()) == base


class TestModeMismatch:
    """Blending a 16-color value with a 256-color value."""

    def test_upgrade_to_256(self) -> None:
        blended = parse("bold bright red on blue").blend(parse("color100"))
        assert blended.mode == ColorMode.EXTENDED_256
        assert blended == Color.from_256(fg=100)

    def test_upgrade_takes_both_sides(self) -> None:
        blended = parse("red").blend(parse("grey3 on rgb500"))
        assert blended == Color.from_256(fg=235, bg=196)

    def test_256_base_ignores_16_overlay(self) -> None:
        base = parse("color100 on color50")
        assert base.blend(parse("bold bright green on red")) == base

    def test_256_base_still_takes_underline(self) -> None:
        blended = parse("color100").blend(parse("underline red"))
        assert blended == Color.from_256(fg=100, underline=True)


class TestUnderline:
    """Underline is inherited in every case and never removed."""

    @pytest.mark.parametrize("base_spec,overlay_spec", [
        ("red", "underline blue"),
        ("color9", "underline color10"),
        ("red", "underline color10"),
        ("color9", "underline blue"),
    ])
    def test_overlay_underline_is_inherited(self, base_spec: str, overlay_spec: str) -> None:
        assert parse(base_spec).blend(parse(overlay_spec)).underline is True

    @pytest.mark.parametrize("base_spec,overlay_spec", [
        ("underline blue", "red"),
        ("underline color10", "color9"),
        ("underline blue", "color9"),
        ("underline color10", "red"),
    ])
    def test_base_underline_is_kept(self, base_spec: str, overlay_spec: str) -> None:
        assert parse(base_spec).blend(parse(overlay_spec)).underline is True


class TestMerge:
    """merge() and blend_all()."""

    def test_inputs_unchanged(self) -> None:
        base = parse("red")
        overlay = parse("underline on blue")
        merge(base, overlay)
        assert base == parse("red")
        assert overlay == parse("underline on blue")

    @pytest.mark.parametrize("spec", ["red on blue", "bold underline", "color7 on grey2", ""])
    def test_identity_base(self, spec: str) -> None:
        assert Color().blend(parse(spec)) == parse(spec)

    def test_blend_all(self) -> None:
        result = blend_all([parse("red"), parse("underline"), parse("on green")])
        assert result == Color(fg=2, bg=3, underline=True)

    def test_blend_all_empty(self) -> None:
        assert blend_all([]) == Color()
