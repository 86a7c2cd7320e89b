"""Themes: named color rules loaded from configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import structlog

from colorspec.core.blend import blend_all
from colorspec.core.color import Color
from colorspec.errors import InvalidColorSpec, ThemeError

log = structlog.get_logger()


@dataclass
class Theme:
    """
    A set of named colors, such as ``{"overdue": "bold red", "due": "red"}``.

    Every spec is parsed when the theme is built, so a bad entry fails
    loading instead of surfacing later during rendering. Several rules can
    apply to one piece of text; they are blended in the order given.

    Example:
        >>> theme = Theme.from_dict({"due": "red", "tagged": "underline"})
        >>> theme.colorize("Pay rent", "due", "tagged")
        '\\x1b[4;31mPay rent\\x1b[0m'
    """
    rules: dict[str, Color] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Theme:
        """Build a theme from rule names mapped to spec strings."""
        rules: dict[str, Color] = {}
        for name, spec in data.items():
            if not isinstance(spec, str):
                raise ThemeError(
                    f"Theme rule '{name}' must be a spec string, got {type(spec).__name__}",
                    details={"rule": name},
                )
            try:
                rules[name] = Color.parse(spec)
            except InvalidColorSpec as e:
                e.details["rule"] = name
                raise
        return cls(rules=rules)

    @classmethod
    def load(cls, path: str | Path) -> Theme:
        """Load a theme from a JSON object of rule names to specs."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ThemeError(f"Cannot read theme {path}: {e}", details={"path": str(path)}) from e

        if not isinstance(data, dict):
            raise ThemeError(f"Theme {path} must be a JSON object", details={"path": str(path)})

        theme = cls.from_dict(data)
        log.debug("Loaded theme", path=str(path), rules=len(theme.rules))
        return theme

    def to_dict(self) -> dict[str, str]:
        """Serialize rules back to canonical spec strings."""
        return {name: color.to_spec_string() for name, color in self.rules.items()}

    def color_for(self, *names: str) -> Color:
        """Blend the named rules in order; unknown names are skipped."""
        colors: list[Color] = []
        for name in names:
            color = self.rules.get(name)
            if color is None:
                log.debug("Unknown theme rule", rule=name)
                continue
            colors.append(color)
        return blend_all(colors)

    def colorize(self, text: str, *names: str) -> str:
        """Colorize text with the blend of the named rules."""
        return self.color_for(*names).colorize(text)

    def __contains__(self, name: object) -> bool:
        return name in self.rules

    def __len__(self) -> int:
        return len(self.rules)
