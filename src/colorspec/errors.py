"""Exceptions raised by colorspec."""

from __future__ import annotations


class ColorSpecError(Exception):
    """Base exception for all colorspec errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidColorSpec(ColorSpecError):
    """Raised when a color spec contains a token that cannot be parsed."""

    def __init__(self, token: str, spec: str | None = None, **details: object) -> None:
        super().__init__(
            f"The color '{token}' is not recognized.",
            details={"token": token, "spec": spec, **details},
        )
        self.token = token
        self.spec = spec


class ThemeError(ColorSpecError):
    """Raised when a theme cannot be read or has the wrong shape."""
