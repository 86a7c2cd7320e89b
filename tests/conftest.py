"""Shared fixtures for colorspec tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def theme_data() -> dict[str, str]:
    """A small theme in the shape applications store it."""
    return {
        "due": "red",
        "overdue": "bold red",
        "tagged": "underline",
        "active": "color15 on rgb013",
    }


@pytest.fixture
def theme_file(tmp_path: Path, theme_data: dict[str, str]) -> Path:
    """Theme data written to a JSON file."""
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(theme_data))
    return path
