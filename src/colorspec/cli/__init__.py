"""Command line interface for colorspec."""

from colorspec.cli.app import create_app
from colorspec.cli.main import main

__all__ = ["create_app", "main"]
