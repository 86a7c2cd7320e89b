"""Typer CLI application for inspecting and previewing color specs."""

from pathlib import Path
from typing import Annotated, Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from colorspec.codec.packed import pack, unpack
from colorspec.codec.spec_parser import parse
from colorspec.config import Settings
from colorspec.core.blend import blend_all
from colorspec.core.color import Color
from colorspec.core.constants import COLOR_NAMES, CUBE_SIZE, GREY_LEVELS
from colorspec.errors import ColorSpecError
from colorspec.log_config import configure_logging
from colorspec.theme import Theme

log = structlog.get_logger()

SAMPLE_TEXT = "sample"


def create_app(settings: Optional[Settings] = None) -> typer.Typer:
    """Create and configure the CLI application."""
    settings = settings or Settings.from_env()

    app = typer.Typer(
        name="colorspec",
        help="Parse, blend, and preview terminal color specs.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def fail(error: Exception) -> typer.Exit:
        message = error.message if isinstance(error, ColorSpecError) else str(error)
        console.print(f"[red]{escape(message)}[/]")
        return typer.Exit(1)

    def parse_or_exit(spec: str) -> Color:
        try:
            return parse(spec)
        except ColorSpecError as e:
            raise fail(e) from e

    @app.callback()
    def main(
        log_level: Annotated[str, typer.Option("--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ...)")] = settings.log_level,
    ) -> None:
        """Parse, blend, and preview terminal color specs."""
        configure_logging(log_level)

    @app.command()
    def show(
        spec: Annotated[str, typer.Argument(help="Color spec, e.g. 'bold red on blue'")],
        text: Annotated[str, typer.Argument(help="Text to colorize")] = SAMPLE_TEXT,
    ) -> None:
        """Print text colorized with a spec."""
        print(parse_or_exit(spec).colorize(text))

    @app.command()
    def check(
        spec: Annotated[str, typer.Argument(help="Color spec to validate")],
    ) -> None:
        """Validate a spec and show its canonical form."""
        color = parse_or_exit(spec)
        value = pack(color)
        print(f"spec:   {color.to_spec_string()}")
        print(f"mode:   {color.mode.value}")
        print(f"packed: {value} (0x{value:06x})")
        print(f"sample: {color.colorize(SAMPLE_TEXT)}")

    @app.command()
    def blend(
        specs: Annotated[list[str], typer.Argument(help="Specs to blend, base first")],
        text: Annotated[str, typer.Option("--text", "-t", help="Sample text")] = SAMPLE_TEXT,
    ) -> None:
        """Blend specs left to right and show the result."""
        color = blend_all(parse_or_exit(spec) for spec in specs)
        log.debug("Blended specs", specs=specs, result=color.to_spec_string())
        print(f"spec:   {color.to_spec_string()}")
        print(f"sample: {color.colorize(text)}")

    @app.command("unpack")
    def unpack_command(
        value: Annotated[str, typer.Argument(help="Packed color, decimal or 0x hex")],
    ) -> None:
        """Decode a packed color integer."""
        try:
            color = unpack(int(value, 0))
        except ValueError as e:
            raise fail(e) from e
        print(f"spec:   {color.to_spec_string()}")
        print(f"mode:   {color.mode.value}")
        print(f"sample: {color.colorize(SAMPLE_TEXT)}")

    @app.command()
    def palette() -> None:
        """Show the named colors, the color cube, and the grey ramp."""
        for name in COLOR_NAMES:
            swatch = Color.parse(f"on {name}").colorize("    ")
            bright = Color.parse(f"on bright {name}").colorize("    ")
            print(f"{swatch}{bright} {Color.parse(name).colorize(name)}")
        print()

        for r in range(CUBE_SIZE):
            row: list[str] = []
            for g in range(CUBE_SIZE):
                for b in range(CUBE_SIZE):
                    row.append(Color.parse(f"on rgb{r}{g}{b}").colorize("  "))
            print(f"{''.join(row)} rgb{r}GB")
        print()

        ramp = ''.join(Color.parse(f"on grey{n}").colorize("  ") for n in range(GREY_LEVELS))
        print(f"{ramp} grey0-{GREY_LEVELS - 1}")

    @app.command()
    def theme(
        path: Annotated[Optional[Path], typer.Argument(help="JSON theme file (default: $COLORSPEC_THEME)")] = None,
    ) -> None:
        """List the rules of a theme in their colors."""
        theme_path = path or settings.theme_path
        if theme_path is None:
            console.print("[red]No theme given and COLORSPEC_THEME is not set[/]")
            raise typer.Exit(1)

        try:
            loaded = Theme.load(theme_path)
        except ColorSpecError as e:
            raise fail(e) from e

        width = max((len(name) for name in loaded.rules), default=0)
        for name, color in loaded.rules.items():
            print(f"{name.ljust(width)}  {color.colorize(color.to_spec_string() or '(none)')}")

    return app
