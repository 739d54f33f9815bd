"""
skycoords CLI - Main Application

This is the main entry point for the skycoords command-line interface.
"""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from skycoords.api.core.enums import AngleUnit
from skycoords.cli.commands import convert, frames, glossary, separation
from skycoords.cli.utils.groups import SortedCommandsGroup
from skycoords.cli.utils.state import state


# Create main app
app = typer.Typer(
    name="skycoords",
    help="Celestial frame conversion CLI",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()

# .env values must be in the environment before Typer reads envvar options
load_dotenv()


@app.callback()
def main(
    units: AngleUnit = typer.Option(
        AngleUnit.DEGREES,
        "--units",
        "-u",
        help="Units for numeric angles on input and output",
        envvar="SKYCOORDS_UNITS",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    skycoords - Celestial Frame Conversions

    Convert sky positions between ICRS, Galactic and FK5 frames.

    [bold green]Examples:[/bold green]

        skycoords convert position 83.633 22.014 --from icrs --to galactic
        skycoords separation 0 0 180 0
        skycoords frames

    [bold blue]Environment Variables:[/bold blue]

        SKYCOORDS_UNITS - Default angle units (degrees or radians)
    """
    state["units"] = units
    state["verbose"] = verbose

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")
        console.print(f"[dim]Using units: {units.value}[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from skycoords import __version__

    console.print(f"[bold]skycoords[/bold] version [cyan]{__version__}[/cyan]")


# Register command groups organized by category

app.add_typer(
    convert.app,
    name="convert",
    help="Frame conversion commands",
    rich_help_panel="Coordinates",
)
app.command("separation", rich_help_panel="Coordinates")(separation.show_separation)
app.command("frames", rich_help_panel="Coordinates")(frames.list_frames)
app.add_typer(
    glossary.app,
    name="glossary",
    help="Reference frame glossary",
    rich_help_panel="Utilities",
)


if __name__ == "__main__":
    app()
