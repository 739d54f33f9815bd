"""
Glossary Command

Displays reference frame terms and definitions.
"""

from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from skycoords.cli.utils.output import console


app = typer.Typer(
    name="glossary",
    help="Reference frame glossary",
    rich_help_panel="Utilities",
)

# Glossary terms organized by category
GLOSSARY_TERMS: dict[str, dict[str, str]] = {
    "Frames": {
        "ICRS": (
            "International Celestial Reference System. A fixed frame defined by the positions of "
            "distant extragalactic radio sources rather than by the Earth, so it does not drift "
            "with the Earth's motion. It is the current IAU standard."
        ),
        "Galactic": (
            "A frame aligned with the projected plane of the Milky Way. Galactic longitude l is "
            "measured from the direction of the galactic center and galactic latitude b from the "
            "galactic plane."
        ),
        "FK5": (
            "An equatorial frame tied to the Earth's mean equator and equinox at a given epoch. "
            "Because the Earth's axis precesses, FK5 positions only make sense together with their "
            "equinox, most commonly J2000."
        ),
    },
    "Concepts": {
        "Equinox": (
            "The reference epoch, given as a Julian year, that fixes the orientation of an FK5 "
            "frame. FK5 positions at different equinoxes describe the same sky in rotated frames."
        ),
        "Precession": (
            "The slow change in orientation of the Earth's rotation axis, completing a cycle in "
            "about 26,000 years. Converting between FK5 equinoxes applies the precession rotation "
            "from J2000 to each equinox."
        ),
        "Frame Bias": (
            "The small fixed rotation, a few tens of milliarcseconds, between ICRS and FK5 at J2000."
        ),
        "North Galactic Pole": (
            "The direction perpendicular to the galactic plane on the northern side. Its position "
            "in FK5 J2000, together with the longitude of the galactic center, defines the "
            "Galactic frame."
        ),
        "Angular Separation": (
            "The great-circle distance between two positions on the sky. It is computed with the "
            "Vincenty formula, which stays accurate for nearly coincident and nearly opposite points."
        ),
        "Sexagesimal": (
            "Base-60 notation for angles, such as 12h30m45s for right ascension or +45d12m30s for "
            "declination."
        ),
    },
}


@app.command()
def show(
    term: Annotated[
        str | None,
        typer.Argument(help="Specific term to look up (optional)"),
    ] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Filter by category"),
    ] = None,
) -> None:
    """
    Display reference frame terms glossary.

    Examples:
        skycoords glossary show                   # Show all terms
        skycoords glossary show Precession        # Look up specific term
        skycoords glossary show --category Frames # Show terms in category
    """
    if term:
        for cat, terms in GLOSSARY_TERMS.items():
            if category and cat != category:
                continue
            if term in terms:
                console.print(f"\n[bold cyan]{term}[/bold cyan]")
                console.print(f"[dim]{cat}[/dim]\n")
                console.print(Panel(terms[term], border_style="blue"))
                return

        console.print(f"[red]Term '{term}' not found in glossary.[/red]")
        console.print("\n[dim]Use 'skycoords glossary show' to see all available terms.[/dim]")
        raise typer.Exit(code=1)

    if category and category not in GLOSSARY_TERMS:
        console.print(f"[red]Category '{category}' not found.[/red]")
        console.print("\n[dim]Available categories:[/dim]")
        for cat in GLOSSARY_TERMS:
            console.print(f"  • {cat}")
        raise typer.Exit(code=1)

    categories_to_show = [category] if category else list(GLOSSARY_TERMS.keys())
    for cat in categories_to_show:
        console.print(f"\n[bold cyan]{cat}[/bold cyan]\n")

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=None,
            padding=(0, 2),
        )
        table.add_column("Term", style="bold", width=22)
        table.add_column("Definition", style="")

        for term_name, definition in sorted(GLOSSARY_TERMS[cat].items()):
            # Truncate long definitions for table view
            short_def = definition[:97] + "..." if len(definition) > 100 else definition
            table.add_row(term_name, short_def)

        console.print(table)

    console.print("\n[dim]Use 'skycoords glossary show <term>' to see the full definition of a term.[/dim]\n")
