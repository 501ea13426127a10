from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from family_tree_utils.cli.utils import load_gedcom, setup_verbose

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    setup_verbose(verbose)
    graph = load_gedcom(gedcom, verbose=verbose)

    people = graph.individuals.values()
    children = sum(len(fam.children_ids) for fam in graph.families)

    table = Table(title=f"GEDCOM Statistics: {gedcom.name}")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(graph.individuals)))
    table.add_row("Families", str(len(graph.families)))
    table.add_row("Child links", str(children))
    table.add_row("Individuals without a surname", str(sum(1 for p in people if not p.last_names)))

    console.print(table)
