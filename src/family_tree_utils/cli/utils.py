from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from family_tree_utils.config import get_config
from family_tree_utils.core.context import AnalysisContext
from family_tree_utils.core.exceptions import GedcomReadError
from family_tree_utils.core.pipeline import Pipeline
from family_tree_utils.loader import parse_gedcom
from family_tree_utils.logging import enable_debug, get_logger
from family_tree_utils.registry.entities import GedcomGraph

console = Console()
err_console = Console(stderr=True)

log = get_logger(__name__)


def setup_verbose(verbose: bool) -> None:
    if verbose:
        enable_debug()


def fail_read(exc: GedcomReadError) -> None:
    """Report an unreadable GEDCOM file and exit with status 1."""
    err_console.print(f"[red]Error reading GEDCOM file:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def load_gedcom(path: Path, *, verbose: bool = False) -> GedcomGraph:
    """
    Parse a GEDCOM file, turning read failures into a CLI error.
    """
    t0 = time.perf_counter()

    try:
        graph = parse_gedcom(path)
    except GedcomReadError as exc:
        fail_read(exc)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return graph


def run_report(
    gedcom: Path,
    analyzer: str,
    *,
    title_codes: Optional[List[str]] = None,
    verbose: bool = False,
) -> None:
    """
    Run one analyzer over a GEDCOM file and print its report verbatim.
    """
    setup_verbose(verbose)
    cfg = get_config()

    ctx = AnalysisContext(
        config=cfg,
        logger=log,
        input_path=str(gedcom),
        analyzer=analyzer,
        title_codes=list(title_codes or []),
        debug=verbose or bool(cfg.debug),
    )

    try:
        report = Pipeline(ctx).run()
    except GedcomReadError as exc:
        fail_read(exc)

    if verbose:
        console.log(
            f"{ctx.stats['individuals']} individuals, {ctx.stats['families']} families"
        )

    # Plain echo: names may contain [brackets] that rich would treat as markup.
    typer.echo(report)
