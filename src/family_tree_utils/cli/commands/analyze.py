from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree_utils.cli.utils import run_report
from family_tree_utils.title_codes import load_title_codes

GEDCOM_ARG = typer.Argument(..., exists=True, dir_okay=False, readable=True)
VERBOSE_OPT = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable debug logging",
)


def one_name_command(
    gedcom: Path = GEDCOM_ARG,
    verbose: bool = VERBOSE_OPT,
):
    """
    List people recorded under a single name.
    """
    run_report(gedcom, "one-name", verbose=verbose)


def title_command(
    gedcom: Path = GEDCOM_ARG,
    codes: Optional[Path] = typer.Option(
        None,
        "--codes",
        "-c",
        help="Title codes file (defaults to paths.title_codes in the config)",
    ),
    verbose: bool = VERBOSE_OPT,
):
    """
    List people with a title code (Dr., Rev. ...) in one of their names.
    """
    run_report(gedcom, "title", title_codes=load_title_codes(codes), verbose=verbose)


def same_last_name_command(
    gedcom: Path = GEDCOM_ARG,
    verbose: bool = VERBOSE_OPT,
):
    """
    List wives whose surnames all match their husband's.
    """
    run_report(gedcom, "same-last-name", verbose=verbose)


def child_name_mismatch_command(
    gedcom: Path = GEDCOM_ARG,
    verbose: bool = VERBOSE_OPT,
):
    """
    List children whose surname differs from their father's (Soundex-aware).
    """
    run_report(gedcom, "child-name-mismatch", verbose=verbose)
