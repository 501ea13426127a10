from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from family_tree_utils.title_codes import ensure_title_codes_file, load_title_codes

console = Console()


def title_codes_command(
    codes: Optional[Path] = typer.Option(
        None,
        "--codes",
        "-c",
        help="Title codes file (defaults to paths.title_codes in the config)",
    ),
    edit: bool = typer.Option(
        False,
        "--edit",
        "-e",
        help="Open the file in the system editor",
    ),
):
    """
    Show the configured title codes, creating the default list if missing.
    """
    path = ensure_title_codes_file(codes)

    if edit:
        typer.launch(str(path))
        return

    title_codes = load_title_codes(path)
    console.print(f"[bold]Title codes[/bold] ({escape(str(path))}):")
    if not title_codes:
        console.print("  (none configured)")
    for code in title_codes:
        console.print(f"  {escape(code)}")
