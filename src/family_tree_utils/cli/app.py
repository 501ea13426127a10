from __future__ import annotations

import typer

from family_tree_utils.cli.commands.analyze import (
    child_name_mismatch_command,
    one_name_command,
    same_last_name_command,
    title_command,
)
from family_tree_utils.cli.commands.stats import stats_command
from family_tree_utils.cli.commands.title_codes import title_codes_command

app = typer.Typer(
    name="ftu",
    help="Family tree utilities: consistency checks for GEDCOM files",
    add_completion=False,
)

app.command("one-name")(one_name_command)
app.command("title")(title_command)
app.command("same-last-name")(same_last_name_command)
app.command("child-name-mismatch")(child_name_mismatch_command)
app.command("stats")(stats_command)
app.command("title-codes")(title_codes_command)


def main():
    app()


if __name__ == "__main__":
    main()
