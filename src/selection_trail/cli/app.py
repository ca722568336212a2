from __future__ import annotations

import typer

from selection_trail.cli.commands.trail import trail_command
from selection_trail.cli.commands.tree import tree_command

app = typer.Typer(
    name="selection-trail",
    help="Ancestry trails for document selections",
    add_completion=False,
)

app.command("trail")(trail_command)
app.command("tree")(tree_command)


def main():
    app()


if __name__ == "__main__":
    main()
