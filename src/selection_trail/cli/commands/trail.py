from __future__ import annotations

from itertools import zip_longest
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from selection_trail.cli.utils import fail, load_document, write_json
from selection_trail.core.exceptions import SelectionTrailError
from selection_trail.logging import get_logger
from selection_trail.trail import build_selection_trails, locate

console = Console()
log = get_logger(__name__)


def trail_command(
    document: Path = typer.Argument(..., exists=True, readable=True),
    anchor: Optional[str] = typer.Option(
        None,
        "--anchor",
        "-a",
        help="Child-index path of the anchor node, e.g. 0/1/0 (omit for no selection)",
    ),
    anchor_offset: int = typer.Option(0, "--anchor-offset", help="Anchor offset"),
    focus: Optional[str] = typer.Option(
        None,
        "--focus",
        "-f",
        help="Child-index path of the focus node (defaults to the anchor)",
    ),
    focus_offset: Optional[int] = typer.Option(
        None,
        "--focus-offset",
        help="Focus offset (defaults to the anchor offset when --focus is omitted)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the trails as JSON"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the trails as JSON to this file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the anchor and focus ancestry trails of a selection.
    """
    try:
        tree = load_document(document, verbose=verbose)
        if anchor is not None:
            anchor_endpoint = locate(tree.root, anchor, anchor_offset)
            if focus is None:
                focus_endpoint = locate(
                    tree.root,
                    anchor,
                    anchor_offset if focus_offset is None else focus_offset,
                )
            else:
                focus_endpoint = locate(tree.root, focus, focus_offset or 0)
            tree.select(anchor_endpoint, focus_endpoint)
    except SelectionTrailError as exc:
        log.error("trail failed for %s: %s", document, exc)
        raise fail(exc)

    anchor_trail, focus_trail = build_selection_trails(tree.get_selection())

    if as_json or out is not None:
        write_json(
            {"anchor": list(anchor_trail), "focus": list(focus_trail)},
            out=out,
            pretty=pretty,
        )
        return

    table = Table(title="Selection Trail")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Anchor", style="bold")
    table.add_column("Focus", style="bold")

    for depth, (a, f) in enumerate(zip_longest(anchor_trail, focus_trail, fillvalue="")):
        table.add_row(str(depth), escape(a), escape(f))

    console.print(table)
