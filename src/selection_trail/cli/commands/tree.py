from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from selection_trail.cli.utils import fail, load_document
from selection_trail.core.exceptions import SelectionTrailError
from selection_trail.document import DocumentNode
from selection_trail.trail import node_path

console = Console()

PREVIEW_CHARS = 30


def _label(node: DocumentNode) -> str:
    label = f"[bold]{escape(node.kind.lower())}[/bold]"
    if node.is_leaf:
        text = node.text_content or ""
        preview = text if len(text) <= PREVIEW_CHARS else text[:PREVIEW_CHARS] + "..."
        label += f" {escape(repr(preview))}"
    path = node_path(node)
    return f"{label}  [dim]{escape(path or '(root)')}[/dim]"


def _add_subtree(branch: Tree, node: DocumentNode) -> None:
    pending = [(branch, node)]
    while pending:
        parent_branch, parent = pending.pop()
        for child in parent.children:
            pending.append((parent_branch.add(_label(child)), child))


def tree_command(
    document: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print a document tree with the child-index path of every node.
    """
    try:
        doc = load_document(document, verbose=verbose)
    except SelectionTrailError as exc:
        raise fail(exc)

    view = Tree(_label(doc.root))
    _add_subtree(view, doc.root)
    console.print(view)
