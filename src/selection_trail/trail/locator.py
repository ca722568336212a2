# src/selection_trail/trail/locator.py

"""
Child-index paths.

A path names a node by the 0-based child indexes taken from the root:
``""`` is the root itself, ``"0/1"`` is the second child of the root's first
child. The CLI uses paths to stand in for a live selection.
"""

from __future__ import annotations

from typing import List

from selection_trail.core.exceptions import SelectionPathError
from selection_trail.document.nodes import DocumentNode

from .models import SelectionEndpoint

PATH_SEPARATOR = "/"


def parse_path(path: str) -> List[int]:
    """Split ``"0/1/0"`` into ``[0, 1, 0]``."""
    steps: List[int] = []
    for part in path.strip().strip(PATH_SEPARATOR).split(PATH_SEPARATOR):
        if not part:
            continue
        if not part.isdigit():
            raise SelectionPathError(
                f"Path step {part!r} in {path!r} is not a child index"
            )
        steps.append(int(part))
    return steps


def resolve_path(root: DocumentNode, path: str) -> DocumentNode:
    node = root
    for depth, step in enumerate(parse_path(path)):
        if step >= len(node.children):
            raise SelectionPathError(
                f"Step {depth} of {path!r}: {node!r} has "
                f"{len(node.children)} children, no index {step}"
            )
        node = node.children[step]
    return node


def node_path(node: DocumentNode) -> str:
    """Inverse of resolve_path(): the path from ``node.root`` to ``node``."""
    steps = [
        str(ancestor.parent.child_position(ancestor) - 1)
        for ancestor in node.iter_ancestors()
        if ancestor.parent is not None
    ]
    return PATH_SEPARATOR.join(reversed(steps))


def locate(root: DocumentNode, path: str, offset: int = 0) -> SelectionEndpoint:
    """Return a SelectionEndpoint for the node at ``path`` below ``root``."""
    return SelectionEndpoint(node=resolve_path(root, path), offset=offset)
