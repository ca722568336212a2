# src/selection_trail/trail/builder.py

"""
Ancestry trails for selection endpoints.

A trail lists one descriptor per node from the document root down to the
selected node:

    ("div", "p[1/2]", "text[2/5]")

* The descriptor of an ancestor carries ``[position/total]`` when it has more
  than one child: the 1-based position of the child the walk came up from.
* The descriptor of the selected node itself carries ``[offset/length]`` when
  it is a text leaf.

Nothing here raises on imperfect input. The trail is shown while the user
edits, so a degraded descriptor is preferred to an exception.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from selection_trail.document.nodes import DocumentNode
from selection_trail.logging import get_logger

from .models import AncestryTrail, Selection, SelectionEndpoint

log = get_logger(__name__)

NULL_DESCRIPTOR = "<NULL>"
NO_SELECTION_DESCRIPTOR = "<No selection>"
UNKNOWN_LENGTH = "?"


def describe_node(
    cursor: DocumentNode,
    child: Optional[DocumentNode],
    offset: int,
) -> str:
    """
    Return the descriptor for ``cursor``.

    Args:
        cursor: The node being described.
        child: The node visited just before ``cursor`` on the way up, or
            ``None`` when ``cursor`` is the selected node itself.
        offset: The selection offset, used only for a selected text leaf.
    """
    message = cursor.kind.lower()

    if child is not None and len(cursor.children) > 1:
        total = len(cursor.children)
        position = cursor.child_position(child)
        if position is None:
            log.debug(
                "%r is not among the %d children of %r; omitting position",
                child,
                total,
                cursor,
            )
        else:
            message += f"[{position}/{total}]"
    elif child is None and cursor.is_text:
        text = cursor.text_content
        length = len(text) if text is not None else UNKNOWN_LENGTH
        message += f"[{offset}/{length}]"

    return message


def build_trail(endpoint: Optional[SelectionEndpoint]) -> AncestryTrail:
    """
    Build the root-first ancestry trail for one selection endpoint.

    A missing endpoint, or one without a node, yields ``("<NULL>",)``.
    """
    if endpoint is None or endpoint.node is None:
        return (NULL_DESCRIPTOR,)

    trail: List[str] = []
    child: Optional[DocumentNode] = None
    cursor: Optional[DocumentNode] = endpoint.node
    while cursor is not None:
        trail.append(describe_node(cursor, child, endpoint.offset))
        child = cursor
        cursor = cursor.parent

    trail.reverse()
    return tuple(trail)


def build_selection_trails(
    selection: Optional[Selection],
) -> Tuple[AncestryTrail, AncestryTrail]:
    """
    Return the ``(anchor, focus)`` trails for a selection.

    When there is no selection at all, both trails are ``("<No selection>",)``.
    """
    if selection is None:
        return (NO_SELECTION_DESCRIPTOR,), (NO_SELECTION_DESCRIPTOR,)
    return build_trail(selection.anchor), build_trail(selection.focus)
