# src/selection_trail/trail/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from selection_trail.document.nodes import DocumentNode

# Root-first sequence of descriptors, e.g. ("#document", "div", "p[1/2]", "#text[2/5]").
AncestryTrail = Tuple[str, ...]


@dataclass(frozen=True)
class SelectionEndpoint:
    """
    One boundary of a selection: a node and an offset relative to it.

    For a text leaf ``offset`` is a character index into its text; for a
    container it is conventionally a child index. It is never range-checked.
    ``node`` is ``None`` when the selection has no such boundary.
    """

    node: Optional["DocumentNode"]
    offset: int = 0


@dataclass(frozen=True)
class Selection:
    """The anchor (where the selection started) and focus (where it ends)."""

    anchor: SelectionEndpoint
    focus: SelectionEndpoint

    @property
    def is_collapsed(self) -> bool:
        return (
            self.anchor.node is self.focus.node
            and self.anchor.offset == self.focus.offset
        )
