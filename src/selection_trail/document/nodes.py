# src/selection_trail/document/nodes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from selection_trail.core.exceptions import TreeStructureError


@dataclass(eq=False)
class DocumentNode:
    """
    Common base for every node of a live document tree.

    Subclasses declare ``kind`` (the node name, e.g. ``"DIV"`` or ``"#text"``).

    Attributes:
        children:
            Ordered child nodes. The order defines sibling positions.
        parent:
            The node whose ``children`` hold this one, or ``None`` for a root.
            Used for upward traversal only; attaching and detaching always
            go through the parent.
        index:
            0-based position of this node inside ``parent.children``,
            recorded when the node is attached. ``None`` for detached nodes.

    Nodes compare by identity.
    """

    children: List["DocumentNode"] = field(
        default_factory=list, init=False, repr=False
    )
    parent: Optional["DocumentNode"] = field(default=None, init=False, repr=False)
    index: Optional[int] = field(default=None, init=False, repr=False)

    is_leaf = False
    is_text = False

    # ------------------------------------------------------------------ #
    # Tree construction
    # ------------------------------------------------------------------ #

    def append_child(self, child: "DocumentNode") -> "DocumentNode":
        """Attach ``child`` as the last child of this node and return it."""
        return self.insert_child(len(self.children), child)

    def insert_child(self, position: int, child: "DocumentNode") -> "DocumentNode":
        """
        Attach ``child`` at ``position`` (0-based, clamped to the valid range).

        Raises:
            TreeStructureError: if this node is a leaf, if ``child`` already
                has a parent, or if attaching it would create a cycle.
        """
        if self.is_leaf:
            raise TreeStructureError(
                f"{self.kind!r} nodes cannot have children"
            )
        if child.parent is not None:
            raise TreeStructureError(
                f"{child!r} is already attached to {child.parent!r}"
            )
        # A childless node can only be an ancestor of itself.
        if child is self or (
            child.children
            and any(ancestor is child for ancestor in self.iter_ancestors())
        ):
            raise TreeStructureError(
                f"Attaching {child!r} under {self!r} would create a cycle"
            )

        position = max(0, min(position, len(self.children)))
        self.children.insert(position, child)
        child.parent = self
        self._renumber(position)
        return child

    def extend(self, children: List["DocumentNode"]) -> None:
        for child in children:
            self.append_child(child)

    def detach(self) -> "DocumentNode":
        """Remove this node from its parent (no-op for detached nodes)."""
        parent = self.parent
        if parent is None:
            return self
        position = parent.child_position(self)
        if position is not None:
            del parent.children[position - 1]
            parent._renumber(position - 1)
        self.parent = None
        self.index = None
        return self

    def extract_children(self) -> List["DocumentNode"]:
        """Detach and return every child, in order."""
        removed: List[DocumentNode] = []
        while self.children:
            removed.append(self.children[0].detach())
        return removed

    def _renumber(self, start: int) -> None:
        for idx in range(start, len(self.children)):
            self.children[idx].index = idx

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> "DocumentNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Number of ancestors above this node (0 for the root)."""
        return sum(1 for _ in self.iter_ancestors()) - 1

    def iter_ancestors(self) -> Iterator["DocumentNode"]:
        """Yield this node, then each ancestor up to and including the root."""
        node: Optional[DocumentNode] = self
        while node is not None:
            yield node
            node = node.parent

    def iter_subtree(self) -> Iterator["DocumentNode"]:
        """Yield this node and all descendants in depth-first order."""
        stack: List[DocumentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def child_position(self, child: "DocumentNode") -> Optional[int]:
        """
        Return the 1-based position of ``child`` among this node's children,
        or ``None`` if it is not one of them.

        The index recorded at attach time is tried first; an identity scan
        covers children whose recorded index has gone stale.
        """
        idx = child.index
        if idx is not None and idx < len(self.children) and self.children[idx] is child:
            return idx + 1
        for position, candidate in enumerate(self.children, start=1):
            if candidate is child:
                return position
        return None

    @property
    def text_content(self) -> Optional[str]:
        """Concatenated text of all text leaves in this subtree."""
        return "".join(
            node.text or ""
            for node in self.iter_subtree()
            if node.is_text
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind}>"


@dataclass(eq=False, repr=False)
class ElementNode(DocumentNode):
    """A container node such as ``DIV`` or ``P``."""

    kind: str


@dataclass(eq=False, repr=False)
class DocumentRoot(DocumentNode):
    """The document node that owns the top-level elements."""

    kind: str = field(default="#document", init=False)


@dataclass(eq=False, repr=False)
class TextNode(DocumentNode):
    """A text-bearing leaf. ``text`` may be missing on malformed input."""

    text: Optional[str] = None
    kind: str = "#text"

    is_leaf = True
    is_text = True

    @property
    def text_content(self) -> Optional[str]:
        return self.text

    def __repr__(self) -> str:
        return f"<TextNode {self.kind}: {self.text!r}>"


@dataclass(eq=False, repr=False)
class CommentNode(DocumentNode):
    """A comment leaf. It occupies a sibling slot but carries no offsets."""

    text: str = ""
    kind: str = field(default="#comment", init=False)

    is_leaf = True

    @property
    def text_content(self) -> Optional[str]:
        return self.text
