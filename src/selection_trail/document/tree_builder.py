# src/selection_trail/document/tree_builder.py

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple, Union

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PreformattedString, Tag

from selection_trail.config import get_config
from selection_trail.core.exceptions import TreeStructureError
from selection_trail.logging import get_logger
from selection_trail.trail.models import Selection, SelectionEndpoint

from .nodes import CommentNode, DocumentNode, DocumentRoot, ElementNode, TextNode

log = get_logger(__name__)


@dataclass
class DocumentTree:
    """
    The live document a selection is made in.

    Attributes:
        root:
            The node with no parent. Every other node is reachable from it
            through ``children``.
    """

    root: DocumentNode

    _selection: Optional[Selection] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def iter_nodes(self) -> Iterator[DocumentNode]:
        """Iterate over every node of the tree, depth-first from the root."""
        return self.root.iter_subtree()

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #

    def get_selection(self) -> Optional[Selection]:
        """Return the current selection, or ``None`` when nothing is selected."""
        return self._selection

    def select(
        self,
        anchor: SelectionEndpoint,
        focus: Optional[SelectionEndpoint] = None,
    ) -> Selection:
        """Set the selection. Without ``focus`` the selection is collapsed."""
        for endpoint in (anchor, focus):
            if endpoint is None or endpoint.node is None:
                continue
            if endpoint.node.root is not self.root:
                raise TreeStructureError(
                    f"{endpoint.node!r} does not belong to this document"
                )
        self._selection = Selection(anchor=anchor, focus=focus or anchor)
        return self._selection

    def clear_selection(self) -> None:
        self._selection = None

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<DocumentTree root={self.root!r}>"


# ---------------------------------------------------------------------- #
# Nested data
# ---------------------------------------------------------------------- #

def _make_node(data: Any) -> Tuple[DocumentNode, List[Any]]:
    """
    Convert one nested-data entry into a node, without its children.

    Returns the node and the entries of its children (empty for leaves).

    Accepted shapes:
        "Hello"                                   -> TextNode
        {"text": "Hello", "kind": "text"}         -> TextNode
        {"comment": "note"}                       -> CommentNode
        {"tag": "div", "children": [...]}         -> ElementNode
    """
    if isinstance(data, str):
        return TextNode(text=data), []

    if not isinstance(data, dict):
        raise TreeStructureError(
            f"Expected a string or mapping for a node, got {type(data).__name__}"
        )

    if "tag" in data:
        children = data.get("children", [])
        if not isinstance(children, list):
            raise TreeStructureError(
                f"'children' of {data['tag']!r} must be a list"
            )
        return ElementNode(kind=str(data["tag"])), children

    if "text" in data:
        text = data["text"]
        if text is not None and not isinstance(text, str):
            raise TreeStructureError("'text' must be a string or null")
        return TextNode(text=text, kind=str(data.get("kind", "#text"))), []

    if "comment" in data:
        return CommentNode(text=str(data["comment"])), []

    raise TreeStructureError(
        f"Node mapping needs one of 'tag', 'text' or 'comment': {sorted(data)}"
    )


def _node_from_data(data: Any) -> DocumentNode:
    """Convert a nested-data entry and its whole subtree, depth first."""
    node, children = _make_node(data)
    pending: List[Tuple[DocumentNode, List[Any]]] = [(node, children)]
    while pending:
        parent, entries = pending.pop()
        for entry in entries:
            child, grandchildren = _make_node(entry)
            parent.append_child(child)
            if grandchildren:
                pending.append((child, grandchildren))
    return node


def build_tree(data: Any) -> DocumentTree:
    """
    Build a DocumentTree from nested plain data.

    A single mapping becomes the root itself; a list becomes the children of
    a ``#document`` root.
    """
    if isinstance(data, list):
        root: DocumentNode = DocumentRoot()
        for entry in data:
            root.append_child(_node_from_data(entry))
    else:
        root = _node_from_data(data)

    tree = DocumentTree(root=root)
    log.debug("Built document tree with %d nodes", len(tree))
    return tree


def load_json(path: Union[str, Path]) -> DocumentTree:
    """Load a DocumentTree from a JSON file of nested node data."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Document file not found: {file_path}")

    log.info("Loading JSON document: %s", file_path)
    with file_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise TreeStructureError(f"{file_path}: invalid JSON ({exc})") from exc
    return build_tree(data)


# ---------------------------------------------------------------------- #
# HTML
# ---------------------------------------------------------------------- #

def _convert_children(tag: Tag, parent: DocumentNode, keep_whitespace: bool) -> None:
    pending: List[Tuple[Tag, DocumentNode]] = [(tag, parent)]
    while pending:
        source, target = pending.pop()
        for element in source.children:
            # Comment subclasses PreformattedString, so it is checked first.
            if isinstance(element, Comment):
                target.append_child(CommentNode(text=str(element)))
            elif isinstance(element, PreformattedString):
                # Doctype, CDATA and processing instructions are not part of the tree.
                log.debug("Skipping %s", type(element).__name__)
            elif isinstance(element, NavigableString):
                text = str(element)
                if not keep_whitespace and not text.strip():
                    continue
                target.append_child(TextNode(text=text))
            elif isinstance(element, Tag):
                node = target.append_child(ElementNode(kind=element.name.upper()))
                pending.append((element, node))


def parse_html(markup: str, *, keep_whitespace: Optional[bool] = None) -> DocumentTree:
    """
    Parse HTML markup into a DocumentTree rooted at a ``#document`` node.

    Element kinds are upper-cased tag names, the way a browser reports
    ``nodeName``. Whitespace-only text is kept as real sibling nodes unless
    ``keep_whitespace`` (default: ``document.keep_whitespace`` from config)
    is false.
    """
    if keep_whitespace is None:
        keep_whitespace = bool(get_config().document.get("keep_whitespace", True))

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except RecursionError as exc:
        raise TreeStructureError("HTML is nested too deeply to parse") from exc
    root = DocumentRoot()
    _convert_children(soup, root, keep_whitespace)

    tree = DocumentTree(root=root)
    log.debug("Parsed HTML into %d nodes", len(tree))
    return tree


def load_html(
    path: Union[str, Path], *, keep_whitespace: Optional[bool] = None
) -> DocumentTree:
    """Read an HTML file and parse it with parse_html()."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Document file not found: {file_path}")

    log.info("Loading HTML document: %s", file_path)
    markup = file_path.read_text(encoding="utf-8", errors="replace")
    return parse_html(markup, keep_whitespace=keep_whitespace)
