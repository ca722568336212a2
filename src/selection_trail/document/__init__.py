# src/selection_trail/document/__init__.py

"""
Public interface for the document tree layer.

    from selection_trail.document import (
        DocumentNode,
        ElementNode,
        TextNode,
        DocumentTree,
        build_tree,
        parse_html,
        load_html,
        load_json,
    )
"""

from __future__ import annotations

from .nodes import CommentNode, DocumentNode, DocumentRoot, ElementNode, TextNode
from .tree_builder import DocumentTree, build_tree, load_html, load_json, parse_html

__all__ = [
    "CommentNode",
    "DocumentNode",
    "DocumentRoot",
    "ElementNode",
    "TextNode",
    "DocumentTree",
    "build_tree",
    "load_html",
    "load_json",
    "parse_html",
]
