"""
Public interface for the ancestry trail layer.

    from selection_trail.trail import (
        SelectionEndpoint,
        Selection,
        build_trail,
        build_selection_trails,
        locate,
    )
"""

from __future__ import annotations

from .models import AncestryTrail, Selection, SelectionEndpoint
from .builder import (
    NO_SELECTION_DESCRIPTOR,
    NULL_DESCRIPTOR,
    UNKNOWN_LENGTH,
    build_selection_trails,
    build_trail,
    describe_node,
)
from .locator import locate, node_path, parse_path, resolve_path

__all__ = [
    "AncestryTrail",
    "Selection",
    "SelectionEndpoint",
    "NO_SELECTION_DESCRIPTOR",
    "NULL_DESCRIPTOR",
    "UNKNOWN_LENGTH",
    "build_selection_trails",
    "build_trail",
    "describe_node",
    "locate",
    "node_path",
    "parse_path",
    "resolve_path",
]
