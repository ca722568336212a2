class SelectionTrailError(Exception):
    """Base exception for selection_trail failures."""


class TreeStructureError(SelectionTrailError):
    """Raised when a document tree would violate its structural rules."""


class SelectionPathError(SelectionTrailError):
    """Raised when a child-index path cannot be resolved to a node."""
