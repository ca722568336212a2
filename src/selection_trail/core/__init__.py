from selection_trail.core.exceptions import (
    SelectionPathError,
    SelectionTrailError,
    TreeStructureError,
)

__all__ = [
    "SelectionPathError",
    "SelectionTrailError",
    "TreeStructureError",
]
