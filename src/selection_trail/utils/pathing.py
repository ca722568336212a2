# src/selection_trail/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

from selection_trail.config import get_config

# <project_root>/src/selection_trail/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory (the one that
    holds src/, tests/, config/ and mock_files/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under the mock files directory
    (``paths.mock_files_dir`` in the config, ``mock_files/`` by default).
    """
    mock_dir = get_config().paths.get("mock_files_dir") or "mock_files"
    return resolve_project_path(Path(mock_dir) / filename)
