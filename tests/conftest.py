import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from selection_trail.document import ElementNode, TextNode  # noqa: E402


@pytest.fixture
def paragraph_tree():
    """
    div
    └── p
        ├── text "Hello"
        └── span
            └── #text "world"
    """
    div = ElementNode(kind="div")
    p = div.append_child(ElementNode(kind="p"))
    hello = p.append_child(TextNode(text="Hello", kind="text"))
    span = p.append_child(ElementNode(kind="span"))
    world = span.append_child(TextNode(text="world"))
    return {"div": div, "p": p, "hello": hello, "span": span, "world": world}
