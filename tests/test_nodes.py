# tests/test_nodes.py

from __future__ import annotations

import gc

import pytest

from selection_trail.core.exceptions import TreeStructureError
from selection_trail.document import CommentNode, DocumentRoot, ElementNode, TextNode


def test_append_child_records_parent_and_index() -> None:
    root = ElementNode(kind="div")
    a = root.append_child(ElementNode(kind="a"))
    b = root.append_child(ElementNode(kind="b"))

    assert a.parent is root
    assert b.parent is root
    assert (a.index, b.index) == (0, 1)
    assert root.child_position(b) == 2


def test_insert_child_renumbers_following_siblings() -> None:
    root = ElementNode(kind="div")
    a = root.append_child(ElementNode(kind="a"))
    c = root.append_child(ElementNode(kind="c"))
    b = root.insert_child(1, ElementNode(kind="b"))

    assert [n.kind for n in root.children] == ["a", "b", "c"]
    assert [a.index, b.index, c.index] == [0, 1, 2]


def test_node_cannot_be_attached_twice() -> None:
    first = ElementNode(kind="div")
    second = ElementNode(kind="div")
    child = first.append_child(ElementNode(kind="p"))

    with pytest.raises(TreeStructureError):
        second.append_child(child)
    with pytest.raises(TreeStructureError):
        first.append_child(child)


def test_cycles_are_rejected() -> None:
    root = ElementNode(kind="div")
    inner = root.append_child(ElementNode(kind="p"))

    with pytest.raises(TreeStructureError):
        inner.append_child(root)
    with pytest.raises(TreeStructureError):
        inner.append_child(inner)


def test_leaves_cannot_have_children() -> None:
    with pytest.raises(TreeStructureError):
        TextNode(text="x").append_child(ElementNode(kind="b"))
    with pytest.raises(TreeStructureError):
        CommentNode(text="x").append_child(TextNode(text="y"))


def test_detach_and_extract_children() -> None:
    root = ElementNode(kind="div")
    a, b, c = (root.append_child(ElementNode(kind=k)) for k in "abc")

    b.detach()
    assert b.parent is None
    assert b.index is None
    assert [n.kind for n in root.children] == ["a", "c"]
    assert c.index == 1

    removed = root.extract_children()
    assert removed == [a, c]
    assert root.children == []
    assert all(n.parent is None for n in removed)


def test_detached_node_can_be_reattached() -> None:
    first = ElementNode(kind="div")
    second = ElementNode(kind="section")
    child = first.append_child(ElementNode(kind="p"))

    child.detach()
    second.append_child(child)
    assert child.parent is second


def test_navigation_helpers(paragraph_tree) -> None:
    world = paragraph_tree["world"]

    assert world.root is paragraph_tree["div"]
    assert world.depth == 3
    assert paragraph_tree["div"].depth == 0
    assert [n.kind for n in world.iter_ancestors()] == ["#text", "span", "p", "div"]
    assert [n.kind for n in paragraph_tree["div"].iter_subtree()] == [
        "div", "p", "text", "span", "#text",
    ]


def test_text_content() -> None:
    root = DocumentRoot()
    p = root.append_child(ElementNode(kind="P"))
    p.append_child(TextNode(text="Hello "))
    p.append_child(CommentNode(text="ignored"))
    b = p.append_child(ElementNode(kind="B"))
    b.append_child(TextNode(text="world"))

    assert root.text_content == "Hello world"
    assert TextNode(text=None).text_content is None


def test_nodes_compare_by_identity() -> None:
    assert TextNode(text="same") != TextNode(text="same")
    node = ElementNode(kind="div")
    assert node == node


def test_kinds_and_flags() -> None:
    assert DocumentRoot().kind == "#document"
    assert CommentNode(text="x").kind == "#comment"
    assert TextNode(text="x").kind == "#text"
    assert TextNode(text="x").is_text
    assert not CommentNode(text="x").is_text
    assert not ElementNode(kind="div").is_leaf


def test_child_keeps_its_ancestors_alive() -> None:
    def make_leaf():
        root = ElementNode(kind="div")
        p = root.append_child(ElementNode(kind="p"))
        return p.append_child(TextNode(text="x"))

    leaf = make_leaf()
    gc.collect()

    assert [n.kind for n in leaf.iter_ancestors()] == ["#text", "p", "div"]
    assert leaf.root.kind == "div"


def test_cycle_check_covers_deep_ancestors() -> None:
    top = ElementNode(kind="div")
    node = top
    for _ in range(50):
        node = node.append_child(ElementNode(kind="div"))

    with pytest.raises(TreeStructureError):
        node.append_child(top)
