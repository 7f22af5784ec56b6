"""Tests for the Renderable model."""

import pytest

from duet import Element, Empty, Leaf, PlainObject, Sequence, UnsupportedNodeError, h, to_node
from duet.engine.node import iter_elements


def Card(title):
    return h("div", None, title)


def test_scalars_become_leaves():
    assert to_node("hi") == Leaf("hi")
    assert to_node(3) == Leaf(3)
    assert to_node(2.5) == Leaf(2.5)


def test_none_and_booleans_become_empty():
    assert to_node(None) == Empty(None)
    assert to_node(True) == Empty(True)
    assert to_node(False) == Empty(False)


def test_lists_become_sequences_in_order():
    node = to_node(["a", 1, None, ["b"]])
    assert node == Sequence(
        (Leaf("a"), Leaf(1), Empty(None), Sequence((Leaf("b"),)))
    )


def test_mappings_become_plain_objects():
    node = to_node({"title": "x", "tags": ["a"]})
    assert node == PlainObject({"title": Leaf("x"), "tags": Sequence((Leaf("a"),))})


def test_nodes_pass_through_unchanged():
    leaf = Leaf("x")
    assert to_node(leaf) is leaf


def test_unsupported_value_raises():
    with pytest.raises(UnsupportedNodeError):
        to_node(object())


def test_h_single_child_stored_as_is():
    el = h("p", None, "text")
    assert el.props == {"children": "text"}
    assert el.is_host
    assert not el.is_component


def test_h_multiple_children_stored_as_list():
    el = h("p", {"id": "x"}, "a", "b")
    assert el.props == {"id": "x", "children": ["a", "b"]}


def test_h_stringifies_key():
    assert h(Card, {"title": "t"}, key=7).key == "7"
    assert h("li").key is None


def test_component_element_name():
    el = h(Card, {"title": "t"})
    assert el.is_component
    assert el.name == "Card"


def test_element_with_bad_kind_is_neither_host_nor_component():
    el = Element(kind=42)  # type: ignore[arg-type]
    assert not el.is_host
    assert not el.is_component


def test_iter_elements_walks_children_and_props():
    tree = h("ul", {"extra": h("b")}, [h("li", None, "x"), h(Card, {"title": h("i")})])
    kinds = [el.kind for el in iter_elements(tree)]
    # component props are not walked
    assert kinds == ["ul", "b", "li", Card]
