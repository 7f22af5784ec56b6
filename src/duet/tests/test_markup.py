"""Tests for the markup emitter."""

import pytest

from duet import Element, Empty, Leaf, PlainObject, Sequence, UnsupportedNodeError, h, to_markup, to_node
from duet.engine.markup import MarkupRenderer


def Card():
    return h("div")


def test_section_with_adjacent_text_gets_separator():
    tree = Element("section", {"children": Sequence((Leaf("x"), Leaf("y")))})
    assert to_markup(tree) == "<section>x<!-- -->y</section>"


def test_adjacent_leaves_differ_from_single_leaf():
    assert to_markup(to_node(["a", "b"])) != to_markup(Leaf("ab"))
    assert to_markup(to_node(["a", "b"])) == "a<!-- -->b"


def test_numbers_count_as_text_siblings():
    assert to_markup(to_node(["(c) ", "Jae", " ", 2024])) == (
        "(c) <!-- -->Jae<!-- --> <!-- -->2024"
    )


def test_no_separator_next_to_elements():
    tree = to_node(["a", Element("b", {"children": Leaf("bold")}), "c"])
    assert to_markup(tree) == "a<b>bold</b>c"


def test_empty_renders_nothing_and_breaks_text_run():
    assert to_markup(Empty(None)) == ""
    assert to_markup(Empty(True)) == ""
    assert to_markup(to_node(["a", None, "b"])) == "ab"


def test_text_is_escaped():
    assert to_markup(Leaf('<script>"x" & \'y\'</script>')) == (
        "&lt;script&gt;&quot;x&quot; &amp; &#x27;y&#x27;&lt;/script&gt;"
    )


def test_integral_floats_print_like_integers():
    assert to_markup(Leaf(3.0)) == "3"
    assert to_markup(Leaf(2.5)) == "2.5"


def test_attributes_in_declared_order_and_escaped():
    tree = Element(
        "a",
        {"href": Leaf("/p?a=1&b=2"), "title": Leaf('say "hi"'), "children": Leaf("go")},
    )
    assert to_markup(tree) == '<a href="/p?a=1&amp;b=2" title="say &quot;hi&quot;">go</a>'


def test_empty_attribute_value():
    tree = Element("input", {"disabled": Empty(True)})
    assert to_markup(tree) == '<input disabled=""></input>'


def test_element_without_children():
    assert to_markup(Element("hr", {})) == "<hr></hr>"


def test_nested_elements():
    tree = Element(
        "ul",
        {"children": Sequence((Element("li", {"children": Leaf(1)}), Element("li", {"children": Leaf(2)})))},
    )
    assert to_markup(tree) == "<ul><li>1</li><li>2</li></ul>"


def test_unevaluated_component_is_rejected():
    with pytest.raises(UnsupportedNodeError, match="was not evaluated"):
        to_markup(h(Card))


def test_plain_object_is_rejected():
    with pytest.raises(UnsupportedNodeError):
        to_markup(PlainObject({"a": Leaf(1)}))


def test_non_scalar_attribute_is_rejected():
    tree = Element("div", {"style": PlainObject({"color": Leaf("red")})})
    with pytest.raises(UnsupportedNodeError, match="style"):
        to_markup(tree)


def test_separator_is_configurable_on_subclass():
    class Plain(MarkupRenderer):
        TEXT_SEPARATOR = "|"

    assert Plain().render(to_node(["a", "b"])) == "a|b"
