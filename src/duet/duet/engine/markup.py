"""Markup emitter - converts an evaluated tree to server-rendered HTML."""

from __future__ import annotations

import html

from duet.engine.node import Element, Empty, Leaf, Node, PlainObject, Sequence
from duet.exceptions import UnsupportedNodeError


def scalar_text(value: str | int | float) -> str:
    """Text form of a leaf value (integral floats print without ``.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MarkupRenderer:
    """Renders an evaluated tree to markup text.

    The tree must come out of ``evaluate()``: component elements and
    plain objects have no markup form and are rejected.
    """

    # Keeps adjacent text siblings apart as separate text nodes
    TEXT_SEPARATOR = "<!-- -->"

    def render(self, tree: Node) -> str:
        """Render a tree to markup.

        Args:
            tree: An evaluated tree.

        Returns:
            Markup string.

        Raises:
            UnsupportedNodeError: On component elements, plain objects,
                or non-scalar attribute values.
        """
        if isinstance(tree, Empty):
            return ""
        if isinstance(tree, Leaf):
            return html.escape(scalar_text(tree.value))
        if isinstance(tree, Sequence):
            return self._render_sequence(tree)
        if isinstance(tree, Element):
            if tree.is_host:
                return self._render_element(tree)
            raise UnsupportedNodeError(
                tree, f"component {tree.name} was not evaluated"
            )
        if isinstance(tree, PlainObject):
            raise UnsupportedNodeError(tree, "a plain object has no markup form")
        raise UnsupportedNodeError(tree)

    def _render_sequence(self, seq: Sequence) -> str:
        parts: list[str] = []
        was_text = False
        for child in seq.children:
            is_text = isinstance(child, Leaf)
            if was_text and is_text:
                parts.append(self.TEXT_SEPARATOR)
            parts.append(self.render(child))
            was_text = is_text
        return "".join(parts)

    def _render_element(self, element: Element) -> str:
        tag = element.kind
        attrs = "".join(
            f' {name}="{self._render_attribute(element, name, value)}"'
            for name, value in element.props.items()
            if name != "children"
        )
        children = element.props.get("children", Empty())
        return f"<{tag}{attrs}>{self.render(children)}</{tag}>"

    def _render_attribute(self, element: Element, name: str, value: Node) -> str:
        if isinstance(value, Empty):
            return ""
        if isinstance(value, Leaf):
            return html.escape(scalar_text(value.value))
        raise UnsupportedNodeError(
            value, f"attribute {name!r} of <{element.kind}> is not a scalar"
        )


def to_markup(tree: Node) -> str:
    """Render an evaluated tree to markup."""
    return MarkupRenderer().render(tree)
