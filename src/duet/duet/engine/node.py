"""Renderable tree model - the shape every other engine module consumes.

A Renderable is one of five tagged variants:
- Empty: None or a boolean, renders to nothing
- Leaf: a string or number
- Sequence: ordered siblings
- Element: a host tag or a component callable, plus props and an optional key
- PlainObject: a mapping that is data, not an element

Application code usually writes plain Python values and ``h()`` calls;
``to_node()`` is the single place where those values are tagged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Union

from duet.exceptions import UnsupportedNodeError


@dataclass(frozen=True)
class Empty:
    """Absence of content (None, True or False)."""

    value: bool | None = None


@dataclass(frozen=True)
class Leaf:
    """A text or number scalar."""

    value: str | int | float


@dataclass(frozen=True)
class Sequence:
    """Ordered siblings. Order is preserved by every consumer."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Element:
    """A host element (``kind`` is a tag name) or a component (``kind`` is callable).

    ``props`` is what a component receives as keyword arguments. For host
    elements ``props["children"]`` is the nested content and every other
    entry is an attribute.
    """

    kind: str | Callable[..., Any]
    props: dict[str, Any] = field(default_factory=dict)
    key: str | None = None

    @property
    def is_host(self) -> bool:
        return isinstance(self.kind, str)

    @property
    def is_component(self) -> bool:
        return not self.is_host and callable(self.kind)

    @property
    def name(self) -> str:
        """Element name for debugging."""
        if self.is_host:
            return self.kind  # type: ignore[return-value]
        return getattr(self.kind, "__name__", repr(self.kind))


@dataclass(frozen=True)
class PlainObject:
    """Structured data carried in props (e.g. a list of records)."""

    fields: dict[str, Node] = field(default_factory=dict)


Node = Union[Empty, Leaf, Sequence, Element, PlainObject]

NODE_TYPES = (Empty, Leaf, Sequence, Element, PlainObject)


def to_node(value: Any) -> Node:
    """Tag a plain Python value as a Renderable.

    Raises:
        UnsupportedNodeError: If the value has no Renderable shape.
    """
    if isinstance(value, NODE_TYPES):
        return value
    # bool before int: bool is an int subclass
    if value is None or isinstance(value, bool):
        return Empty(value)
    if isinstance(value, (str, int, float)):
        return Leaf(value)
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(to_node(child) for child in value))
    if isinstance(value, Mapping):
        return PlainObject({str(k): to_node(v) for k, v in value.items()})
    raise UnsupportedNodeError(value)


def h(
    kind: str | Callable[..., Any],
    props: Mapping[str, Any] | None = None,
    *children: Any,
    key: str | int | None = None,
) -> Element:
    """Create an element (like React.createElement).

    Positional children become ``props["children"]``: a single child is
    stored as is, several are stored as a list.

    Examples:
        h("section", None, h("h1", None, "Welcome"), "body text")
        h(Post, {"slug": "p1"}, key="p1")
    """
    merged = dict(props or {})
    if len(children) == 1:
        merged["children"] = children[0]
    elif children:
        merged["children"] = list(children)
    return Element(kind=kind, props=merged, key=None if key is None else str(key))


def iter_elements(node: Any) -> Iterator[Element]:
    """Yield every Element reachable from ``node``, props included."""
    node = to_node(node)
    if isinstance(node, Element):
        yield node
        # component props are call arguments, not tree content
        if node.is_host:
            for value in node.props.values():
                yield from iter_elements(value)
    elif isinstance(node, Sequence):
        for child in node.children:
            yield from iter_elements(child)
    elif isinstance(node, PlainObject):
        for value in node.fields.values():
            yield from iter_elements(value)
