"""Wire serializer - the client-facing form of an evaluated tree.

The wire tree is plain JSON data. Elements are objects tagged with
``"$$typeof": "$RE"``; every other string that starts with the marker
character ``$`` gets one extra ``$`` so it can never be mistaken for a
tag on decode:

    "$"      -> "$$"
    "$$"     -> "$$$"
    "$5.00"  -> "$$5.00"

Object keys are never escaped.
"""

from __future__ import annotations

import json
from typing import Any, Union

from duet.engine.node import Element, Empty, Leaf, Node, PlainObject, Sequence
from duet.exceptions import UnsupportedNodeError, WireDecodeError

MARKER = "$"
ELEMENT_TAG_FIELD = "$$typeof"
ELEMENT_TAG = "$RE"

WireValue = Union[
    None, bool, int, float, str, list["WireValue"], dict[str, "WireValue"]
]


def escape_text(text: str) -> str:
    """Double a leading marker character."""
    if text.startswith(MARKER):
        return MARKER + text
    return text


def unescape_text(text: str) -> str:
    """Reverse ``escape_text``.

    Raises:
        WireDecodeError: If the text starts with a single, unescaped marker.
    """
    if text.startswith(MARKER * 2):
        return text[1:]
    if text.startswith(MARKER):
        raise WireDecodeError(f"Unescaped marker in wire text: {text!r}")
    return text


def to_wire(tree: Node) -> WireValue:
    """Serialize an evaluated tree to wire data.

    Raises:
        UnsupportedNodeError: If a component element is still present.
    """
    if isinstance(tree, Empty):
        return tree.value
    if isinstance(tree, Leaf):
        if isinstance(tree.value, str):
            return escape_text(tree.value)
        return tree.value
    if isinstance(tree, Sequence):
        return [to_wire(child) for child in tree.children]
    if isinstance(tree, Element):
        if not tree.is_host:
            raise UnsupportedNodeError(
                tree, f"component {tree.name} was not evaluated"
            )
        return {
            ELEMENT_TAG_FIELD: ELEMENT_TAG,
            "type": escape_text(tree.kind),  # type: ignore[arg-type]
            "key": None if tree.key is None else escape_text(tree.key),
            "props": {name: to_wire(value) for name, value in tree.props.items()},
        }
    if isinstance(tree, PlainObject):
        return {name: to_wire(value) for name, value in tree.fields.items()}
    raise UnsupportedNodeError(tree)


def from_wire(value: Any) -> Node:
    """Decode wire data back into a tree of nodes.

    Raises:
        WireDecodeError: If the data is not valid wire data.
    """
    if value is None or isinstance(value, bool):
        return Empty(value)
    if isinstance(value, str):
        return Leaf(unescape_text(value))
    if isinstance(value, (int, float)):
        return Leaf(value)
    if isinstance(value, list):
        return Sequence(tuple(from_wire(child) for child in value))
    if isinstance(value, dict):
        if value.get(ELEMENT_TAG_FIELD) == ELEMENT_TAG:
            return _element_from_wire(value)
        return PlainObject({name: from_wire(field) for name, field in value.items()})
    raise WireDecodeError(f"Not a wire value: {type(value).__name__}")


def _element_from_wire(value: dict[str, Any]) -> Element:
    kind = value.get("type")
    props = value.get("props", {})
    key = value.get("key")
    if not isinstance(kind, str):
        raise WireDecodeError(f"Element without a tag name: {value!r}")
    if not isinstance(props, dict):
        raise WireDecodeError(f"Element props must be an object: {value!r}")
    if key is not None and not isinstance(key, str):
        raise WireDecodeError(f"Element key must be a string: {value!r}")
    return Element(
        kind=unescape_text(kind),
        props={name: from_wire(prop) for name, prop in props.items()},
        key=None if key is None else unescape_text(key),
    )


def dumps_wire(value: WireValue) -> str:
    """Encode wire data as compact JSON text."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def loads_wire(text: str | bytes) -> WireValue:
    """Parse JSON text produced by ``dumps_wire``."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise WireDecodeError(f"Invalid wire JSON: {e}") from e
