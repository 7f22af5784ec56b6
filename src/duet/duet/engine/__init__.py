"""duet.engine - evaluation and the two emitters.

This is like React's server core: no components, just the machinery
that resolves them and writes the results out.
"""

from duet.engine.evaluator import evaluate
from duet.engine.markup import MarkupRenderer, to_markup
from duet.engine.node import (
    Element,
    Empty,
    Leaf,
    Node,
    PlainObject,
    Sequence,
    h,
    iter_elements,
    to_node,
)
from duet.engine.render import RenderedPage, render_page, render_wire_only
from duet.engine.wire import WireValue, dumps_wire, from_wire, loads_wire, to_wire

__all__ = [
    "Element",
    "Empty",
    "Leaf",
    "Node",
    "PlainObject",
    "Sequence",
    "h",
    "iter_elements",
    "to_node",
    "evaluate",
    "MarkupRenderer",
    "to_markup",
    "WireValue",
    "to_wire",
    "from_wire",
    "dumps_wire",
    "loads_wire",
    "RenderedPage",
    "render_page",
    "render_wire_only",
]
