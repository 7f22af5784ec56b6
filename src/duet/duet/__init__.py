"""duet - dual rendering of component trees

Evaluates a tree of host elements and (possibly async) components once,
then writes it out twice: as server-rendered HTML and as a JSON wire
tree a client runtime can rebuild without calling server code.
"""

# Engine (core abstractions)
from duet.engine import (
    Element,
    Empty,
    Leaf,
    Node,
    PlainObject,
    RenderedPage,
    Sequence,
    WireValue,
    dumps_wire,
    evaluate,
    from_wire,
    h,
    loads_wire,
    render_page,
    render_wire_only,
    to_markup,
    to_node,
    to_wire,
)
from duet.exceptions import (
    DuetError,
    NotFoundError,
    UnsupportedNodeError,
    WireDecodeError,
)

__all__ = [
    # Model
    "Element",
    "Empty",
    "Leaf",
    "Node",
    "PlainObject",
    "Sequence",
    "h",
    "to_node",
    # Evaluation and emitters
    "evaluate",
    "to_markup",
    "to_wire",
    "from_wire",
    "dumps_wire",
    "loads_wire",
    "WireValue",
    # Entry points
    "RenderedPage",
    "render_page",
    "render_wire_only",
    # Errors
    "DuetError",
    "NotFoundError",
    "UnsupportedNodeError",
    "WireDecodeError",
]
