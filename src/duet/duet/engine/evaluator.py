"""Evaluator - resolves a Renderable into a tree with no components left.

Like the server half of ReactDOM: every component is called, awaited if
it is async, and its output inlined in place of the element. The
emitters downstream only ever see host elements, scalars and data.

Siblings (sequence children and prop fields) are evaluated concurrently
and joined in input order, so completion order never shows in output.
The first sibling to fail cancels the ones still running.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Iterable

from duet.engine.node import Element, Empty, Leaf, Node, PlainObject, Sequence, to_node
from duet.exceptions import UnsupportedNodeError

log = logging.getLogger(__name__)


async def evaluate(node: Any) -> Node:
    """Evaluate a tree until no component elements remain.

    Args:
        node: A Renderable, or any plain value ``to_node`` accepts.

    Returns:
        The evaluated tree.

    Raises:
        UnsupportedNodeError: If a value has no Renderable shape.
        Exception: Anything a component raises, unchanged.
    """
    node = to_node(node)

    if isinstance(node, (Empty, Leaf)):
        return node

    if isinstance(node, Sequence):
        children = await _gather(evaluate(child) for child in node.children)
        return Sequence(tuple(children))

    if isinstance(node, PlainObject):
        return PlainObject(await _evaluate_fields(node.fields))

    if isinstance(node, Element):
        if node.is_host:
            props = await _evaluate_fields(node.props)
            return Element(kind=node.kind, props=props, key=node.key)
        if node.is_component:
            rendered = await _invoke(node)
            return await evaluate(rendered)
        raise UnsupportedNodeError(
            node, f"element kind {node.kind!r} is neither a tag nor a callable"
        )

    raise UnsupportedNodeError(node)


async def _evaluate_fields(fields: dict[str, Any]) -> dict[str, Node]:
    """Evaluate every value of a mapping, keeping its keys and key order."""
    keys = list(fields)
    values = await _gather(evaluate(fields[key]) for key in keys)
    return dict(zip(keys, values))


async def _invoke(element: Element) -> Any:
    """Call a component with its props, awaiting the result if needed."""
    log.debug(f"Invoking component {element.name}")
    result = element.kind(**element.props)  # type: ignore[operator]
    if inspect.isawaitable(result):
        result = await result
    return result


async def _gather(coros: Iterable[Awaitable[Node]]) -> list[Node]:
    """Run sibling evaluations concurrently, results in input order.

    The first failure cancels the siblings still running.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
