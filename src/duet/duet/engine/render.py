"""Render entry points - one evaluation pass feeding both emitters.

Like ReactDOM.render(): takes a tree of components and produces output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from duet.engine.evaluator import evaluate
from duet.engine.markup import to_markup
from duet.engine.wire import WireValue, to_wire

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPage:
    """Both renditions of one evaluated tree."""

    markup: str
    wire: WireValue


async def render_page(root: Any) -> RenderedPage:
    """Evaluate ``root`` once, then emit markup and wire data from the result.

    Nothing is returned if evaluation fails: the error propagates and no
    partial output exists.
    """
    tree = await evaluate(root)
    page = RenderedPage(markup=to_markup(tree), wire=to_wire(tree))
    log.debug(f"Rendered page: {len(page.markup)} chars of markup")
    return page


async def render_wire_only(root: Any) -> WireValue:
    """Evaluate ``root`` and serialize it, skipping markup."""
    tree = await evaluate(root)
    return to_wire(tree)
