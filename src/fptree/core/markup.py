from __future__ import annotations

import logging
from typing import List, Optional

from fptree.core.merge import merge_descriptors
from fptree.core.node import FingerprintNode
from fptree.core.observability import log_event
from fptree.core.registry import RenderContext

logger = logging.getLogger(__name__)


def _render_node(node: FingerprintNode, context: RenderContext, out: List[str]) -> None:
    node.check_invariants()
    context.nodes_rendered += 1
    out.append(f'<query id="{context.query_index(node.query)}">\n')

    for signature, server in node.unique_hits.items():
        out.append(f'<response id="{context.response_index(signature)}">{server.label()}</response>\n')

    for signature, servers in node.multiple_hits.items():
        combined = merge_descriptors(servers)
        out.append(f'<response id="{context.response_index(signature)}">{combined.label()}</response>\n')

    for signature, child in node.children.items():
        out.append(f'<response id="{context.response_index(signature)}">\n')
        _render_node(child, context, out)
        out.append("  </response>\n")

    out.append("</query>\n")


def render_markup(node: FingerprintNode, context: Optional[RenderContext] = None) -> str:
    """Render the tree rooted at ``node`` as nested ``<query>``/``<response>`` markup."""
    ctx = context if context is not None else RenderContext()
    out: List[str] = []
    _render_node(node, ctx, out)
    log_event(logger, "render.completed", format="markup", **ctx.summary())
    return "".join(out)


__all__ = ["render_markup"]
