from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fptree.core.merge import merge_descriptors
from fptree.core.node import FingerprintNode
from fptree.core.observability import log_event
from fptree.core.registry import RenderContext
from fptree.core.types import ServerDescriptor

logger = logging.getLogger(__name__)

FALLBACK_FINGERPRINT = ".+"


@dataclass(frozen=True)
class RuleState:
    """Path of query/response tokens leading to a node, e.g. ``q0r0q1``."""

    text: str = ""
    tokens: int = 0
    ends_with_query: bool = False

    def with_query(self, index: int) -> "RuleState":
        return RuleState(f"{self.text}q{index}", self.tokens + 1, True)

    def with_response(self, index: int) -> "RuleState":
        return RuleState(f"{self.text}r{index}", self.tokens + 1, False)

    @property
    def wants_fallback(self) -> bool:
        # bare trailing query token, and not the root's own token
        return self.ends_with_query and self.tokens > 1


def _result_rule(response_index: int, server: ServerDescriptor) -> str:
    return (
        f"{{ fingerprint => $iq[{response_index}], result => {{ vendor =>\"{server.vendor}\", "
        f"product=>\"{server.product}\", version=>\"{server.version}\"}}, }},\n"
    )


def _render_node(node: FingerprintNode, context: RenderContext, parent: RuleState, out: List[str]) -> None:
    node.check_invariants()
    context.nodes_rendered += 1
    state = parent.with_query(context.query_index(node.query))

    for signature, server in node.unique_hits.items():
        out.append(_result_rule(context.response_index(signature), server))

    for signature, servers in node.multiple_hits.items():
        out.append(_result_rule(context.response_index(signature), merge_descriptors(servers)))

    closing = state
    for signature, child in node.children.items():
        child_query = context.query_index(child.query)
        response = context.response_index(signature)
        out.append(
            f"{{ fingerprint=>$iq[{response}], header=>$qy[{child_query}], "
            f"query=>$nct[{child_query}], ruleset => [\n"
        )
        closing = state.with_response(response)
        _render_node(child, context, closing, out)
        out.append("]},\n")

    if closing.wants_fallback:
        out.append(f'{{ fingerprint => "{FALLBACK_FINGERPRINT}", state=>"{closing.text}r?" }},\n')


def render_rules(
    node: FingerprintNode,
    context: Optional[RenderContext] = None,
    state: Optional[RuleState] = None,
) -> str:
    """
    Render the tree rooted at ``node`` as fpdns ruleset entries.

    Response signatures are referenced through ``$iq[..]`` and child queries
    through ``$qy[..]``/``$nct[..]``; the arrays themselves are emitted by the
    consumer from the registries in ``context``.
    """
    ctx = context if context is not None else RenderContext()
    out: List[str] = []
    _render_node(node, ctx, state or RuleState(), out)
    log_event(logger, "render.completed", format="rules", **ctx.summary())
    return "".join(out)


__all__ = ["FALLBACK_FINGERPRINT", "RuleState", "render_rules"]
