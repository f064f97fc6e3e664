from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from fptree.core.errors import TreeInvariantError
from fptree.core.types import ServerDescriptor

logger = logging.getLogger(__name__)


@dataclass
class FingerprintNode:
    """
    One step of the fingerprinting decision tree.

    ``hits`` maps a response signature to the servers that answered ``query``
    with it; a single entry is a unique hit, two or more are merged when the
    tree is rendered. ``children`` maps a response signature to the next
    query to issue. A signature lives in at most one of the two mappings.
    """

    query: int = 0
    hits: Dict[str, List[ServerDescriptor]] = field(default_factory=dict)
    children: Dict[str, "FingerprintNode"] = field(default_factory=dict)

    # Read-only snapshots of ``hits``; write through ``record`` instead.
    @property
    def unique_hits(self) -> Mapping[str, ServerDescriptor]:
        return MappingProxyType(
            {signature: servers[0] for signature, servers in self.hits.items() if len(servers) == 1}
        )

    @property
    def multiple_hits(self) -> Mapping[str, Tuple[ServerDescriptor, ...]]:
        return MappingProxyType(
            {signature: tuple(servers) for signature, servers in self.hits.items() if len(servers) > 1}
        )

    def record(self, signature: str, descriptor: ServerDescriptor) -> None:
        if signature in self.children:
            raise self._violation(signature, "already continues to a child query")
        self.hits.setdefault(signature, []).append(descriptor)

    def add_child(self, signature: str, child: "FingerprintNode") -> "FingerprintNode":
        if signature in self.hits:
            raise self._violation(signature, "already resolves to a server")
        if signature in self.children:
            raise self._violation(signature, "already continues to a child query")
        self.children[signature] = child
        return child

    def child_for(self, signature: str, query: int) -> "FingerprintNode":
        existing = self.children.get(signature)
        if existing is not None:
            return existing
        return self.add_child(signature, FingerprintNode(query=query))

    def check_invariants(self) -> None:
        for signature, servers in self.hits.items():
            if not servers:
                raise self._violation(signature, "has an empty hit list")
            if signature in self.children:
                raise self._violation(signature, "is both a hit and a child edge")

    def iter_nodes(self) -> Iterator["FingerprintNode"]:
        yield self
        for child in self.children.values():
            yield from child.iter_nodes()

    def depth(self) -> int:
        return 1 + max((child.depth() for child in self.children.values()), default=0)

    def _violation(self, signature: str, detail: str) -> TreeInvariantError:
        logger.error("Fingerprint tree invariant violated at query %s for %r: %s", self.query, signature, detail)
        return TreeInvariantError(self.query, signature, detail)
