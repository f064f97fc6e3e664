class FingerprintTreeError(Exception):
    """Base error for fingerprint tree operations."""


class TreeInvariantError(FingerprintTreeError, ValueError):
    """Raised when a node's mappings violate the tree invariants."""

    def __init__(self, query: int, signature: str, detail: str) -> None:
        self.query = query
        self.signature = signature
        super().__init__(f"query {query}, response {signature!r}: {detail}")
