from __future__ import annotations

from functools import partial
from typing import Callable, List, Optional, Sequence

from fptree.config import settings
from fptree.core.types import ServerDescriptor

FIELDS = ("vendor", "product", "version")
POLICY_NAMES = ("wildcard", "first", "concat")


def _wildcard_field(values: List[str], *, wildcard: str) -> str:
    first = values[0]
    return first if all(value == first for value in values) else wildcard


def _first_field(values: List[str]) -> str:
    return values[0]


def _concat_field(values: List[str], *, separator: str) -> str:
    return separator.join(dict.fromkeys(values))


def _field_combiner(policy: str, wildcard: Optional[str], separator: Optional[str]) -> Callable[[List[str]], str]:
    if policy == "wildcard":
        return partial(_wildcard_field, wildcard=wildcard if wildcard is not None else settings.merge_wildcard)
    if policy == "first":
        return _first_field
    if policy == "concat":
        return partial(_concat_field, separator=separator if separator is not None else settings.merge_separator)
    raise ValueError(f"unknown merge policy {policy!r}")


def merge_descriptors(
    descriptors: Sequence[ServerDescriptor],
    policy: Optional[str] = None,
    wildcard: Optional[str] = None,
    separator: Optional[str] = None,
) -> ServerDescriptor:
    """
    Fold descriptors recorded under one response signature into one.

    Policies:
    - wildcard: keep a field only when every descriptor agrees, else the sentinel
    - first: the first descriptor wins
    - concat: distinct values in first-seen order, joined by the separator
    """
    if not descriptors:
        raise ValueError("cannot merge an empty descriptor list")
    combine = _field_combiner(policy or settings.merge_policy, wildcard, separator)
    if len(descriptors) == 1:
        return descriptors[0]
    merged = {name: combine([getattr(descriptor, name) for descriptor in descriptors]) for name in FIELDS}
    return ServerDescriptor(**merged)


__all__ = ["merge_descriptors", "POLICY_NAMES"]
