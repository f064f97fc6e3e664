from .types import ServerDescriptor
from .errors import FingerprintTreeError, TreeInvariantError
from .registry import IndexRegistry, RenderContext
from .merge import merge_descriptors
from .node import FingerprintNode
from .markup import render_markup
from .rules import RuleState, render_rules
from .export import RenderedTree, render_tree, write_rendered

__all__ = [
    "ServerDescriptor",
    "FingerprintTreeError",
    "TreeInvariantError",
    "IndexRegistry",
    "RenderContext",
    "merge_descriptors",
    "FingerprintNode",
    "render_markup",
    "RuleState",
    "render_rules",
    "RenderedTree",
    "render_tree",
    "write_rendered",
]
