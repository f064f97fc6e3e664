from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from fptree.config import settings
from fptree.core.markup import render_markup
from fptree.core.node import FingerprintNode
from fptree.core.observability import log_event
from fptree.core.rules import render_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedTree:
    markup: str
    rules: str


def render_tree(root: FingerprintNode) -> RenderedTree:
    """Run both renderers over ``root``, each with its own index registries."""
    return RenderedTree(markup=render_markup(root), rules=render_rules(root))


def write_rendered(rendered: RenderedTree, directory: Optional[Path] = None) -> Tuple[Path, Path]:
    destination = Path(directory or settings.output_dir)
    destination.mkdir(parents=True, exist_ok=True)
    markup_path = destination / settings.markup_filename
    rules_path = destination / settings.rules_filename
    markup_path.write_text(rendered.markup, encoding="utf-8")
    rules_path.write_text(rendered.rules, encoding="utf-8")
    log_event(logger, "export.written", markup_path=str(markup_path), rules_path=str(rules_path))
    return markup_path, rules_path


__all__ = ["RenderedTree", "render_tree", "write_rendered"]
