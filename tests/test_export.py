from pathlib import Path

import pytest

from fptree.config import settings
from fptree.core.export import RenderedTree, render_tree, write_rendered
from fptree.core.markup import render_markup
from fptree.core.node import FingerprintNode
from fptree.core.rules import render_rules


def test_render_tree_runs_both_renderers(two_level_tree: FingerprintNode) -> None:
    rendered = render_tree(two_level_tree)
    assert rendered.markup == render_markup(two_level_tree)
    assert rendered.rules == render_rules(two_level_tree)


def test_write_rendered_uses_configured_names(tmp_path: Path) -> None:
    rendered = RenderedTree(markup='<query id="0">\n</query>\n', rules="")
    markup_path, rules_path = write_rendered(rendered, tmp_path / "out")
    assert markup_path == tmp_path / "out" / settings.markup_filename
    assert rules_path == tmp_path / "out" / settings.rules_filename
    assert markup_path.read_text(encoding="utf-8") == rendered.markup
    assert rules_path.read_text(encoding="utf-8") == ""


def test_write_rendered_defaults_to_settings_output_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, two_level_tree: FingerprintNode
) -> None:
    monkeypatch.setattr(settings, "output_dir", tmp_path / "artifacts")
    monkeypatch.setattr(settings, "rules_filename", "resolvers.pl")
    _, rules_path = write_rendered(render_tree(two_level_tree))
    assert rules_path == tmp_path / "artifacts" / "resolvers.pl"
    assert "ruleset => [" in rules_path.read_text(encoding="utf-8")
