import pytest
from pydantic import ValidationError

from fptree.config import Settings


def test_settings_defaults() -> None:
    config = Settings(_env_file=None)
    assert config.merge_policy == "wildcard"
    assert config.merge_wildcard == "*"
    assert config.merge_separator == "/"


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FPTREE_MERGE_POLICY", "concat")
    monkeypatch.setenv("FPTREE_MERGE_SEPARATOR", "|")
    config = Settings(_env_file=None)
    assert config.merge_policy == "concat"
    assert config.merge_separator == "|"


def test_settings_reject_unknown_policy() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, merge_policy="majority")
