from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fptree.core import FingerprintNode, ServerDescriptor  # noqa: E402


@pytest.fixture
def acme() -> ServerDescriptor:
    return ServerDescriptor(vendor="Acme", product="Box", version="1.0")


@pytest.fixture
def two_level_tree(acme: ServerDescriptor) -> FingerprintNode:
    root = FingerprintNode(query=1)
    child = root.add_child("C", FingerprintNode(query=2))
    child.record("D", acme)
    return root
