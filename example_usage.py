"""
Example usage of the fingerprint tree renderers.

Builds a two-level resolver tree and prints the markup and fpdns ruleset
renderings.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repository's src directory is on the path for direct execution.
ROOT_DIR = Path(__file__).resolve().parent
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fptree.core import FingerprintNode, ServerDescriptor, render_tree
from fptree.core.observability import configure_logging


def main() -> None:
    configure_logging()
    root = FingerprintNode(query=1)
    root.record("q r aa NOERROR", ServerDescriptor("ISC", "BIND", "9.16"))
    root.record("q r NOTIMP", ServerDescriptor("NLnet Labs", "Unbound", "1.13"))
    root.record("q r NOTIMP", ServerDescriptor("NLnet Labs", "Unbound", "1.17"))

    follow_up = root.child_for("q r REFUSED", query=4)
    follow_up.record("q r SERVFAIL", ServerDescriptor("PowerDNS", "Recursor", "4.8"))
    follow_up.record("q r FORMERR", ServerDescriptor("Microsoft", "Windows DNS", "2019"))

    rendered = render_tree(root)
    print(rendered.markup)
    print(rendered.rules)


if __name__ == "__main__":
    main()
