from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class ServerDescriptor:
    vendor: str = ""
    product: str = ""
    version: str = ""

    def label(self) -> str:
        return f"{self.vendor} {self.product} {self.version}"

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)
