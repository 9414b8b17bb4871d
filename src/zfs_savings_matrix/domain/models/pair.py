from __future__ import annotations

from dataclasses import dataclass
from typing import override


@dataclass(frozen=True, slots=True)
class Pair:
    from_label: str
    to_label: str

    @property
    def range_spec(self) -> str:
        return f"{self.from_label}%{self.to_label}"

    @override
    def __str__(self) -> str:
        return f"{self.from_label} -> {self.to_label}"
