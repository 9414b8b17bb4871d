from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import override

from zfs_savings_matrix.domain.models.pair import Pair
from zfs_savings_matrix.errors import MatrixConsistencyError


@dataclass(frozen=True, slots=True)
class SavingsMatrix(Mapping[Pair, int]):
    """Reclaim sizes for every (from, to) pair of an ordered snapshot list.

    ``labels`` keeps the creation order; ``sizes`` is keyed by value, so a
    freshly built ``Pair`` finds the same entry as the one used on insert.
    """

    labels: tuple[str, ...]
    sizes: Mapping[Pair, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))

    @classmethod
    def from_entries(
        cls, labels: Sequence[str], entries: Mapping[Pair, int]
    ) -> "SavingsMatrix":
        matrix = cls(labels=tuple(labels), sizes=entries)
        matrix.validate()
        return matrix

    @property
    def expected_size(self) -> int:
        n = len(self.labels)
        return n * (n + 1) // 2

    def validate(self) -> None:
        positions = {label: index for index, label in enumerate(self.labels)}
        if len(positions) != len(self.labels):
            raise MatrixConsistencyError("snapshot labels are not unique")
        for pair in self.sizes:
            from_index = positions.get(pair.from_label)
            to_index = positions.get(pair.to_label)
            if from_index is None or to_index is None:
                raise MatrixConsistencyError(f"pair {pair} references an unknown snapshot")
            if from_index > to_index:
                raise MatrixConsistencyError(f"pair {pair} is outside the triangular domain")
        if len(self.sizes) != self.expected_size:
            raise MatrixConsistencyError(
                f"matrix holds {len(self.sizes)} pairs, expected {self.expected_size}"
            )

    def get_size(self, from_label: str, to_label: str) -> int:
        try:
            return self.sizes[Pair(from_label=from_label, to_label=to_label)]
        except KeyError:
            raise MatrixConsistencyError(
                f"no reclaim size for pair {from_label} -> {to_label}"
            ) from None

    @override
    def __getitem__(self, key: Pair) -> int:
        return self.sizes[key]

    @override
    def __iter__(self) -> Iterator[Pair]:
        return iter(self.sizes)

    @override
    def __len__(self) -> int:
        return len(self.sizes)
