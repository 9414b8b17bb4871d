from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from zfs_savings_matrix.domain.models.pair import Pair


class ReclaimOracleProtocol(Protocol):
    def reclaim(self, pair: Pair) -> int: ...

    def reclaim_batch(self, pairs: Sequence[Pair]) -> dict[Pair, int]: ...
