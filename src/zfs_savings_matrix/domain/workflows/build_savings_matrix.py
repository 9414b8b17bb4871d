from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import final

from zfs_savings_matrix.domain.models.pair import Pair
from zfs_savings_matrix.domain.models.savings_matrix import SavingsMatrix
from zfs_savings_matrix.domain.protocols.reclaim_oracle_protocol import ReclaimOracleProtocol


def enumerate_pairs(labels: Sequence[str]) -> list[Pair]:
    """Lower-triangular closure of ``labels``, ``to`` varying slowest.

    Batched oracle answers are matched back to pairs by position, so this
    order must not change.
    """
    pairs: list[Pair] = []
    for to_index, to_label in enumerate(labels):
        for from_label in labels[: to_index + 1]:
            pairs.append(Pair(from_label=from_label, to_label=to_label))
    return pairs


@final
class BuildSavingsMatrix:
    def __init__(
        self,
        oracle: ReclaimOracleProtocol,
        batched: bool,
        logger: logging.Logger,
    ) -> None:
        self._oracle = oracle
        self._batched = batched
        self._logger = logger

    def _query_each(self, pairs: Sequence[Pair]) -> dict[Pair, int]:
        sizes: dict[Pair, int] = {}
        for pair in pairs:
            started = time.monotonic()
            sizes[pair] = self._oracle.reclaim(pair)
            self._logger.debug(
                "[%s] -> [%s] took %.3fs and returned %d",
                pair.from_label,
                pair.to_label,
                time.monotonic() - started,
                sizes[pair],
            )
        return sizes

    def _query_batch(self, pairs: Sequence[Pair]) -> dict[Pair, int]:
        started = time.monotonic()
        sizes = self._oracle.reclaim_batch(pairs)
        self._logger.debug(
            "Batched query of %d pairs took %.3fs",
            len(pairs),
            time.monotonic() - started,
        )
        return sizes

    def __call__(self, labels: Sequence[str]) -> SavingsMatrix:
        pairs = enumerate_pairs(labels)
        self._logger.info(
            "Querying %d pairs for %d snapshots (%s)",
            len(pairs),
            len(labels),
            "batched" if self._batched else "per pair",
        )
        if self._batched:
            sizes = self._query_batch(pairs)
        else:
            sizes = self._query_each(pairs)
        return SavingsMatrix.from_entries(labels, sizes)
