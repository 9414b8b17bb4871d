from __future__ import annotations

import re
import shlex
from collections.abc import Sequence
from typing import ClassVar, final, override

from zfs_savings_matrix.domain.models.pair import Pair
from zfs_savings_matrix.domain.protocols.command_runner_protocol import CommandRunnerProtocol
from zfs_savings_matrix.domain.protocols.reclaim_oracle_protocol import ReclaimOracleProtocol
from zfs_savings_matrix.domain.protocols.snapshot_lister_protocol import SnapshotListerProtocol
from zfs_savings_matrix.errors import ReclaimParseError, SnapshotListParseError


@final
class ZfsGateway(ReclaimOracleProtocol, SnapshotListerProtocol):
    """Read-only access to one dataset through the ``zfs`` command.

    Reclaim sizes come from ``zfs destroy -n`` (dry run) over a snapshot
    range ``dataset@from%to``; nothing is ever destroyed.
    """

    _RECLAIM_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"^reclaim\t(0|[1-9][0-9]*)$", re.MULTILINE
    )

    def __init__(
        self,
        dataset: str,
        runner: CommandRunnerProtocol,
        zfs_cmd: str = "/sbin/zfs",
        recursive: bool = False,
    ) -> None:
        name = str(dataset or "").strip()
        if not name:
            raise ValueError("dataset name must not be empty")
        if "@" in name:
            raise ValueError(f"dataset name must not contain '@': {name!r}")
        self._dataset = name
        self._runner = runner
        self._zfs_cmd = zfs_cmd
        self._recursive = recursive

    @property
    def dataset(self) -> str:
        return self._dataset

    def _list_argv(self) -> list[str]:
        return [
            self._zfs_cmd,
            "list",
            "-H",
            "-t",
            "snapshot",
            "-o",
            "name",
            "-s",
            "creation",
            self._dataset,
        ]

    def _dry_run_argv(self, pair: Pair) -> list[str]:
        flags = "-nvp"
        if self._recursive:
            flags += "r"
        return [self._zfs_cmd, "destroy", flags, f"{self._dataset}@{pair.range_spec}"]

    @override
    def list_snapshots(self) -> list[str]:
        output = self._runner.run(self._list_argv()).stdout
        marker = f"{self._dataset}@"
        snapshots: list[str] = []
        for line in output.strip().splitlines():
            name = line.strip()
            if not name.startswith(marker) or len(name) == len(marker):
                raise SnapshotListParseError(
                    f"unexpected line in snapshot listing of {self._dataset}: {line!r}"
                )
            snapshots.append(name[len(marker) :])
        return snapshots

    @classmethod
    def parse_reclaim(cls, output: str) -> int:
        matches = cls._RECLAIM_REGEX.findall(output)
        if len(matches) != 1:
            raise ReclaimParseError(
                f"expected exactly one reclaim line, found {len(matches)}"
            )
        return int(matches[0])

    @classmethod
    def parse_reclaim_lines(cls, output: str) -> list[int]:
        return [int(value) for value in cls._RECLAIM_REGEX.findall(output)]

    @override
    def reclaim(self, pair: Pair) -> int:
        result = self._runner.run(self._dry_run_argv(pair))
        try:
            return self.parse_reclaim(result.stdout)
        except ReclaimParseError as exc:
            raise ReclaimParseError(f"{pair}: {exc}") from None

    def build_batch_script(self, pairs: Sequence[Pair]) -> str:
        return "".join(f"{shlex.join(self._dry_run_argv(pair))}\n" for pair in pairs)

    @override
    def reclaim_batch(self, pairs: Sequence[Pair]) -> dict[Pair, int]:
        if not pairs:
            return {}
        result = self._runner.run_script(self.build_batch_script(pairs))
        values = self.parse_reclaim_lines(result.stdout)
        if len(values) != len(pairs):
            message = f"batched reclaim returned {len(values)} report lines for {len(pairs)} pairs"
            diagnostic = result.stderr.strip()
            if diagnostic:
                message = f"{message}: {diagnostic}"
            raise ReclaimParseError(message)
        return dict(zip(pairs, values, strict=True))
