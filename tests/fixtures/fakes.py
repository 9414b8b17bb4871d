from __future__ import annotations

from collections.abc import Sequence

from zfs_savings_matrix.domain.models.pair import Pair
from zfs_savings_matrix.domain.protocols.command_runner_protocol import CommandResult


class FakeRunner:
    """Records every invocation and answers from canned stdout/stderr."""

    def __init__(
        self,
        remote: bool = False,
        stdout: str = "",
        stderr: str = "",
        script_stdout: str = "",
    ) -> None:
        self._remote = remote
        self.stdout = stdout
        self.stderr = stderr
        self.script_stdout = script_stdout
        self.calls: list[list[str]] = []
        self.scripts: list[str] = []

    @property
    def is_remote(self) -> bool:
        return self._remote

    def run(self, argv: Sequence[str]) -> CommandResult:
        self.calls.append(list(argv))
        return CommandResult(stdout=self.stdout, stderr=self.stderr)

    def run_script(self, script: str) -> CommandResult:
        self.scripts.append(script)
        return CommandResult(stdout=self.script_stdout, stderr=self.stderr)


class FakeOracle:
    """In-memory oracle; sizes default to a deterministic function of the pair."""

    def __init__(self, sizes: dict[Pair, int] | None = None) -> None:
        self._sizes = sizes
        self.single_calls: list[Pair] = []
        self.batch_calls: list[list[Pair]] = []

    def _size(self, pair: Pair) -> int:
        if self._sizes is not None:
            return self._sizes[pair]
        return len(pair.from_label) * 1000 + len(pair.to_label)

    def reclaim(self, pair: Pair) -> int:
        self.single_calls.append(pair)
        return self._size(pair)

    def reclaim_batch(self, pairs: Sequence[Pair]) -> dict[Pair, int]:
        self.batch_calls.append(list(pairs))
        return {pair: self._size(pair) for pair in pairs}
