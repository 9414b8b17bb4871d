from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CommandResult:
    stdout: str
    stderr: str


class CommandRunnerProtocol(Protocol):
    @property
    def is_remote(self) -> bool: ...

    def run(self, argv: Sequence[str]) -> CommandResult: ...

    def run_script(self, script: str) -> CommandResult: ...
