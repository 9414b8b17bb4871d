from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from typing import final, override

from zfs_savings_matrix.domain.protocols.command_runner_protocol import (
    CommandResult,
    CommandRunnerProtocol,
)
from zfs_savings_matrix.errors import CommandError


def _normalize_timeout(timeout_seconds: int | None) -> int | None:
    if timeout_seconds is None:
        return None
    return max(1, int(timeout_seconds))


def _execute(
    argv: Sequence[str],
    stdin: str | None,
    timeout_seconds: int | None,
) -> CommandResult:
    try:
        completed = subprocess.run(
            list(argv),
            input=stdin,
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout_seconds,
        )
    except subprocess.CalledProcessError as exc:
        raise CommandError(argv, exc.returncode, str(exc.stderr or "")) from exc
    except subprocess.TimeoutExpired as exc:
        stderr = exc.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", "replace")
        raise CommandError(argv, None, stderr, reason=f"timed out after {exc.timeout}s") from exc
    except OSError as exc:
        raise CommandError(argv, None, "", reason=f"could not start: {exc}") from exc
    return CommandResult(stdout=completed.stdout, stderr=completed.stderr)


@final
class LocalCommandRunner(CommandRunnerProtocol):
    def __init__(self, shell: str = "sh", timeout_seconds: int | None = None) -> None:
        self._shell = shell
        self._timeout_seconds = _normalize_timeout(timeout_seconds)

    @property
    @override
    def is_remote(self) -> bool:
        return False

    @override
    def run(self, argv: Sequence[str]) -> CommandResult:
        return _execute(argv, None, self._timeout_seconds)

    @override
    def run_script(self, script: str) -> CommandResult:
        return _execute([self._shell], script, self._timeout_seconds)


@final
class SshCommandRunner(CommandRunnerProtocol):
    """Runs commands on ``host`` through ssh; the remote side parses them with its shell."""

    def __init__(
        self,
        host: str,
        ssh_cmd: str = "ssh",
        timeout_seconds: int | None = None,
    ) -> None:
        if not host.strip():
            raise ValueError("ssh host must not be empty")
        self._host = host.strip()
        self._ssh_cmd = ssh_cmd
        self._timeout_seconds = _normalize_timeout(timeout_seconds)

    @property
    def host(self) -> str:
        return self._host

    @property
    @override
    def is_remote(self) -> bool:
        return True

    @override
    def run(self, argv: Sequence[str]) -> CommandResult:
        return _execute(
            [self._ssh_cmd, self._host, shlex.join(argv)],
            None,
            self._timeout_seconds,
        )

    @override
    def run_script(self, script: str) -> CommandResult:
        return _execute([self._ssh_cmd, self._host], script, self._timeout_seconds)
