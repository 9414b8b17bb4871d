from __future__ import annotations

from collections.abc import Sequence


class SavingsMatrixError(Exception):
    """Base class for every fatal error raised while building a savings matrix."""


class CommandError(SavingsMatrixError):
    """An external collaborator (zfs, ssh, sh) could not be started or exited non-zero."""

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int | None,
        stderr: str,
        reason: str = "",
    ) -> None:
        self.argv = tuple(argv)
        self.returncode = returncode
        self.stderr = stderr
        detail = reason or f"exit status {returncode}"
        message = f"executing command {' '.join(self.argv)!r}: {detail}"
        diagnostic = stderr.strip()
        if diagnostic:
            message = f"{message}: {diagnostic}"
        super().__init__(message)


class ReclaimParseError(SavingsMatrixError):
    """The dry-run destroy output did not carry the expected reclaim report lines."""


class SnapshotListParseError(SavingsMatrixError):
    """The snapshot listing contained a line that does not belong to the dataset."""


class MatrixConsistencyError(SavingsMatrixError):
    """A pair inside the triangular domain is missing from the matrix."""
