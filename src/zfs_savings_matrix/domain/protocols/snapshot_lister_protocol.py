from __future__ import annotations

from typing import Protocol


class SnapshotListerProtocol(Protocol):
    def list_snapshots(self) -> list[str]: ...
