from zfs_savings_matrix.domain.protocols.command_runner_protocol import (
    CommandResult,
    CommandRunnerProtocol,
)
from zfs_savings_matrix.domain.protocols.reclaim_oracle_protocol import ReclaimOracleProtocol
from zfs_savings_matrix.domain.protocols.snapshot_lister_protocol import SnapshotListerProtocol

__all__ = [
    "CommandResult",
    "CommandRunnerProtocol",
    "ReclaimOracleProtocol",
    "SnapshotListerProtocol",
]
