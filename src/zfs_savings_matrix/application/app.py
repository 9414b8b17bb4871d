from __future__ import annotations

import logging
from typing import final

from zfs_savings_matrix.application.gateways.command_runners import (
    LocalCommandRunner,
    SshCommandRunner,
)
from zfs_savings_matrix.application.gateways.zfs_gateway import ZfsGateway
from zfs_savings_matrix.application.renderers.matrix_renderer import MatrixRenderer
from zfs_savings_matrix.domain.models.app_config import AppConfig
from zfs_savings_matrix.domain.models.savings_matrix import SavingsMatrix
from zfs_savings_matrix.domain.protocols.command_runner_protocol import CommandRunnerProtocol
from zfs_savings_matrix.domain.workflows.build_savings_matrix import BuildSavingsMatrix
from zfs_savings_matrix.domain.workflows.longest_common import compact_labels


@final
class SavingsMatrixApp:
    def __init__(
        self,
        config: AppConfig,
        runner: CommandRunnerProtocol | None = None,
    ) -> None:
        self._config = config
        self._log = logging.getLogger("zfs_savings_matrix.app")
        self._runner = runner or self._build_runner(config)
        self._zfs = ZfsGateway(
            dataset=config.dataset,
            runner=self._runner,
            zfs_cmd=config.zfs_cmd,
            recursive=config.recursive,
        )
        self._renderer = MatrixRenderer(raw=config.raw)

    @staticmethod
    def _build_runner(config: AppConfig) -> CommandRunnerProtocol:
        if config.is_remote:
            return SshCommandRunner(
                host=config.host,
                ssh_cmd=config.ssh_cmd,
                timeout_seconds=config.command_timeout_seconds,
            )
        return LocalCommandRunner(timeout_seconds=config.command_timeout_seconds)

    def build_matrix(self) -> SavingsMatrix:
        snapshots = self._zfs.list_snapshots()
        self._log.info("Found %d snapshots of %s", len(snapshots), self._zfs.dataset)
        build = BuildSavingsMatrix(
            oracle=self._zfs,
            # one round trip for the whole matrix instead of one per pair
            batched=self._runner.is_remote,
            logger=logging.getLogger("zfs_savings_matrix.builder"),
        )
        return build(snapshots)

    def run(self) -> str:
        matrix = self.build_matrix()
        display_labels = compact_labels(matrix.labels, strip_suffix=self._config.trim_suffix)
        return self._renderer.render(matrix, display_labels)
