from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from zfs_savings_matrix.config.settings_models import UserSettings

_T = TypeVar("_T")


def _pick(override: _T | None, configured: _T | None, default: _T) -> _T:
    if override is not None:
        return override
    if configured is not None:
        return configured
    return default


@dataclass(frozen=True)
class AppConfig:
    dataset: str
    zfs_cmd: str = "/sbin/zfs"
    ssh_cmd: str = "ssh"
    host: str = ""
    raw: bool = False
    recursive: bool = False
    trim_suffix: bool = False
    log_level: str = "warning"
    log_file: Path | None = None
    command_timeout_seconds: int | None = None

    @property
    def is_remote(self) -> bool:
        return bool(self.host.strip())

    @classmethod
    def from_settings(
        cls,
        dataset: str,
        user: UserSettings,
        host: str | None = None,
        zfs_cmd: str | None = None,
        raw: bool | None = None,
        recursive: bool | None = None,
        trim_suffix: bool | None = None,
        log_level: str | None = None,
    ) -> "AppConfig":
        """Command-line values win over the settings file, which wins over defaults."""
        log_file = user.log_file
        return cls(
            dataset=dataset,
            zfs_cmd=_pick(zfs_cmd, user.zfs_cmd, cls.zfs_cmd),
            ssh_cmd=_pick(None, user.ssh_cmd, cls.ssh_cmd),
            host=_pick(host, user.host, cls.host),
            raw=_pick(raw, user.raw, cls.raw),
            recursive=_pick(recursive, user.recursive, cls.recursive),
            trim_suffix=_pick(trim_suffix, user.trim_suffix, cls.trim_suffix),
            log_level=_pick(log_level, user.log_level, cls.log_level),
            log_file=Path(log_file).expanduser() if log_file else None,
            command_timeout_seconds=user.command_timeout_seconds,
        )
