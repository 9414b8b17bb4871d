from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, final

from zfs_savings_matrix.config.settings_models import UserSettings


@final
class SettingsLoader:
    ENV_VAR: ClassVar[str] = "ZFS_SAVINGS_SETTINGS"

    _KEY_MAP: ClassVar[dict[str, str]] = {
        "ZFS_CMD": "zfs_cmd",
        "SSH_CMD": "ssh_cmd",
        "HOST": "host",
        "LOG_LEVEL": "log_level",
        "LOG_FILE": "log_file",
        "RAW": "raw",
        "RECURSIVE": "recursive",
        "TRIM_SUFFIX": "trim_suffix",
        "COMMAND_TIMEOUT_SECONDS": "command_timeout_seconds",
    }
    _BOOL_KEYS: ClassVar[frozenset[str]] = frozenset({"raw", "recursive", "trim_suffix"})
    _INT_KEYS: ClassVar[frozenset[str]] = frozenset({"command_timeout_seconds"})

    @staticmethod
    def _parse_key_value_file(path: Path) -> dict[str, str]:
        data: dict[str, str] = {}
        if not path.exists():
            return data

        for raw_line in path.read_text("utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[7:].strip()
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            data[key.strip()] = value.strip().strip('"').strip("'")
        return data

    @staticmethod
    def _parse_bool(value: str) -> bool:
        return str(value or "").strip().lower() in {"1", "true", "yes", "on"}

    @classmethod
    def _to_user_settings(cls, raw: dict[str, str]) -> UserSettings:
        mapped: dict[str, object] = {}
        for key, value in raw.items():
            target = cls._KEY_MAP.get(key)
            if not target:
                continue
            text = str(value or "").strip()
            if not text:
                mapped[target] = None
                continue
            if target in cls._INT_KEYS:
                try:
                    mapped[target] = int(text)
                except ValueError:
                    mapped[target] = None
                continue
            if target in cls._BOOL_KEYS:
                mapped[target] = cls._parse_bool(text)
                continue
            mapped[target] = text

        return UserSettings.model_validate(mapped)

    @classmethod
    def default_path(cls) -> Path:
        from_env = os.getenv(cls.ENV_VAR)
        if from_env:
            return Path(from_env)
        return Path.home() / ".config" / "zfs-savings-matrix" / "settings.ini"

    @classmethod
    def load(cls, settings_path: Path | None = None) -> UserSettings:
        resolved = settings_path or cls.default_path()
        return cls._to_user_settings(cls._parse_key_value_file(resolved))
