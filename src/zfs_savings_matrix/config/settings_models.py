from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class UserSettings(BaseModel):
    zfs_cmd: str | None = Field(default=None)
    ssh_cmd: str | None = Field(default=None)
    host: str | None = Field(default=None)
    log_level: str | None = Field(default=None)
    log_file: str | None = Field(default=None)
    raw: bool | None = Field(default=None)
    recursive: bool | None = Field(default=None)
    trim_suffix: bool | None = Field(default=None)
    command_timeout_seconds: int | None = Field(default=None, ge=1)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = str(value or "").strip().lower()
        if not normalized:
            return None
        if normalized not in {"debug", "info", "warn", "warning", "error"}:
            raise ValueError("LOG_LEVEL must be one of: debug, info, warn, error")
        return "warning" if normalized == "warn" else normalized
