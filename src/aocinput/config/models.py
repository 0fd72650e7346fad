"""Pydantic models describing aocinput configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Identifies the tool only; the remote asks clients to add a contact, set it via remote.user_agent.
DEFAULT_USER_AGENT = "aoc-input-fetch/0.1.0 (python-requests)"


class RemoteConfig(BaseModel):
    """Where inputs are downloaded from and how the client identifies itself."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://adventofcode.com"
    user_agent: str = DEFAULT_USER_AGENT
    cookie_name: str = "session"
    timeout_seconds: float = Field(default=30, ge=1)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class LayoutConfig(BaseModel):
    """Project layout: where day files live and where inputs are cached."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path = Path("src")
    cache_dir: Path = Path("input")
    day_prefix: str = "day"
    source_extension: str = ".rs"
    cache_extension: str = ".txt"

    @field_validator("source_extension", "cache_extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value


class RuntimeConfig(BaseModel):
    """Execution-time behavior of a sync run."""

    model_config = ConfigDict(extra="forbid")

    fail_fast: bool = True
    release_timezone: str = "America/New_York"
    release_hour: int = Field(default=0, ge=0, le=23)
    log_path: Optional[Path] = None
    directive_prefix: str = "cargo::"

    @field_validator("release_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone {value!r}") from exc
        return value


class AocInputConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = [
    "AocInputConfig",
    "DEFAULT_USER_AGENT",
    "LayoutConfig",
    "RemoteConfig",
    "RuntimeConfig",
]
