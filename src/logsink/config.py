"""Logger configuration, env-var driven with optional YAML file.

Priority: env var > YAML file > default.
Env vars use the LOGSINK_{FIELD} convention (e.g. LOGSINK_SINK=stderr).
Per-channel settings use LOGSINK_{CHANNEL}_{FIELD} (e.g. LOGSINK_ERROR_SINK).

Sink selection:     LOGSINK_SINK=none (default) | stdout | stderr | file
File sink path:     LOGSINK_FILE=/var/log/app.log
Scratch buffer:     LOGSINK_SCRATCH_SIZE=4096

Package diagnostics (how logsink reports its own configuration changes):
    LOGSINK_LOG_FORMAT=console (default) | json
    LOGSINK_LOG_LEVEL=WARNING
    LOGSINK_LOG_DESTINATION=stderr (default) | file | sink
    LOGSINK_LOG_PATH=/var/log/logsink-diag.log
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from logsink.buffer import DEFAULT_CAPACITY

SINK_NAMES = ("none", "stdout", "stderr", "file")

_ENV_PREFIX = "LOGSINK"

_ENV_NAMES = {
    "file_path": "FILE",
}


class ConfigError(ValueError):
    """Raised for invalid logsink settings."""


def _env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(f"{_ENV_PREFIX}_{name}", default)


@dataclass
class LogSinkConfig:
    """Logger sink configuration, env-var driven."""

    # --- Sink selection ---
    sink: str = field(
        default_factory=lambda: (_env("SINK") or "none").lower()
    )  # "none" | "stdout" | "stderr" | "file"

    file_path: str | None = field(default_factory=lambda: _env("FILE") or None)

    scratch_size: int = field(
        default_factory=lambda: int(_env("SCRATCH_SIZE", str(DEFAULT_CAPACITY)))
    )

    # --- Package diagnostics ---
    log_format: str = field(
        default_factory=lambda: _env("LOG_FORMAT", "console")
    )  # "console" | "json"

    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "WARNING"))

    log_destination: str = field(
        default_factory=lambda: _env("LOG_DESTINATION", "stderr")
    )  # "stderr" | "file" | "sink"

    log_path: str | None = field(default_factory=lambda: _env("LOG_PATH") or None)

    def validate(self) -> LogSinkConfig:
        """Check the sink settings. Returns self for chaining."""
        if self.sink not in SINK_NAMES:
            raise ConfigError(
                f"Unknown sink: {self.sink!r}. Available: {list(SINK_NAMES)}."
            )
        if self.sink == "file" and not self.file_path:
            raise ConfigError("sink 'file' requires file_path (LOGSINK_FILE)")
        if self.scratch_size <= 0:
            raise ConfigError(
                f"scratch_size must be positive, got {self.scratch_size}"
            )
        return self

    @classmethod
    def load(
        cls, path: Path | None = None, prefix: str = _ENV_PREFIX
    ) -> LogSinkConfig:
        """Load settings from a YAML file, then override with env vars.

        ``prefix`` selects the env namespace: LOGSINK for the default
        logger, LOGSINK_ERROR for the "error" channel, and so on.  A
        ``channels`` mapping in the YAML file is ignored here; see
        for_channel().
        """
        file_values: dict[str, Any] = {}
        if path is not None and Path(path).exists():
            raw = yaml.safe_load(Path(path).read_text()) or {}
            if not isinstance(raw, dict):
                raise ConfigError(f"{path}: expected a mapping, got {type(raw).__name__}")
            file_values = raw
        return cls._from_sources(file_values, prefix)

    @classmethod
    def for_channel(cls, channel: str, path: Path | None = None) -> LogSinkConfig:
        """Load the settings of a named channel.

        YAML: the ``channels.<name>`` mapping layered over the top level.
        Env: LOGSINK_<NAME>_<FIELD>.  Fields the channel leaves unset fall
        back to the plain LOGSINK_<FIELD> values, then to the defaults.
        """
        file_values: dict[str, Any] = {}
        if path is not None and Path(path).exists():
            raw = yaml.safe_load(Path(path).read_text()) or {}
            if isinstance(raw, dict):
                file_values = {k: v for k, v in raw.items() if k != "channels"}
                channels = raw.get("channels") or {}
                if isinstance(channels, dict) and isinstance(channels.get(channel), dict):
                    file_values.update(channels[channel])
        return cls._from_sources(file_values, f"{_ENV_PREFIX}_{channel.upper()}")

    @classmethod
    def _from_sources(cls, file_values: dict[str, Any], prefix: str) -> LogSinkConfig:
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            env_key = f"{prefix}_{_ENV_NAMES.get(f.name, f.name.upper())}"
            if env_key in os.environ:
                kwargs[f.name] = os.environ[env_key]
            elif f.name in file_values:
                kwargs[f.name] = file_values[f.name]
            # else: use dataclass default

        if "scratch_size" in kwargs:
            try:
                kwargs["scratch_size"] = int(kwargs["scratch_size"])
            except (TypeError, ValueError):
                raise ConfigError(
                    f"scratch_size must be an integer, got {kwargs['scratch_size']!r}"
                ) from None
        if "sink" in kwargs:
            kwargs["sink"] = str(kwargs["sink"]).lower()
        if "file_path" in kwargs and kwargs["file_path"] is not None:
            kwargs["file_path"] = str(kwargs["file_path"])

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
