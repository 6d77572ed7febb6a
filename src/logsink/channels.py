"""Process-wide named loggers for library code.

Library code writes diagnostics through a channel without knowing where they
end up; the application decides by configuring the channel's Logger:

    from logsink import channels

    channels.get_channel(channels.ERROR).set_stream(sys.stderr)
    channels.error_printf("connect to %s failed: %s\\n", host, err)

Channels are plain Logger instances looked up by name.  They carry no
severity and do no filtering; a channel nobody configured stays inactive and
its helpers are no-ops.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from logsink.config import LogSinkConfig
from logsink.logger import Data, Logger
from logsink.logging import get_logger

INFO = "info"
ERROR = "error"
DEBUG = "debug"

BUILTIN_CHANNELS = (INFO, ERROR, DEBUG)

_channels: dict[str, Logger] = {}


def get_channel(name: str) -> Logger:
    """Return the Logger for ``name``, creating an inactive one on first use."""
    logger = _channels.get(name)
    if logger is None:
        logger = _channels[name] = Logger()
    return logger


def channel_names() -> list[str]:
    return list(_channels)


def configure_channels(
    path: Path | None = None, names: tuple[str, ...] = BUILTIN_CHANNELS
) -> dict[str, Logger]:
    """Apply LogSinkConfig.for_channel() to each named channel.

    Returns the configured loggers by name.
    """
    configured: dict[str, Logger] = {}
    for name in names:
        config = LogSinkConfig.for_channel(name, path)
        logger = get_channel(name)
        logger.apply_config(config)
        configured[name] = logger
        get_logger(__name__).debug(
            "logsink.channel.configured", channel=name, sink=config.sink
        )
    return configured


def reset_channels() -> None:
    """Drop every channel. For tests."""
    _channels.clear()


def info_printf(fmt: str | bytes, *args: Any) -> None:
    get_channel(INFO).vprintf(fmt, args)


def error_printf(fmt: str | bytes, *args: Any) -> None:
    get_channel(ERROR).vprintf(fmt, args)


def debug_printf(fmt: str | bytes, *args: Any) -> None:
    get_channel(DEBUG).vprintf(fmt, args)


def info_write(data: Data) -> None:
    get_channel(INFO).write(data)


def error_write(data: Data) -> None:
    get_channel(ERROR).write(data)


def debug_write(data: Data) -> None:
    get_channel(DEBUG).write(data)
