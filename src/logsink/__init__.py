"""logsink: a logger whose output destination is swapped at runtime.

Public API:
    Logger                 : one log stream; callback, stream or file-path sink
    Logger.write(data)     : deliver bytes unchanged
    Logger.printf(fmt, ...): printf-style formatting, then write
    channels               : process-wide "info" / "error" / "debug" loggers

Helpers:
    FormatBuffer           : growable byte-span formatter
    memdup / strdup / strmemdup / strmemcpy
    preserved_errno()      : errno snapshot/restore

Diagnostics (structlog):
    setup_logging(config), get_logger(name), SinkHandler(logger)
"""

from logsink import channels
from logsink.buffer import DEFAULT_CAPACITY, FormatBuffer
from logsink.config import ConfigError, LogSinkConfig
from logsink.errstate import get_errno, preserved_errno, set_errno
from logsink.logger import Logger
from logsink.logging import (
    SinkHandler,
    get_logger,
    setup_logging,
    shutdown_logging,
)
from logsink.mem import memdup, strdup, strmemcpy, strmemdup
from logsink.sinks import (
    CallbackSink,
    FilePathSink,
    LogSink,
    NoOpSink,
    SinkKind,
    StreamSink,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Logger",
    "SinkKind",
    "channels",
    # Sinks
    "LogSink",
    "CallbackSink",
    "StreamSink",
    "FilePathSink",
    "NoOpSink",
    # Formatting
    "FormatBuffer",
    "DEFAULT_CAPACITY",
    # Memory helpers
    "memdup",
    "strdup",
    "strmemdup",
    "strmemcpy",
    # errno
    "get_errno",
    "set_errno",
    "preserved_errno",
    # Config
    "LogSinkConfig",
    "ConfigError",
    # Diagnostics
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "SinkHandler",
]
