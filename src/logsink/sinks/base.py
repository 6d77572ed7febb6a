"""Sink primitives: SinkKind and the LogSink protocol."""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable


class SinkKind(enum.Enum):
    """Which backend a Logger delivers to."""

    NONE = "none"
    CALLBACK = "callback"
    STREAM = "stream"
    FILE_PATH = "file_path"


@runtime_checkable
class LogSink(Protocol):
    """Where a logger's bytes go.

    write() receives an already-formatted byte span and must not raise for
    I/O failures: logging is best-effort.
    """

    kind: SinkKind

    def write(self, data: bytes) -> None: ...
