"""Logger: one log stream with a runtime-selectable sink.

A Logger delivers text to exactly one of three backends, chosen by whichever
setter was called last:

    set_callback(fn)      : fn(data: bytes) is called per message
    set_stream(stream)    : bytes go to an open stream the caller owns
    set_file_path(path)   : the file is opened in append mode per message

Passing None (or an empty path) deactivates the logger.  Writes never change
which sink is active, never raise on I/O failure, and leave the ambient errno
untouched.

Getters return the value last given to the matching setter, even when another
backend has since been selected.

Not thread-safe: serialize access to a shared Logger, or use one per thread.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import IO, TYPE_CHECKING, Any, Union

from logsink.buffer import DEFAULT_CAPACITY, Format, FormatBuffer
from logsink.errstate import preserved_errno
from logsink.logging import get_logger
from logsink.sinks import (
    CallbackSink,
    FilePathSink,
    LogSink,
    SinkKind,
    StreamSink,
)
from logsink.sinks.callback_sink import LogCallback
from logsink.sinks.file_sink import PathLike
from logsink.sinks.noop_sink import NOOP_SINK

if TYPE_CHECKING:
    from logsink.config import LogSinkConfig

Data = Union[bytes, bytearray, memoryview, str]


class Logger:
    """A single log stream whose destination can be swapped at any time."""

    def __init__(self, scratch_size: int = DEFAULT_CAPACITY) -> None:
        if scratch_size <= 0:
            raise ValueError(f"scratch_size must be positive, got {scratch_size}")
        self._scratch = FormatBuffer(scratch_size)
        self._callback: LogCallback | None = None
        self._stream: IO[Any] | None = None
        self._file_path: PathLike | None = None
        self._sink: LogSink = NOOP_SINK

    @classmethod
    def from_config(cls, config: LogSinkConfig) -> Logger:
        """Build a logger whose sink and scratch size come from config."""
        config.validate()
        logger = cls(scratch_size=config.scratch_size)
        logger.apply_config(config)
        return logger

    def apply_config(self, config: LogSinkConfig) -> None:
        """Select the sink named by config ("none", "stdout", "stderr", "file")."""
        config.validate()
        if config.scratch_size != self._scratch.initial_capacity:
            self._scratch = FormatBuffer(config.scratch_size)
        if config.sink == "stdout":
            self.set_stream(sys.stdout)
        elif config.sink == "stderr":
            self.set_stream(sys.stderr)
        elif config.sink == "file":
            self.set_file_path(config.file_path)
        else:
            self._select(NOOP_SINK)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _select(self, sink: LogSink) -> None:
        previous = self._sink.kind
        self._sink = sink
        if previous is not sink.kind:
            get_logger(__name__).debug(
                "logsink.sink.selected",
                previous=previous.value,
                kind=sink.kind.value,
            )

    def set_callback(self, callback: LogCallback | None) -> None:
        self._callback = callback
        self._select(CallbackSink(callback) if callback is not None else NOOP_SINK)

    def set_stream(self, stream: IO[Any] | None) -> None:
        """Deliver to ``stream``. The caller keeps ownership and closes it."""
        self._stream = stream
        self._select(StreamSink(stream) if stream is not None else NOOP_SINK)

    def set_file_path(self, path: PathLike | None) -> None:
        """Append to the file at ``path`` on every write.

        The path is stored as given and only opened while writing.
        """
        self._file_path = path
        if path is None or not os.fspath(path):
            self._select(NOOP_SINK)
        else:
            self._select(FilePathSink(path))

    def get_callback(self) -> LogCallback | None:
        return self._callback

    def get_stream(self) -> IO[Any] | None:
        return self._stream

    def get_file_path(self) -> PathLike | None:
        return self._file_path

    callback = property(get_callback)
    stream = property(get_stream)
    file_path = property(get_file_path)

    @property
    def kind(self) -> SinkKind:
        return self._sink.kind

    @property
    def scratch_size(self) -> int:
        return self._scratch.initial_capacity

    def is_active(self) -> bool:
        return self._sink.kind is not SinkKind.NONE

    def __bool__(self) -> bool:
        return self.is_active()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, data: Data) -> None:
        """Deliver ``data`` unchanged to the active sink.

        ``str`` is encoded as UTF-8.  No-op while inactive.
        """
        sink = self._sink
        if sink.kind is SinkKind.NONE:
            return
        if isinstance(data, str):
            payload = data.encode("utf-8", "replace")
        else:
            payload = bytes(data)
        with preserved_errno():
            sink.write(payload)

    def vprintf(
        self, fmt: Format, args: tuple[Any, ...] | Mapping[str, Any] = ()
    ) -> None:
        """Render ``fmt % args`` and deliver it like write().

        Output longer than the scratch size is delivered in full.  A format
        or argument mismatch drops the message; logging never raises into
        the caller.
        """
        sink = self._sink
        if sink.kind is SinkKind.NONE or not fmt:
            return
        buf = self._scratch
        with preserved_errno():
            try:
                buf.append_formatted(fmt, args)
                data = buf.data
            except (TypeError, ValueError, KeyError):
                return
            finally:
                # The sink may printf on this logger again.
                buf.dispose()
            sink.write(data)

    def printf(self, fmt: Format, *args: Any) -> None:
        self.vprintf(fmt, args)

    def __repr__(self) -> str:
        return f"Logger(kind={self._sink.kind.value})"
