"""Stream sink: write to an already-open stream owned by the caller."""

from __future__ import annotations

import io
from typing import IO, Any

from logsink.sinks.base import SinkKind


def is_text_stream(stream: Any) -> bool:
    """Guess whether ``stream.write()`` wants str rather than bytes.

    Wrappers such as NamedTemporaryFile("w") or a colorized stdout are not
    TextIOBase subclasses, so fall back to their ``encoding`` and ``mode``.
    """
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    if getattr(stream, "encoding", None):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def write_to_stream(stream: IO[Any], data: bytes) -> None:
    """Write bytes to a text or binary stream, dropping failures.

    Text streams get the bytes decoded as UTF-8 (with replacement).  If the
    guess is wrong and the stream rejects the type, the other form is tried
    once.  OSError, ValueError (closed stream) and a second TypeError are
    dropped.
    """
    text = is_text_stream(stream)
    try:
        try:
            stream.write(data.decode("utf-8", "replace") if text else data)
        except TypeError:
            stream.write(data if text else data.decode("utf-8", "replace"))
    except (OSError, ValueError, TypeError):
        pass


class StreamSink:
    """Write to a borrowed stream. The stream is never closed here."""

    kind = SinkKind.STREAM

    def __init__(self, stream: IO[Any]) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any]:
        return self._stream

    def write(self, data: bytes) -> None:
        write_to_stream(self._stream, data)
