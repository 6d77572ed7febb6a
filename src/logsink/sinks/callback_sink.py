"""Callback sink: hand every byte span to a user function."""

from __future__ import annotations

from typing import Callable

from logsink.sinks.base import SinkKind

LogCallback = Callable[[bytes], object]


class CallbackSink:
    """Call ``callback(data)`` once per write.

    Exceptions raised by the callback are the caller's own code failing and
    propagate unchanged.
    """

    kind = SinkKind.CALLBACK

    def __init__(self, callback: LogCallback) -> None:
        self._callback = callback

    @property
    def callback(self) -> LogCallback:
        return self._callback

    def write(self, data: bytes) -> None:
        self._callback(data)
