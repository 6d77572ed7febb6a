"""No-op sink: the inactive state of a Logger."""

from __future__ import annotations

from logsink.sinks.base import SinkKind


class NoOpSink:
    """Discards all output. Zero overhead."""

    kind = SinkKind.NONE

    def write(self, data: bytes) -> None:
        pass


NOOP_SINK = NoOpSink()
