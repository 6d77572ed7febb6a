"""Log sinks: strategy pattern for logger output destinations."""

from logsink.sinks.base import LogSink, SinkKind
from logsink.sinks.callback_sink import CallbackSink
from logsink.sinks.file_sink import FilePathSink
from logsink.sinks.noop_sink import NoOpSink
from logsink.sinks.stream_sink import StreamSink

__all__ = ["LogSink", "SinkKind", "CallbackSink", "StreamSink", "FilePathSink", "NoOpSink"]
