"""Tests for the sink variants behind Logger."""

from __future__ import annotations

import io
import tempfile

from logsink.sinks import (
    CallbackSink,
    FilePathSink,
    LogSink,
    NoOpSink,
    SinkKind,
    StreamSink,
)
from logsink.sinks.stream_sink import is_text_stream


class TestSinks:
    """LogSink implementations."""

    def test_all_satisfy_protocol(self, tmp_path):
        sinks = [
            NoOpSink(),
            CallbackSink(lambda data: None),
            StreamSink(io.BytesIO()),
            FilePathSink(tmp_path / "out.log"),
        ]
        for sink in sinks:
            assert isinstance(sink, LogSink)

    def test_kinds(self, tmp_path):
        assert NoOpSink().kind is SinkKind.NONE
        assert CallbackSink(print).kind is SinkKind.CALLBACK
        assert StreamSink(io.BytesIO()).kind is SinkKind.STREAM
        assert FilePathSink(tmp_path).kind is SinkKind.FILE_PATH

    def test_noop_sink(self):
        NoOpSink().write(b"ignored")  # Should not raise

    def test_callback_sink(self):
        received = []
        sink = CallbackSink(received.append)
        sink.write(b"a")
        sink.write(b"b")
        assert received == [b"a", b"b"]
        assert sink.callback == received.append

    def test_stream_sink_text(self):
        stream = io.StringIO()
        StreamSink(stream).write("naïve".encode("utf-8"))
        assert stream.getvalue() == "naïve"

    def test_stream_sink_binary(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.write(b"\x01\x02")
        assert stream.getvalue() == b"\x01\x02"
        assert sink.stream is stream

    def test_stream_sink_oserror_swallowed(self):
        class FullDisk(io.RawIOBase):
            def writable(self):
                return True

            def write(self, b):
                raise OSError(28, "No space left on device")

        StreamSink(FullDisk()).write(b"lost")  # Should not raise

    def test_file_sink_opens_per_write(self, tmp_path):
        path = tmp_path / "out.log"
        sink = FilePathSink(path)
        sink.write(b"first\n")
        path.unlink()
        sink.write(b"second\n")
        assert path.read_bytes() == b"second\n"
        assert sink.path is path

    def test_file_sink_missing_dir(self, tmp_path):
        FilePathSink(tmp_path / "nope" / "out.log").write(b"lost")  # Should not raise


class TestTextStreamDetection:
    """Text streams that are not TextIOBase subclasses still get str."""

    def test_named_temporary_file_text(self):
        with tempfile.NamedTemporaryFile("w+") as f:
            StreamSink(f).write(b"hello\n")
            f.seek(0)
            assert f.read() == "hello\n"

    def test_named_temporary_file_binary(self):
        with tempfile.NamedTemporaryFile("w+b") as f:
            StreamSink(f).write(b"\x00raw")
            f.seek(0)
            assert f.read() == b"\x00raw"

    def test_spooled_temporary_file_text(self):
        with tempfile.SpooledTemporaryFile(mode="w+") as f:
            StreamSink(f).write(b"x")
            f.seek(0)
            assert f.read() == "x"

    def test_wrapped_stdout(self):
        class Wrapper:
            """Proxy that only forwards str, like colorized stdout wrappers."""

            def __init__(self, wrapped):
                self._wrapped = wrapped

            def write(self, text):
                if not isinstance(text, str):
                    raise TypeError("write() argument must be str, not bytes")
                self._wrapped.write(text)

        target = io.StringIO()
        StreamSink(Wrapper(target)).write(b"colored")
        assert target.getvalue() == "colored"

    def test_rejects_both_types_swallowed(self):
        class Picky:
            def write(self, data):
                raise TypeError("nothing fits")

        StreamSink(Picky()).write(b"lost")  # Should not raise

    def test_detection(self):
        assert is_text_stream(io.StringIO()) is True
        assert is_text_stream(io.BytesIO()) is False
