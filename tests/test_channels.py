"""Tests for process-wide named channels."""

from __future__ import annotations

import os

import pytest

from logsink import Logger, SinkKind, channels


@pytest.fixture(autouse=True)
def _reset(monkeypatch):
    """Fresh channels and a clean LOGSINK_* environment per test."""
    for key in list(os.environ):
        if key.startswith("LOGSINK_"):
            monkeypatch.delenv(key)
    channels.reset_channels()
    yield
    channels.reset_channels()


class TestGetChannel:
    def test_created_inactive(self):
        logger = channels.get_channel(channels.ERROR)
        assert isinstance(logger, Logger)
        assert logger.is_active() is False

    def test_shared_per_name(self):
        assert channels.get_channel("info") is channels.get_channel("info")
        assert channels.get_channel("info") is not channels.get_channel("debug")

    def test_custom_name(self):
        channels.get_channel("http")
        assert "http" in channels.channel_names()

    def test_reset(self):
        first = channels.get_channel("info")
        channels.reset_channels()
        assert channels.get_channel("info") is not first


class TestHelpers:
    """*_printf / *_write forward to their channel."""

    def test_helpers_noop_when_inactive(self):
        channels.info_printf("%s", "dropped")
        channels.error_write(b"dropped")  # Should not raise

    def test_printf_per_channel(self):
        received = {name: [] for name in channels.BUILTIN_CHANNELS}
        for name in channels.BUILTIN_CHANNELS:
            channels.get_channel(name).set_callback(received[name].append)

        channels.info_printf("info %d", 1)
        channels.error_printf("error %s", "two")
        channels.debug_printf("debug")

        assert received == {
            "info": [b"info 1"],
            "error": [b"error two"],
            "debug": [b"debug"],
        }

    def test_write_per_channel(self):
        received = []
        channels.get_channel(channels.DEBUG).set_callback(received.append)
        channels.debug_write(b"raw %s")
        channels.info_write(b"not delivered")
        channels.error_write("not delivered")
        assert received == [b"raw %s"]


class TestConfigureChannels:
    def test_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "error.log"
        monkeypatch.setenv("LOGSINK_ERROR_SINK", "file")
        monkeypatch.setenv("LOGSINK_ERROR_FILE", str(path))

        configured = channels.configure_channels()

        assert configured["error"].kind is SinkKind.FILE_PATH
        assert configured["info"].is_active() is False
        channels.error_printf("disk %s\n", "full")
        assert path.read_text() == "disk full\n"

    def test_stdout_channel(self, monkeypatch, capsys):
        monkeypatch.setenv("LOGSINK_INFO_SINK", "stdout")
        channels.configure_channels(names=("info",))
        channels.info_printf("hello %s\n", "stdout")
        assert capsys.readouterr().out == "hello stdout\n"

    def test_reconfigure_replaces_sink(self, monkeypatch):
        received = []
        channels.get_channel("debug").set_callback(received.append)
        channels.configure_channels(names=("debug",))
        channels.debug_printf("gone")
        assert received == []
        assert channels.get_channel("debug").get_callback() == received.append
