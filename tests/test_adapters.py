"""Unit tests for adapters."""

import io
import sys
from unittest.mock import Mock

from levellog import Level, Logger, MemoryAdapter, StderrAdapter, StreamAdapter


def test_stream_adapter_writes_and_flushes():
    """Stream adapter writes bytes and flushes."""
    stream = Mock()
    stream.write.return_value = 4
    adapter = StreamAdapter(stream)

    assert adapter.write(b"abc\n") == 4

    stream.write.assert_called_once_with(b"abc\n")
    stream.flush.assert_called_once()


def test_stream_adapter_without_flush():
    """Flushing can be disabled."""
    stream = Mock()
    adapter = StreamAdapter(stream, flush=False)

    adapter.write(b"x\n")

    stream.flush.assert_not_called()


def test_stream_adapter_with_bytes_io():
    """Logger works on a plain binary stream."""
    buf = io.BytesIO()
    logger = Logger(StreamAdapter(buf), 0, Level.ALL)

    logger.info("hi")

    assert buf.getvalue() == b"INFO hi\n"


def test_logger_accepts_raw_binary_stream():
    """Any object with write(bytes) is a sink."""
    buf = io.BytesIO()
    logger = Logger(buf, 0, Level.ALL)

    logger.print("raw")

    assert buf.getvalue() == b"raw\n"


def test_stderr_adapter_text_stream(monkeypatch):
    """Stderr adapter decodes for text-only streams."""
    fake = io.StringIO()
    monkeypatch.setattr(sys, "stderr", fake)

    StderrAdapter().write("héllo\n".encode("utf-8"))

    assert fake.getvalue() == "héllo\n"


def test_stderr_adapter_binary_buffer(monkeypatch):
    """Stderr adapter writes through the binary buffer when present."""
    raw = io.BytesIO()
    fake = io.TextIOWrapper(raw, encoding="utf-8")
    monkeypatch.setattr(sys, "stderr", fake)

    fake.write("first\n")
    StderrAdapter().write(b"second\n")

    assert raw.getvalue() == b"first\nsecond\n"


def test_stderr_adapter_follows_replaced_stream(monkeypatch):
    """Stream is resolved on each write."""
    adapter = StderrAdapter()
    first, second = io.StringIO(), io.StringIO()

    monkeypatch.setattr(sys, "stderr", first)
    adapter.write(b"one\n")
    monkeypatch.setattr(sys, "stderr", second)
    adapter.write(b"two\n")

    assert first.getvalue() == "one\n"
    assert second.getvalue() == "two\n"


def test_memory_adapter_collects():
    """Memory adapter records writes and lines."""
    adapter = MemoryAdapter()

    adapter.write(b"a\n")
    adapter.write(b"b\n")

    assert adapter.getvalue() == b"a\nb\n"
    assert adapter.lines() == ["a", "b"]
    assert adapter.writes == 2

    adapter.reset()
    assert adapter.getvalue() == b""
    assert adapter.writes == 0
