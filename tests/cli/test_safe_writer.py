"""Unit tests for the SafeWriter class."""

import errno
import io
import os
from unittest.mock import MagicMock

import pytest

from dirscan.cli.safe_writer import SafeWriter


def test_write_line_to_stream():
    stream = io.StringIO()
    writer = SafeWriter(stream=stream)
    writer.write_line("first")
    writer.write_line("second")
    assert stream.getvalue() == "first\nsecond\n"
    assert writer.lines_written == 2


def test_default_stream_is_stdout(capsys):
    with SafeWriter() as writer:
        writer.write_line("hello")
    assert capsys.readouterr().out == "hello\n"


def test_write_line_to_file(tmp_path):
    target = tmp_path / "report.txt"
    with SafeWriter(target) as writer:
        writer.write_line("📁 root")
        writer.write_line("  📄 a.txt ~ 5 bytes")
    assert target.read_text(encoding="utf-8") == "📁 root\n  📄 a.txt ~ 5 bytes\n"


def test_file_target_accepts_strings(tmp_path):
    target = tmp_path / "report.txt"
    with SafeWriter(str(target)) as writer:
        writer.write_line("x")
    assert target.read_text(encoding="utf-8") == "x\n"


def test_write_after_close_raises():
    writer = SafeWriter(stream=io.StringIO())
    writer.close()
    with pytest.raises(ValueError, match="closed"):
        writer.write_line("late")


def test_close_does_not_close_borrowed_stream():
    stream = io.StringIO()
    with SafeWriter(stream=stream) as writer:
        writer.write_line("x")
    assert not stream.closed


def test_close_is_idempotent(tmp_path):
    writer = SafeWriter(tmp_path / "out.txt")
    writer.close()
    writer.close()


def test_broken_pipe_on_write():
    stream = MagicMock()
    stream.write.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(stream=stream)
    with pytest.raises(BrokenPipeError):
        writer.write_line("x")
    assert writer.lines_written == 0


def test_other_write_errors_propagate():
    stream = MagicMock()
    stream.write.side_effect = OSError(errno.ENOSPC, "No space left on device")
    writer = SafeWriter(stream=stream)
    with pytest.raises(OSError) as exc_info:
        writer.write_line("x")
    assert exc_info.value.errno == errno.ENOSPC


def test_broken_pipe_on_flush_is_ignored():
    stream = MagicMock()
    stream.flush.side_effect = BrokenPipeError(errno.EPIPE, "Broken pipe")
    SafeWriter(stream=stream).close()


def test_close_error_does_not_mask_block_error():
    stream = MagicMock()
    stream.flush.side_effect = OSError(errno.EIO, "I/O error")
    with pytest.raises(RuntimeError):
        with SafeWriter(stream=stream):
            raise RuntimeError("original")


def test_unopenable_target_fails_on_first_write(tmp_path):
    writer = SafeWriter(tmp_path / "missing-dir" / "out.txt")
    with pytest.raises(OSError):
        writer.write_line("x")


def test_file_not_created_until_first_write(tmp_path):
    target = tmp_path / "report.txt"
    with SafeWriter(target):
        pass
    assert not target.exists()


def test_file_target_keeps_undecodable_names(tmp_path):
    target = tmp_path / "report.txt"
    with SafeWriter(target) as writer:
        writer.write_line(os.fsdecode(b"bad\xff.txt"))
    assert target.read_bytes() == b"bad\xff.txt\n"


def test_stdout_escapes_undecodable_names(capsys):
    with SafeWriter() as writer:
        writer.write_line(os.fsdecode(b"bad\xff.txt"))
    assert capsys.readouterr().out == "bad\\udcff.txt\n"
