"""Tests for scan error types."""

import errno

from dirscan.exceptions import RootInvalidError, ScanError, StatError, SubtreeReadError


class TestScanError:
    """Test the ScanError base class."""

    def test_scan_error_message(self):
        error = ScanError("/some/path", "Something failed")
        assert error.path == "/some/path"
        assert error.reason == "Something failed"
        assert error.cause is None
        assert str(error) == "Something failed: /some/path"

    def test_scan_error_accepts_path_objects(self, tmp_path):
        error = ScanError(tmp_path, "Something failed")
        assert error.path == str(tmp_path)


class TestSubclasses:
    """Test the specific scan error types."""

    def test_root_invalid_error(self):
        error = RootInvalidError("/etc/hostname", "Not a directory")
        assert isinstance(error, ScanError)
        assert str(error) == "Not a directory: /etc/hostname"

    def test_subtree_read_error_default_reason(self):
        cause = PermissionError(errno.EACCES, "Permission denied")
        error = SubtreeReadError("/data/locked", cause=cause)
        assert isinstance(error, ScanError)
        assert error.cause is cause
        assert str(error) == "Error reading directory: /data/locked"

    def test_stat_error_default_reason(self):
        error = StatError("/data/broken-link")
        assert isinstance(error, ScanError)
        assert str(error) == "Error reading entry: /data/broken-link"

    def test_errors_are_distinct(self):
        assert not issubclass(SubtreeReadError, RootInvalidError)
        assert not issubclass(StatError, SubtreeReadError)
