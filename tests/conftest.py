"""Test configuration and fixtures for dirscan."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/{a.txt, sub/{b.txt, c.md}} and return the root path."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_text("bravo!")
    (root / "sub" / "c.md").write_text("# charlie")
    return root
