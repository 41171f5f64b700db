"""Unit tests for the DirectoryEntry class."""

import pytest
from anytree import LoopError

from dirscan.directory_tree.directory_entry import DirectoryEntry
from dirscan.directory_tree.file_entry import FileEntry


def test_directory_entry_initialization():
    """Test that a new entry starts empty."""
    entry = DirectoryEntry("project")
    assert entry.name == "project"
    assert entry.parent is None
    assert entry.files == []
    assert entry.subdirectories == ()
    assert entry.has_matching_files is False


def test_add_file_sets_has_matching_files():
    entry = DirectoryEntry("docs")
    first = FileEntry("a.md", "/docs/a.md", 1)
    second = FileEntry("b.md", "/docs/b.md", 2)

    entry.add_file(first)
    assert entry.has_matching_files is True

    entry.add_file(second)
    assert entry.files == [first, second]


def test_add_subdirectory_preserves_order():
    """Test that subdirectories keep the order they were added in."""
    root = DirectoryEntry("root")
    names = ["zeta", "alpha", "mid"]
    children = [root.add_subdirectory(name) for name in names]

    assert [d.name for d in root.subdirectories] == names
    assert all(child.parent is root for child in children)
    assert all(isinstance(child, DirectoryEntry) for child in children)


def test_has_matching_files_is_not_propagated():
    """Test that a file in a subdirectory does not flag its ancestors."""
    root = DirectoryEntry("root")
    middle = root.add_subdirectory("middle")
    leaf = middle.add_subdirectory("leaf")
    leaf.add_file(FileEntry("x.txt", "/root/middle/leaf/x.txt", 3))

    assert leaf.has_matching_files is True
    assert middle.has_matching_files is False
    assert root.has_matching_files is False


def test_files_are_not_shared_between_entries():
    first = DirectoryEntry("first")
    second = DirectoryEntry("second")
    first.add_file(FileEntry("a.txt", "/first/a.txt", 1))
    assert second.files == []


def test_directory_entry_rejects_cycles():
    """Test that an entry cannot become its own ancestor."""
    root = DirectoryEntry("root")
    child = root.add_subdirectory("child")
    with pytest.raises(LoopError):
        root.parent = child


def test_directory_entry_depth():
    root = DirectoryEntry("root")
    child = root.add_subdirectory("child")
    grandchild = child.add_subdirectory("grandchild")
    assert (root.depth, child.depth, grandchild.depth) == (0, 1, 2)
