"""Command-line interface for dirscan."""
