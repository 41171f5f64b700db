"""Directory tree scanning with extension filtering.

This module provides the tree model produced by a scan, the scanner that
builds it from the filesystem, and the renderer that turns it into text.
"""
