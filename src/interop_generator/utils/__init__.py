"""Utilities module initialization."""

from .file_utils import write_if_changed
from .path_utils import create_source_filename, sanitize_for_filesystem

__all__ = [
    "create_source_filename",
    "sanitize_for_filesystem",
    "write_if_changed",
]
