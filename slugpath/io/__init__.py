"""File I/O helpers built on the collision-avoiding resolver."""

from .files import (
    load_text_file,
    load_text_file_async,
    setup_directory,
    write_text_file,
    write_text_file_async,
)
from .transfer import safe_copy_file, safe_move_file, safe_rename_file

__all__ = [
    "load_text_file",
    "load_text_file_async",
    "safe_copy_file",
    "safe_move_file",
    "safe_rename_file",
    "setup_directory",
    "write_text_file",
    "write_text_file_async",
]
