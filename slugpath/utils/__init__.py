"""Text, path and size helpers."""

from .paths import FileSystem, LocalFileSystem, next_available_path, split_file_name
from .sizes import format_byte_size
from .strings import (
    clean,
    is_blank,
    is_not_blank,
    is_unordered_substring,
    parse_prefix,
    safe_equals,
    shave,
)
from .text import remap_international_char, slugify

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "clean",
    "format_byte_size",
    "is_blank",
    "is_not_blank",
    "is_unordered_substring",
    "next_available_path",
    "parse_prefix",
    "remap_international_char",
    "safe_equals",
    "shave",
    "slugify",
    "split_file_name",
]
