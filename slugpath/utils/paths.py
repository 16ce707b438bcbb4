"""Collision-avoiding file name resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from ..errors import InvalidArgumentError
from .strings import is_blank

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class FileSystem(Protocol):
    """The two queries the resolver needs from a file system."""

    def exists(self, path: Path) -> bool:
        """Return True if a file or directory is present at ``path``."""

    def join(self, directory: PathLike, name: str) -> Path:
        """Combine a directory and a file name into a path."""


class LocalFileSystem:
    """File system backed by :mod:`pathlib`."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def join(self, directory: PathLike, name: str) -> Path:
        return Path(directory) / name


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split ``file_name`` at its last period into ``(base, extension)``.

    The extension keeps its leading period and is empty when the name has
    none.
    """
    index = file_name.rfind(".")
    if index < 0:
        return file_name, ""
    return file_name[:index], file_name[index:]


def next_available_path(
    directory: PathLike | None,
    file_name: str | None,
    separator: str = "-",
    *,
    filesystem: FileSystem | None = None,
) -> Path:
    """Return a path in ``directory`` for ``file_name`` that does not exist yet.

    When ``alfa.txt`` is taken the result is ``alfa-1.txt``, then
    ``alfa-2.txt`` and so on. A base already ending in ``separator`` plus a
    number has that number incremented; any other trailing token gets
    ``separator + "1"`` appended after it.

    Nothing is created or reserved, so two callers racing on the same
    directory can be handed the same name.

    Raises
    ------
    InvalidArgumentError
        If ``directory`` or ``file_name`` is blank, or ``separator`` is not a
        single character.
    """
    if directory is None or is_blank(os.fspath(directory)):
        raise InvalidArgumentError("Directory path required", argument="directory")
    if is_blank(file_name):
        raise InvalidArgumentError("File name required", argument="file_name")
    if len(separator) != 1:
        raise InvalidArgumentError(
            f"Separator must be a single character, got {separator!r}", argument="separator"
        )

    fs = filesystem or LocalFileSystem()
    base, extension = split_file_name(file_name)
    candidate = fs.join(directory, base + extension)

    while fs.exists(candidate):
        logger.debug("%s already exists", candidate)
        base = _next_base(base, separator)
        candidate = fs.join(directory, base + extension)

    return candidate


def _next_base(base: str, separator: str) -> str:
    index = base.rfind(separator)
    if index < 0:
        return f"{base}{separator}1"

    tail = base[index + 1 :]
    if not (tail.isascii() and tail.isdigit()):
        return f"{base}{separator}1"
    return f"{base[:index]}{separator}{int(tail) + 1}"
