"""Read and write whole text files, synchronously or from asyncio code."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from ..errors import InvalidArgumentError
from ..utils.paths import PathLike
from ..utils.strings import is_blank

logger = logging.getLogger(__name__)


def setup_directory(path: PathLike) -> Path:
    """Create ``path`` (and its parents) when it does not exist yet."""
    directory = Path(path)
    if not directory.is_dir():
        logger.debug("Creating directory %s", directory)
        directory.mkdir(parents=True, exist_ok=True)
    return directory


def load_text_file(path: PathLike | None, *, encoding: str = "utf-8") -> str | None:
    """Return the contents of ``path``, or ``None`` when the file is missing."""
    file_path = _require_path(path, "path", "File path required")
    if not file_path.is_file():
        return None
    return file_path.read_text(encoding=encoding)


def write_text_file(
    directory: PathLike | None,
    file_name: str | None,
    text: str,
    *,
    encoding: str = "utf-8",
) -> Path:
    """Write ``text`` to ``directory/file_name``, replacing any existing file."""
    target_dir = _require_path(directory, "directory", "Directory path required")
    if is_blank(file_name):
        raise InvalidArgumentError("File name required", argument="file_name")

    setup_directory(target_dir)
    target_path = target_dir / file_name
    target_path.write_text(text, encoding=encoding)
    return target_path


async def load_text_file_async(path: PathLike | None, *, encoding: str = "utf-8") -> str | None:
    return await asyncio.to_thread(load_text_file, path, encoding=encoding)


async def write_text_file_async(
    directory: PathLike | None,
    file_name: str | None,
    text: str,
    *,
    encoding: str = "utf-8",
) -> Path:
    return await asyncio.to_thread(write_text_file, directory, file_name, text, encoding=encoding)


def _require_path(value: PathLike | None, argument: str, message: str) -> Path:
    if value is None or is_blank(os.fspath(value)):
        raise InvalidArgumentError(message, argument=argument)
    return Path(value)
