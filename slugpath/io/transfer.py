"""Move, copy and rename files without overwriting anything at the target."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..utils.paths import PathLike, next_available_path
from ..utils.strings import is_blank

logger = logging.getLogger(__name__)


def safe_move_file(
    source: PathLike | None,
    target_directory: PathLike | None,
    *,
    separator: str = "-",
    create_directory: bool = True,
) -> Path | None:
    """Move ``source`` into ``target_directory`` under a name that is still free.

    Returns the destination path, or ``None`` when an argument is blank or the
    source file does not exist.
    """
    prepared = _prepare(source, target_directory, create_directory=create_directory)
    if prepared is None:
        return None
    source_path, target_dir = prepared

    destination = next_available_path(target_dir, source_path.name, separator)
    shutil.move(os.fspath(source_path), os.fspath(destination))
    logger.info("Moved %s to %s", source_path, destination)
    return destination


def safe_copy_file(
    source: PathLike | None,
    target_directory: PathLike | None,
    *,
    separator: str = "-",
    create_directory: bool = True,
) -> Path | None:
    """Copy ``source`` into ``target_directory`` under a name that is still free."""
    prepared = _prepare(source, target_directory, create_directory=create_directory)
    if prepared is None:
        return None
    source_path, target_dir = prepared

    destination = next_available_path(target_dir, source_path.name, separator)
    shutil.copy2(source_path, destination)
    logger.info("Copied %s to %s", source_path, destination)
    return destination


def safe_rename_file(
    source: PathLike | None,
    target_name: str | None,
    *,
    separator: str = "-",
) -> Path | None:
    """Rename ``source`` to ``target_name`` in place, numbering it if that name is taken.

    Renaming a file to its current name leaves it untouched and returns it.
    """
    if _is_blank_path(source) or is_blank(target_name):
        logger.debug("Skipping rename: source and target name are required")
        return None

    source_path = Path(source)
    if not source_path.is_file():
        logger.debug("Skipping rename: %s does not exist", source_path)
        return None
    if source_path.name == target_name:
        return source_path

    destination = next_available_path(source_path.parent, target_name, separator)
    source_path.rename(destination)
    logger.info("Renamed %s to %s", source_path, destination)
    return destination


def _prepare(
    source: PathLike | None,
    target_directory: PathLike | None,
    *,
    create_directory: bool,
) -> tuple[Path, Path] | None:
    if _is_blank_path(source) or _is_blank_path(target_directory):
        logger.debug("Skipping transfer: source and target directory are required")
        return None

    source_path = Path(source)
    if not source_path.is_file():
        logger.debug("Skipping transfer: %s does not exist", source_path)
        return None

    target_dir = Path(target_directory)
    if not target_dir.is_dir():
        if not create_directory:
            raise FileNotFoundError(target_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
    return source_path, target_dir


def _is_blank_path(value: PathLike | None) -> bool:
    return value is None or is_blank(os.fspath(value))
