"""Tests for the text file helpers."""

from __future__ import annotations

import pytest

from slugpath.errors import InvalidArgumentError
from slugpath.io.files import (
    load_text_file,
    load_text_file_async,
    setup_directory,
    write_text_file,
    write_text_file_async,
)


def test_setup_directory_creates_nested_directories(tmp_path):
    target = tmp_path / "a" / "b"

    assert setup_directory(target) == target
    assert target.is_dir()
    # Second call is a no-op.
    setup_directory(target)


def test_write_and_load_text_file(tmp_path):
    target_dir = tmp_path / "out"

    written = write_text_file(target_dir, "notes.txt", "héllo\nworld")

    assert written == target_dir / "notes.txt"
    assert load_text_file(written) == "héllo\nworld"
    assert load_text_file(str(written)) == "héllo\nworld"


def test_write_text_file_overwrites(tmp_path):
    write_text_file(tmp_path, "notes.txt", "first")
    write_text_file(tmp_path, "notes.txt", "second")

    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "second"


def test_load_text_file_missing_returns_none(tmp_path):
    assert load_text_file(tmp_path / "missing.txt") is None


def test_load_text_file_respects_encoding(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes("café".encode("latin-1"))

    assert load_text_file(path, encoding="latin-1") == "café"


@pytest.mark.parametrize("path", [None, "", "   "])
def test_load_text_file_requires_path(path):
    with pytest.raises(InvalidArgumentError):
        load_text_file(path)


def test_write_text_file_requires_arguments(tmp_path):
    with pytest.raises(InvalidArgumentError) as excinfo:
        write_text_file("", "notes.txt", "x")
    assert excinfo.value.argument == "directory"

    with pytest.raises(InvalidArgumentError) as excinfo:
        write_text_file(tmp_path, " ", "x")
    assert excinfo.value.argument == "file_name"


@pytest.mark.asyncio
async def test_async_round_trip(tmp_path):
    written = await write_text_file_async(tmp_path / "async", "data.txt", "payload")

    assert written.read_text(encoding="utf-8") == "payload"
    assert await load_text_file_async(written) == "payload"
    assert await load_text_file_async(tmp_path / "async" / "missing.txt") is None


@pytest.mark.asyncio
async def test_async_helpers_validate_arguments():
    with pytest.raises(InvalidArgumentError):
        await load_text_file_async("")
    with pytest.raises(InvalidArgumentError):
        await write_text_file_async(None, "data.txt", "payload")
