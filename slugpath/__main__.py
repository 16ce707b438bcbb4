"""Command line entry point for the slugpath helpers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from . import AppConfig, SettingsStore
from .io.transfer import safe_copy_file, safe_move_file, safe_rename_file
from .utils.paths import next_available_path
from .utils.sizes import format_byte_size
from .utils.text import slugify


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slugpath", description="Slug and file name helpers")
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file to use instead of the per-user settings.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    slug_cmd = commands.add_parser("slugify", help="Print URL-friendly slugs for each text.")
    slug_cmd.add_argument("text", nargs="+")

    next_cmd = commands.add_parser("next-name", help="Print the next free path for a file name.")
    next_cmd.add_argument("directory", type=Path)
    next_cmd.add_argument("file_name")
    next_cmd.add_argument("--separator", help="Override the configured separator.")

    for name, verb in (("move", "Move"), ("copy", "Copy")):
        cmd = commands.add_parser(name, help=f"{verb} a file without overwriting the target.")
        cmd.add_argument("source", type=Path)
        cmd.add_argument("target_directory", type=Path)
        cmd.add_argument("--separator", help="Override the configured separator.")

    rename_cmd = commands.add_parser("rename", help="Rename a file without overwriting another.")
    rename_cmd.add_argument("source", type=Path)
    rename_cmd.add_argument("new_name")
    rename_cmd.add_argument("--separator", help="Override the configured separator.")

    size_cmd = commands.add_parser("size", help="Format byte counts for display.")
    size_cmd.add_argument("bytes", type=int, nargs="+")
    size_cmd.add_argument(
        "--decimals",
        type=int,
        choices=range(0, 7),
        metavar="{0..6}",
        help="Override the configured decimals.",
    )

    settings_cmd = commands.add_parser("settings", help="Show or change the stored settings.")
    settings_actions = settings_cmd.add_subparsers(dest="action", required=True)
    settings_actions.add_parser("show", help="Print the effective settings.")
    set_cmd = settings_actions.add_parser("set", help="Validate and store a single setting.")
    set_cmd.add_argument("key", choices=sorted(AppConfig.model_fields))
    set_cmd.add_argument("value")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        explicit = args.config is not None and args.command != "settings"
        store = SettingsStore(args.config, required=explicit)
        config = store.load()
    except (FileNotFoundError, ValueError) as exc:
        parser.error(f"could not load settings: {exc}")

    try:
        if args.command == "settings":
            output = _run_settings(args, store, config)
        else:
            output = _run(args, config)
    except ValueError as exc:
        parser.error(str(exc))

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _run(args: argparse.Namespace, config: AppConfig) -> Any:
    if args.command == "slugify":
        return [
            {"text": text, "slug": slugify(text, max_chars=config.slug_max_chars)}
            for text in args.text
        ]

    if args.command == "size":
        decimals = config.byte_size_decimals if args.decimals is None else args.decimals
        return [
            {
                "bytes": value,
                "display": format_byte_size(
                    value, decimals=decimals, trim_zeros=config.trim_byte_size_zeros
                ),
            }
            for value in args.bytes
        ]

    separator = args.separator or config.separator

    if args.command == "next-name":
        path = next_available_path(args.directory, args.file_name, separator)
        return {"path": str(path)}

    if args.command == "rename":
        destination = safe_rename_file(args.source, args.new_name, separator=separator)
    else:
        transfer = safe_move_file if args.command == "move" else safe_copy_file
        destination = transfer(
            args.source,
            args.target_directory,
            separator=separator,
            create_directory=config.create_missing_directories,
        )
    return {
        "source": str(args.source),
        "destination": str(destination) if destination else None,
    }


def _run_settings(args: argparse.Namespace, store: SettingsStore, config: AppConfig) -> Any:
    if args.action == "set":
        config = store.update(**{args.key: args.value})
    return {"path": str(store.path), "settings": config.as_dict()}


if __name__ == "__main__":  # pragma: no cover
    main()
