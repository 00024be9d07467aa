"""Command-line front doors for filemanifest.

``main`` writes the ``files.json`` manifest for a directory; ``concat_main``
joins a folder's ``.txt`` files. Both turn filesystem errors into a one-line
``SystemExit`` message.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .concat import concatenate_txt_files, list_txt_files
from .highlight import colorize_json
from .manifest import manifest_json, write_manifest

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _exclude_token(value: str) -> str:
    """argparse type for non-empty exclusion tokens."""
    if not value:
        raise argparse.ArgumentTypeError("exclude token must not be empty")
    return value


def _stdout_is_tty() -> bool:
    try:
        return os.isatty(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and write ``files.json`` for the target directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        prog="generate-files",
        description="Write files.json listing a directory's files ordered by creation time.",
    )
    parser.add_argument("directory", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        type=_exclude_token,
        metavar="TOKEN",
        help="Extra exclusion token, matched like the built-in ones. Repeatable.",
    )
    parser.add_argument("--print", dest="print_manifest", action="store_true", help="Also print the manifest.")
    parser.add_argument("--style", default=None, help="Pygments style name for --print highlighting.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and timestamps.")
    args = parser.parse_args()
    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path(".")
    directory = Path(args.directory or default_path)
    extra_excludes = (*config.load_extra_excludes(), *args.exclude)

    try:
        result = write_manifest(directory, extra_excludes)
    except OSError as exc:
        raise SystemExit(f"Cannot build manifest for {directory}: {exc}") from exc

    print(f"Created {result.output_path} with {len(result.entries)} files")

    if args.print_manifest:
        payload = manifest_json(result.entries)
        if not args.no_color and _stdout_is_tty():
            payload = colorize_json(payload, args.style or config.load_style())
        sys.stdout.write(payload if payload.endswith("\n") else payload + "\n")


def concat_main() -> None:
    """Parse CLI arguments and concatenate a folder's ``.txt`` files."""
    parser = argparse.ArgumentParser(
        prog="concat-txt",
        description="Concatenate the .txt files of a folder into one file.",
        epilog="Example: concat-txt ./my-texts merged.txt",
    )
    parser.add_argument("folder", help="Folder holding the .txt files.")
    parser.add_argument("output", nargs="?", default=None, help="Output file name, written inside FOLDER.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()
    _configure_logging(args.verbose)

    output_name = args.output or config.load_concat_output_name()
    folder = Path(args.folder)
    if not folder.exists():
        raise SystemExit(f'Error: Folder "{args.folder}" does not exist.')

    try:
        names = list_txt_files(folder, output_name)
        if names:
            print(f"Found {len(names)} .txt files:")
            for name in names:
                print(f"  - {name}")
        result = concatenate_txt_files(
            folder,
            output_name,
            on_processed=lambda name: print(f"Processed: {name}"),
        )
    except OSError as exc:
        raise SystemExit(f"Error occurred: {exc}") from exc

    if result.output_path is None:
        print("No .txt files found in the specified folder.")
        return
    print(f"\nSuccess! Concatenated {len(result.files)} files into: {result.output_path}")


if __name__ == "__main__":
    main()
