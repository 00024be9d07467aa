"""Directory snapshot into a creation-time ordered ``files.json`` manifest.

Scans a single directory without descending into subdirectories, drops
entries matched by :mod:`filemanifest.excludes`, and records each regular
file with its creation timestamp. Any filesystem error propagates to the
caller; the manifest is only written once the whole scan has succeeded.
"""

from __future__ import annotations

import json
import logging
import os
import stat
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .birthtime import file_birthtime, format_birthtime, parse_birthtime
from .excludes import should_exclude

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "files.json"


@dataclass(frozen=True)
class FileEntry:
    """One manifest row: posix-style relative path plus ISO creation time."""

    path: str
    birthtime: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "birthtime": self.birthtime}


@dataclass(frozen=True)
class ManifestResult:
    """Outcome of :func:`write_manifest`."""

    output_path: Path
    entries: tuple[FileEntry, ...]


def _posix_relative(name: str) -> str:
    """Return ``name`` with forward slashes and undecodable bytes as U+FFFD."""
    text = os.fsencode(name).decode("utf-8", errors="replace")
    return text.replace("\\", "/")


def collect_entries(directory: Path | str, extra_excludes: Iterable[str] = ()) -> list[FileEntry]:
    """Return manifest entries for direct children of ``directory``.

    Entries come back in filesystem enumeration order. Subdirectories are
    stat'ed but never listed or descended into.
    """
    extra = tuple(extra_excludes)
    entries: list[FileEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            relative_path = _posix_relative(child.name)
            if should_exclude(relative_path, extra):
                logger.debug("excluded %s", relative_path)
                continue

            child_stat = child.stat()
            if not stat.S_ISREG(child_stat.st_mode):
                logger.debug("skipped non-file %s", relative_path)
                continue

            entries.append(
                FileEntry(
                    path=relative_path,
                    birthtime=format_birthtime(file_birthtime(child_stat)),
                )
            )
    return entries


def sort_entries(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Stable ascending sort by parsed ``birthtime``."""
    return sorted(entries, key=lambda entry: parse_birthtime(entry.birthtime))


def build_manifest(directory: Path | str, extra_excludes: Iterable[str] = ()) -> list[FileEntry]:
    """Collect and order the manifest for ``directory`` without writing it."""
    return sort_entries(collect_entries(directory, extra_excludes))


def manifest_json(entries: Sequence[FileEntry]) -> str:
    """Serialize ``entries`` as a 2-space indented JSON array."""
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)


def write_manifest(directory: Path | str, extra_excludes: Iterable[str] = ()) -> ManifestResult:
    """Build the manifest and overwrite ``<directory>/files.json`` with it."""
    target = Path(directory)
    entries = build_manifest(target, extra_excludes)
    payload = manifest_json(entries)
    output_path = target / MANIFEST_FILENAME
    data = payload.encode("utf-8")
    output_path.write_bytes(data)
    logger.debug("wrote %d entries to %s", len(entries), output_path)
    return ManifestResult(output_path=output_path, entries=tuple(entries))


__all__ = [
    "MANIFEST_FILENAME",
    "FileEntry",
    "ManifestResult",
    "build_manifest",
    "collect_entries",
    "manifest_json",
    "sort_entries",
    "write_manifest",
]
