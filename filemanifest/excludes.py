"""Exclusion policy for manifest scans.

A path is skipped when any token occurs anywhere in its relative path, or
when its base name equals a token. Substring matching is intentionally
broad: ``my.gitignore`` is skipped just like ``.gitignore``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

DEFAULT_EXCLUDES: tuple[str, ...] = (
    ".git",
    ".gitignore",
    "node_modules",
    ".DS_Store",
    "files.json",
    "generate-files.js",
    "index.html",
)


def exclusion_tokens(extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Return the fixed tokens followed by any non-empty ``extra`` tokens."""
    tokens = list(DEFAULT_EXCLUDES)
    for token in extra:
        if token and token not in tokens:
            tokens.append(token)
    return tuple(tokens)


def should_exclude(relative_path: str, extra: Iterable[str] = ()) -> bool:
    """Return whether ``relative_path`` matches the exclusion policy."""
    base_name = PurePosixPath(relative_path).name
    return any(
        token in relative_path or base_name == token
        for token in exclusion_tokens(extra)
    )


__all__ = [
    "DEFAULT_EXCLUDES",
    "exclusion_tokens",
    "should_exclude",
]
