"""Join the ``.txt`` files of one folder into a single text file."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "all_prompts.txt"
FILE_SEPARATOR = "\n\n"


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8, then UTF-8 with BOM, then Latin-1."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@dataclass(frozen=True)
class ConcatResult:
    """Files that were joined and where the result went.

    ``output_path`` is ``None`` when the folder held no ``.txt`` inputs and
    nothing was written.
    """

    files: tuple[str, ...]
    output_path: Path | None


def list_txt_files(folder: Path, output_name: str | None = None) -> list[str]:
    """Return sorted names of direct ``.txt`` children, skipping ``output_name``."""
    names = [
        child.name
        for child in folder.iterdir()
        if child.suffix.lower() == ".txt" and child.name != output_name
    ]
    return sorted(names)


def concatenate_txt_files(
    folder: Path | str,
    output_name: str = DEFAULT_OUTPUT_NAME,
    on_processed: Callable[[str], None] | None = None,
) -> ConcatResult:
    """Write every ``.txt`` file of ``folder`` into ``<folder>/<output_name>``.

    Each file is introduced by a ``--- name ---`` header line. ``on_processed``
    is called with each file name after it has been read.

    Raises ``FileNotFoundError`` when ``folder`` does not exist.
    """
    folder_path = Path(folder)
    if not folder_path.exists():
        raise FileNotFoundError(f'Folder "{folder}" does not exist.')

    names = list_txt_files(folder_path, output_name)
    if not names:
        return ConcatResult(files=(), output_path=None)

    parts: list[str] = []
    for name in names:
        content = read_text(folder_path / name)
        parts.append(f"\n--- {name} ---\n{content}")
        if on_processed is not None:
            on_processed(name)

    output_path = folder_path / output_name
    output_path.write_text(FILE_SEPARATOR.join(parts).strip(), encoding="utf-8")
    logger.debug("concatenated %d files into %s", len(names), output_path)
    return ConcatResult(files=tuple(names), output_path=output_path)
