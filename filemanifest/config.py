"""JSON config readers.

Stores extra exclusion tokens, the preview highlight style, and the default
concatenation output name. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "filemanifest"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_STYLE = "monokai"
DEFAULT_CONCAT_OUTPUT_NAME = "concatenated_output.txt"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_extra_excludes() -> tuple[str, ...]:
    """Return configured extra exclusion tokens.

    Non-list values yield ``()``; non-string and empty items are dropped.
    """
    value = load_config().get("extra_excludes")
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def _load_string(key: str, default: str) -> str:
    value = load_config().get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def load_style() -> str:
    """Pygments style used for ``--print`` previews."""
    return _load_string("style", DEFAULT_STYLE)


def load_concat_output_name() -> str:
    """Default output file name for ``concat-txt``."""
    return _load_string("concat_output_name", DEFAULT_CONCAT_OUTPUT_NAME)
