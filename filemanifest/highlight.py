"""Terminal highlighting for manifest previews.

Renders manifest JSON through Pygments' JSON lexer with a terminal
formatter. Unknown style names fall back to ``monokai``.
"""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

FALLBACK_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the fallback style."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return FALLBACK_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return FALLBACK_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def colorize_json(source: str, style: str = FALLBACK_STYLE) -> str:
    """Return ``source`` with ANSI color escapes for a JSON document."""
    formatter = _formatter_for_style(normalize_style(style))
    return highlight(source, JsonLexer(), formatter)
