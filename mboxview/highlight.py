"""Pygments colouring for the detail pane.

The flattened message is header lines, a blank line, then body text, which
is exactly the shape pygments' email lexer expects.
"""

from __future__ import annotations

import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_INVALID_STYLES: set[str] = set()


def normalize_style(style: str | None) -> str:
    """Return ``style`` when pygments knows it, otherwise the default style."""
    if not style or style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        logger.warning("unknown pygments style %r, using %s", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_message(text: str, style: str | None = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``text`` with ANSI colours, or unchanged when colouring is off or fails."""
    if no_color or not text:
        return text
    lexer = get_lexer_by_name("email", stripnl=False, ensurenl=False)
    try:
        return pygments_highlight(text, lexer, _formatter_for_style(normalize_style(style)))
    except Exception:
        logger.debug("message highlighting failed", exc_info=True)
        return text


__all__ = ["DEFAULT_STYLE", "colorize_message", "normalize_style"]
