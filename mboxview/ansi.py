"""ANSI-aware width measurement, clipping, and wrapping.

Escape sequences never count toward width and stay attached to the text
they style. Tabs expand to 8-column stops, wide characters take two cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return the number of terminal cells ``ch`` occupies at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    if unicodedata.category(ch) == "Cc":
        return 0
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def _tokens(text: str):
    """Yield ``(is_escape, chunk)`` pairs, one character per plain chunk."""
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                yield True, match.group(0)
                i = match.end()
                continue
        yield False, text[i]
        i += 1


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut a styled line down to ``max_cols`` cells, keeping escape codes."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, chunk in _tokens(text):
        if is_escape:
            out.append(chunk)
            continue
        w = char_display_width(chunk, col)
        if col + w > max_cols:
            break
        out.append(" " * w if chunk == "\t" else chunk)
        col += w
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip to ``width`` cells then right-pad with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    if "\x1b" in clipped:
        clipped += RESET
    return clipped + " " * max(0, width - display_width(clipped))


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Hard-wrap one styled line into chunks of at most ``width`` cells."""
    if width <= 0 or not text:
        return [""]
    wrapped: list[str] = []
    chunk: list[str] = []
    col = 0
    for is_escape, piece in _tokens(text):
        if is_escape:
            chunk.append(piece)
            continue
        w = char_display_width(piece, col)
        if col + w > width and col > 0:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0
            w = char_display_width(piece, col)
        chunk.append(" " * w if piece == "\t" else piece)
        col += w
    wrapped.append("".join(chunk))
    return wrapped


_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def strip_control_chars(text: str) -> str:
    """Drop control characters (ESC included) except tab and newline."""
    return _CONTROL_RE.sub("", text.replace("\r\n", "\n"))


def build_screen_lines(rendered: str, width: int) -> list[str]:
    """Split ``rendered`` into wrapped screen rows without line terminators."""
    rows: list[str] = []
    for line in rendered.splitlines():
        rows.extend(wrap_ansi_line(line, width))
    return rows


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "build_screen_lines",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "pad_ansi_line",
    "strip_control_chars",
    "wrap_ansi_line",
]
