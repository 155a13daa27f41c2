"""Rendering for the split subject-list / message view.

``build_render_plan`` turns view state into per-pane rows without side
effects; ``render_frame`` composes the boxed panels and writes one ANSI
frame to stdout.
"""

from __future__ import annotations

import os
import sys
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

from ..ansi import build_screen_lines, pad_ansi_line, strip_control_chars
from ..highlight import DEFAULT_STYLE, colorize_message
from ..mailstore import MessageStore
from ..state import Pane, ViewState
from ..ui_theme import PLAIN_THEME, UITheme
from .message import display_message, flatten_body

ACTIVE_PANE_PERCENT = 70
LIST_TITLE = "List"
DETAIL_TITLE = "Email"
SELECTED_MARKER = ">"
EMPTY_STORE_HINT = "(mailbox is empty)"
TEXT_CACHE_ENTRIES = 32


@dataclass(frozen=True)
class PanePlan:
    title: str
    width: int
    height: int
    active: bool
    rows: tuple[str, ...]


@dataclass(frozen=True)
class RenderPlan:
    width: int
    height: int
    list_pane: PanePlan
    detail_pane: PanePlan


def pane_widths(total_width: int, active_pane: Pane) -> tuple[int, int]:
    """Split ``total_width`` into ``(list_width, detail_width)``; the active side gets 70%."""
    total_width = max(0, total_width)
    active_width = total_width * ACTIVE_PANE_PERCENT // 100
    if active_pane is Pane.LIST:
        list_width = active_width
    else:
        list_width = total_width - active_width
    return list_width, total_width - list_width


def list_window_start(selected: int, visible_rows: int) -> int:
    """First visible list row such that ``selected`` stays on screen."""
    if visible_rows <= 0:
        return 0
    return max(0, selected - visible_rows + 1)


def list_rows(subjects: tuple[str, ...], selected: int, visible_rows: int, theme: UITheme) -> tuple[str, ...]:
    if not subjects:
        return (f"{theme.empty_hint}{EMPTY_STORE_HINT}{theme.reset}",)
    start = list_window_start(selected, visible_rows)
    rows: list[str] = []
    for idx in range(start, min(len(subjects), start + visible_rows)):
        label = strip_control_chars(subjects[idx])
        if idx == selected:
            rows.append(f"{theme.list_selected}{SELECTED_MARKER}{label}{theme.reset}")
        else:
            rows.append(f"{' ' * len(SELECTED_MARKER)}{label}")
    return tuple(rows)


class MessageTextCache:
    """Wrapped, coloured detail text per ``(message index, width)``."""

    def __init__(
        self,
        store: MessageStore,
        *,
        style: str | None = DEFAULT_STYLE,
        no_color: bool = False,
        max_entries: int = TEXT_CACHE_ENTRIES,
    ) -> None:
        self.store = store
        self.style = style
        self.no_color = no_color
        self.max_entries = max(1, max_entries)
        self._entries: OrderedDict[tuple[int, int], list[str]] = OrderedDict()

    def lines(self, index: int, width: int) -> list[str]:
        key = (index, width)
        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            return cached
        text = strip_control_chars(display_message(self.store[index]))
        text = colorize_message(text, self.style, no_color=self.no_color)
        lines = build_screen_lines(text, width)
        self._entries[key] = lines
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return lines


def build_render_plan(
    state: ViewState,
    store: MessageStore,
    theme: UITheme = PLAIN_THEME,
    detail_lines: Callable[[int, int], list[str]] | None = None,
) -> RenderPlan:
    """Compute both panes' visible rows for ``state``.

    ``detail_lines(index, width)`` supplies wrapped message text; by default
    the message is flattened and wrapped uncoloured on every call.
    """
    width = max(0, state.viewport.width)
    height = max(0, state.viewport.height)
    inner_height = max(0, height - 2)
    list_width, detail_width = pane_widths(width, state.active_pane)

    rows = list_rows(store.subjects, state.selected, inner_height, theme)
    list_pane = PanePlan(
        title=LIST_TITLE,
        width=list_width,
        height=height,
        active=state.active_pane is Pane.LIST,
        rows=rows[:inner_height],
    )

    detail_rows: tuple[str, ...] = ()
    inner_width = max(0, detail_width - 2)
    if len(store) and inner_width > 0:
        if detail_lines is None:
            lines = build_screen_lines(strip_control_chars(display_message(store[state.selected])), inner_width)
        else:
            lines = detail_lines(state.selected, inner_width)
        start = state.scroll_offset
        detail_rows = tuple(lines[start : start + inner_height])
    detail_pane = PanePlan(
        title=DETAIL_TITLE,
        width=detail_width,
        height=height,
        active=state.active_pane is Pane.DETAIL,
        rows=detail_rows,
    )
    return RenderPlan(width=width, height=height, list_pane=list_pane, detail_pane=detail_pane)


def _box_rows(pane: PanePlan, theme: UITheme) -> list[str]:
    """Draw ``pane`` as exactly ``pane.height`` rows of ``pane.width`` cells."""
    if pane.width <= 0 or pane.height <= 0:
        return [""] * max(0, pane.height)
    if pane.width < 2 or pane.height < 2:
        return [" " * pane.width] * pane.height

    border = theme.border_active if pane.active else theme.border
    title_style = theme.title_active if pane.active else theme.title
    inner = pane.width - 2
    title = pane.title[:inner]
    top = f"{border}┌{theme.reset}{title_style}{title}{theme.reset}{border}{'─' * (inner - len(title))}┐{theme.reset}"
    side = f"{border}│{theme.reset}"
    out = [top]
    for row in range(pane.height - 2):
        text = pane.rows[row] if row < len(pane.rows) else ""
        out.append(f"{side}{pad_ansi_line(text, inner)}{side}")
    out.append(f"{border}└{'─' * inner}┘{theme.reset}")
    return out


def compose_frame(plan: RenderPlan, theme: UITheme = PLAIN_THEME) -> str:
    """Return the full-screen ANSI frame for ``plan``."""
    left = _box_rows(plan.list_pane, theme)
    right = _box_rows(plan.detail_pane, theme)
    rows = [f"{left[row]}{right[row]}" for row in range(plan.height)]
    return "\033[H\033[J" + "\r\n".join(rows)


def render_frame(plan: RenderPlan, theme: UITheme = PLAIN_THEME) -> None:
    os.write(sys.stdout.fileno(), compose_frame(plan, theme).encode("utf-8", errors="replace"))


__all__ = [
    "ACTIVE_PANE_PERCENT",
    "MessageTextCache",
    "PanePlan",
    "RenderPlan",
    "build_render_plan",
    "compose_frame",
    "display_message",
    "flatten_body",
    "list_window_start",
    "pane_widths",
    "render_frame",
]
