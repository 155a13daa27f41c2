"""Session bootstrap: wire store, engine, renderer, terminal, and input."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import TextIO

from ..engine import NavigationEngine
from ..highlight import colorize_message
from ..input import KeyReader, default_registry
from ..mailstore import MessageStore
from ..render import MessageTextCache, build_render_plan, display_message, render_frame
from ..state import ViewState
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


def print_messages(
    store: MessageStore,
    out: TextIO,
    *,
    style: str | None = None,
    no_color: bool = True,
) -> None:
    """Write every message, flattened, one after another."""
    total = len(store)
    for index, message in enumerate(store):
        out.write(f"=== [{index + 1}/{total}] {store.subjects[index]}\n")
        out.write(colorize_message(display_message(message), style, no_color=no_color))
        out.write("\n")


def run_viewer(
    store: MessageStore,
    path: Path,
    style: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
    theme_name: str | None = None,
) -> None:
    """Show ``store`` interactively, or print it when no terminal is attached."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if nopager or not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        print_messages(store, sys.stdout, style=style, no_color=no_color or not os.isatty(stdout_fd))
        return

    theme = resolve_theme(theme_name, no_color=no_color)
    state = ViewState()
    engine = NavigationEngine(store.messages, state)
    text_cache = MessageTextCache(store, style=style, no_color=no_color)

    def draw() -> None:
        render_frame(build_render_plan(state, store, theme, text_cache.lines), theme)

    logger.info("viewing %s (%d messages)", path, len(store))
    run_main_loop(
        engine,
        TerminalController(stdin_fd, stdout_fd),
        KeyReader(stdin_fd),
        default_registry(),
        RuntimeLoopCallbacks(draw=draw, terminal_size=_terminal_size),
    )
    logger.info("session ended")


__all__ = ["print_messages", "run_viewer"]
