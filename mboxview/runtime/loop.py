"""Main interactive event loop for the terminal UI.

Blocks on the key queue, maps keys to commands, and redraws when state is
dirty. Feature logic lives in the engine and the injected callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty

from ..engine import NavigationEngine
from ..input import KeyComboRegistry, KeyReader
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """How long one queue wait lasts before the terminal size is re-checked."""

    resize_poll_seconds: float = 0.25


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    draw: Callable[[], None]
    terminal_size: Callable[[], tuple[int, int]]


def run_main_loop(
    engine: NavigationEngine,
    terminal: TerminalController,
    reader: KeyReader,
    registry: KeyComboRegistry,
    callbacks: RuntimeLoopCallbacks,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the interactive loop until a quit command is applied.

    The terminal is restored and the reader stopped on every exit path,
    including exceptions raised by ``callbacks.draw``.
    """
    state = engine.state
    with terminal.raw_mode():
        reader.start()
        try:
            while True:
                columns, lines = callbacks.terminal_size()
                engine.resize(columns, lines)
                if state.dirty:
                    callbacks.draw()
                    state.dirty = False

                try:
                    key = reader.events.get(timeout=timing.resize_poll_seconds)
                except Empty:
                    continue
                command = registry.lookup(key)
                if command is None:
                    continue
                if engine.apply(command):
                    logger.debug("quit requested by %r", key)
                    break
        finally:
            reader.stop()


__all__ = ["RuntimeLoopCallbacks", "RuntimeLoopTiming", "run_main_loop"]
