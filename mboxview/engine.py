"""Navigation state machine.

``NavigationEngine`` owns a ``ViewState`` and applies one ``Command`` at a
time against a read-only message sequence. Transitions never raise: empty
stores and failed thread lookups leave the state unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from .mailstore import MailMessage
from .state import Pane, ViewState
from .threads import find_child, find_next_sibling, find_parent, find_prev_sibling

# Top and bottom panel borders.
CHROME_ROWS = 2
MAX_SCROLL_OFFSET = 0xFFFF


class Command(Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    SWITCH_PANE = "switch_pane"
    JUMP_TO_PARENT = "jump_to_parent"
    JUMP_TO_CHILD = "jump_to_child"
    JUMP_TO_PREV_SIBLING = "jump_to_prev_sibling"
    JUMP_TO_NEXT_SIBLING = "jump_to_next_sibling"
    QUIT = "quit"


Resolver = Callable[[Sequence[MailMessage], int], int | None]

_RESOLVERS: dict[Command, Resolver] = {
    Command.JUMP_TO_PARENT: find_parent,
    Command.JUMP_TO_CHILD: find_child,
    Command.JUMP_TO_PREV_SIBLING: find_prev_sibling,
    Command.JUMP_TO_NEXT_SIBLING: find_next_sibling,
}


def page_jump(state: ViewState) -> int:
    """Rows advanced by a page command for the current viewport."""
    return max(1, state.viewport.height - CHROME_ROWS)


def _scroll_by(state: ViewState, delta: int) -> None:
    state.scroll_offset = max(0, min(MAX_SCROLL_OFFSET, state.scroll_offset + delta))


def _select(state: ViewState, index: int, count: int) -> None:
    state.selected = max(0, min(index, count - 1))
    state.scroll_offset = 0


class NavigationEngine:
    """Apply navigation commands to a ``ViewState``."""

    def __init__(self, messages: Sequence[MailMessage], state: ViewState | None = None) -> None:
        self.messages = messages
        self.state = state if state is not None else ViewState()

    def resize(self, width: int, height: int) -> bool:
        """Cache the terminal size; return whether it changed."""
        viewport = self.state.viewport
        if (viewport.width, viewport.height) == (width, height):
            return False
        viewport.width = width
        viewport.height = height
        self.state.dirty = True
        return True

    def apply(self, command: Command) -> bool:
        """Apply ``command`` and return ``True`` when the session should end."""
        if command is Command.QUIT:
            return True
        state = self.state
        count = len(self.messages)
        if count == 0:
            return False

        if command is Command.SWITCH_PANE:
            state.active_pane = state.active_pane.toggled()
            state.dirty = True
            return False

        resolver = _RESOLVERS.get(command)
        if resolver is not None:
            target = resolver(self.messages, state.selected)
            if target is not None:
                _select(state, target, count)
                state.dirty = True
            return False

        if command in {Command.MOVE_DOWN, Command.MOVE_UP}:
            step = 1
        else:
            step = page_jump(state)
        if command in {Command.MOVE_UP, Command.PAGE_UP}:
            step = -step

        if state.active_pane is Pane.LIST:
            _select(state, state.selected + step, count)
        else:
            _scroll_by(state, step)
        state.dirty = True
        return False


__all__ = [
    "CHROME_ROWS",
    "MAX_SCROLL_OFFSET",
    "Command",
    "NavigationEngine",
    "page_jump",
]
