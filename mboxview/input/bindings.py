"""Key token to navigation command bindings."""

from __future__ import annotations

from dataclasses import dataclass

from ..engine import Command
from .keys import EOF_KEY

# Closed input ends the session like an explicit quit.
QUIT_KEYS = frozenset({"q", "CTRL_C", EOF_KEY})


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single command."""

    combos: tuple[str, ...]
    command: Command


class KeyComboRegistry:
    """Exact-match key dispatch table."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[combo] = binding.command
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Command | None:
        return self._commands.get(key)


DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(tuple(sorted(QUIT_KEYS)), Command.QUIT),
    KeyComboBinding(("h",), Command.JUMP_TO_PARENT),
    KeyComboBinding(("l",), Command.JUMP_TO_CHILD),
    KeyComboBinding(("N",), Command.JUMP_TO_PREV_SIBLING),
    KeyComboBinding(("n",), Command.JUMP_TO_NEXT_SIBLING),
    KeyComboBinding(("TAB",), Command.SWITCH_PANE),
    KeyComboBinding(("j", "DOWN"), Command.MOVE_DOWN),
    KeyComboBinding(("k", "UP"), Command.MOVE_UP),
    KeyComboBinding(("PAGE_DOWN",), Command.PAGE_DOWN),
    KeyComboBinding(("PAGE_UP",), Command.PAGE_UP),
)


def default_registry() -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)


__all__ = [
    "DEFAULT_BINDINGS",
    "QUIT_KEYS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "default_registry",
]
