"""Keyboard input: raw key decoding, command bindings, and the capture thread."""

from __future__ import annotations

from .bindings import (
    DEFAULT_BINDINGS,
    QUIT_KEYS,
    KeyComboBinding,
    KeyComboRegistry,
    default_registry,
)
from .keys import EOF_KEY, read_key
from .reader import KeyReader

__all__ = [
    "DEFAULT_BINDINGS",
    "EOF_KEY",
    "QUIT_KEYS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyReader",
    "default_registry",
    "read_key",
]
