"""Palettes for the panel frame and subject list.

Message text colouring is a separate pygments style setting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SGR_RESET = "\033[0m"


@dataclass(frozen=True)
class UITheme:
    """ANSI prefixes for frame elements; ``reset`` ends every styled run."""

    name: str
    reset: str
    border: str
    border_active: str
    title: str
    title_active: str
    list_selected: str
    empty_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset=SGR_RESET,
    border="\033[2m",
    border_active="\033[38;5;44m",
    title="\033[2;38;5;250m",
    title_active="\033[1;38;5;81m",
    list_selected="\033[92m",
    empty_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset=SGR_RESET,
    border="\033[2;38;5;31m",
    border_active="\033[38;5;39m",
    title="\033[2;38;5;110m",
    title_active="\033[1;38;5;45m",
    list_selected="\033[38;5;117m",
    empty_hint="\033[2;38;5;110m",
)

# Used for --no-color; every field is empty so layout math is unaffected.
PLAIN_THEME = UITheme("plain", "", "", "", "", "", "", "")

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette called ``name``; ``no_color`` always yields the plain one."""
    if no_color:
        return PLAIN_THEME
    theme = _THEMES.get((name or DEFAULT_THEME.name).strip().lower())
    if theme is None:
        logger.warning("unknown theme %r, using %s", name, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "SGR_RESET",
    "UITheme",
    "available_theme_names",
    "resolve_theme",
]
