from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Pane(Enum):
    LIST = "list"
    DETAIL = "detail"

    def toggled(self) -> Pane:
        return Pane.DETAIL if self is Pane.LIST else Pane.LIST


@dataclass
class Viewport:
    width: int = 80
    height: int = 24


@dataclass
class ViewState:
    selected: int = 0
    active_pane: Pane = Pane.LIST
    scroll_offset: int = 0
    viewport: Viewport = field(default_factory=Viewport)
    dirty: bool = True
