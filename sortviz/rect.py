"""Bars that make up the visualised list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class State(Enum):
    """Sorting state of a bar, which decides the colour it is drawn in."""

    BASE = auto()
    SELECTED = auto()
    COMPARED = auto()
    GROUPING = auto()
    MERGE_LEFT = auto()
    MERGE_RIGHT = auto()
    ORDERED = auto()


@dataclass
class Rectangle:
    """One bar: its sort key, its geometry and its sorting state."""

    value: int = 0
    width: int = 0
    height: int = 0
    start_x: int = 0  # top-left x coordinate
    start_y: int = 0  # top-left y coordinate
    state: State = State.BASE

    def copy(self) -> Rectangle:
        """Return an independent copy of this bar."""
        return replace(self)