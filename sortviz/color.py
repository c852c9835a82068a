"""Colours used to draw bars in each sorting state."""

from __future__ import annotations

from typing import NamedTuple

from sortviz.rect import State


class RGBColor(NamedTuple):
    """An opaque colour with 8-bit channels."""

    r: int
    g: int
    b: int


BASE = RGBColor(50, 50, 50)
RED = RGBColor(200, 60, 40)
GREEN = RGBColor(0, 150, 75)
BLUE = RGBColor(0, 120, 160)
ORANGE = RGBColor(200, 120, 0)

# Halves of a merge
CYAN = RGBColor(0, 180, 180)
PURPLE = RGBColor(150, 80, 200)

_STATE_COLORS = {
    State.ORDERED: GREEN,
    State.SELECTED: RED,
    State.COMPARED: BLUE,
    State.GROUPING: ORANGE,
    State.MERGE_LEFT: CYAN,
    State.MERGE_RIGHT: PURPLE,
}


def rectangle_color(state: State) -> RGBColor:
    """Return the colour a bar in ``state`` is drawn with."""
    return _STATE_COLORS.get(state, BASE)