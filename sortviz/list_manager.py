"""Layout of the list of bars inside the window."""

from __future__ import annotations

import random

from sortviz.rect import Rectangle, State


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class ListManager:
    """Holds the bars and lays them out to fit the window."""

    margin = 24
    rect_padding = 2

    def __init__(
        self,
        window_width: int,
        window_height: int,
        list_count: int = 32,
        rng: random.Random | None = None,
    ) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.list_count = list_count
        self._rng = rng if rng is not None else random.Random()
        self.items: list[Rectangle] = []
        self.create_list()

    def _layout(self) -> tuple[int, int, int]:
        drawable_width = self.window_width - self.margin * 2
        drawable_height = (
            self.window_height - self.margin * 2 - _div(self.window_height, 10)
        )
        rect_width = _div(
            drawable_width - self.rect_padding * (self.list_count - 1), self.list_count
        )
        width_offset = _div(
            drawable_width - self.list_count * (rect_width + self.rect_padding), 2
        )
        return drawable_height, rect_width, width_offset

    def _place(self, index: int, rect: Rectangle) -> None:
        drawable_height, rect_width, width_offset = self._layout()
        rect_height = rect.value * _div(drawable_height, self.list_count)
        rect.width = rect_width
        rect.height = rect_height
        rect.start_x = (
            self.margin + index * (rect_width + self.rect_padding) + width_offset
        )
        rect.start_y = (
            self.margin
            + (drawable_height - rect_height)
            + _div(self.window_height, 10)
        )

    def create_list(self) -> None:
        """Build the sorted list of bars with values 1 to ``list_count``."""
        self.items = []
        for index in range(self.list_count):
            rect = Rectangle(value=index + 1, state=State.BASE)
            self._place(index, rect)
            self.items.append(rect)

    def resize(self, width: int, height: int) -> None:
        """Set a new window size and lay the bars out again."""
        self.window_width = width
        self.window_height = height
        self.resize_rectangles()

    def resize_rectangles(self) -> None:
        """Recompute the size and position of every bar from its value."""
        for index, rect in enumerate(self.items):
            self._place(index, rect)

    def shuffle(self) -> None:
        """Shuffle the values, reset every state and lay the bars out again."""
        values = [rect.value for rect in self.items]
        self._rng.shuffle(values)
        for rect, value in zip(self.items, values):
            rect.value = value
            rect.state = State.BASE
        self.resize(self.window_width, self.window_height)