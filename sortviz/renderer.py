"""Drawing of the list of bars onto a surface."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from sortviz.color import rectangle_color
from sortviz.list_manager import ListManager
from sortviz.rect import Rectangle

BACKGROUND = (30, 30, 30)


class Renderer:
    """Draws bars onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def draw_list(self, items: Iterable[Rectangle], list_manager: ListManager) -> None:
        """Lay the bars out again, clear the background and draw every bar."""
        list_manager.resize_rectangles()
        self.surface.fill(BACKGROUND)
        for rect in items:
            self.draw_rect(rect)

    def draw_rect(self, rect: Rectangle) -> None:
        """Fill one bar in the colour of its state."""
        area = pygame.Rect(rect.start_x, rect.start_y, rect.width, rect.height)
        pygame.draw.rect(self.surface, tuple(rectangle_color(rect.state)), area)