"""Window, event loop and control panel of the sorting visualiser."""

from __future__ import annotations

import sys

import pygame

from sortviz.context import (
    MINIMUM_WINDOW_HEIGHT,
    MINIMUM_WINDOW_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AppContext,
)
from sortviz.renderer import Renderer

TITLE = "Sorting Visualizer"

PANEL_WIDTH = int(MINIMUM_WINDOW_WIDTH / 2.5)
ITEM_HEIGHT = 28
ITEM_SPACING = 6
PADDING = 8
TITLE_HEIGHT = 18

_PANEL_BG = (36, 36, 36)
_TITLE_BG = (41, 74, 122)
_BUTTON_BG = (41, 74, 122)
_FRAME_BG = (29, 47, 73)
_GRAB = (61, 133, 224)
_TEXT = (255, 255, 255)
_SELECTED_BG = (66, 150, 250)


class ControlPanel:
    """Shuffle and sort buttons, a speed slider and a sort selector."""

    def __init__(self, context: AppContext, position: tuple[int, int] = (10, 10)) -> None:
        self.context = context
        x, y = position
        inner_width = PANEL_WIDTH - 2 * PADDING
        top = y + TITLE_HEIGHT + PADDING
        rows = [
            pygame.Rect(x + PADDING, top + k * (ITEM_HEIGHT + ITEM_SPACING), inner_width, ITEM_HEIGHT)
            for k in range(4)
        ]
        self.shuffle_rect, self.sort_rect, self.slider_rect, self.combo_rect = rows
        height = TITLE_HEIGHT + 2 * PADDING + 4 * ITEM_HEIGHT + 3 * ITEM_SPACING
        self.rect = pygame.Rect(x, y, PANEL_WIDTH, height)
        self.combo_open = False
        self._dragging = False
        self._font: pygame.font.Font | None = None

    def option_rects(self) -> list[pygame.Rect]:
        """Return the areas of the sort choices shown when the selector is open."""
        combo = self.combo_rect
        return [
            pygame.Rect(combo.x, combo.bottom + k * ITEM_HEIGHT, combo.width, ITEM_HEIGHT)
            for k in range(self.context.sort_manager.sort_count())
        ]

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to a mouse event; return True if the panel used it."""
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
            return self._click(event.pos)
        if event.type == pygame.MOUSEMOTION and self._dragging:
            self._set_speed(event.pos[0])
            return True
        if event.type == pygame.MOUSEBUTTONUP and self._dragging:
            self._dragging = False
            return True
        return False

    def _click(self, pos: tuple[int, int]) -> bool:
        if self.combo_open:
            self.combo_open = False
            for sort_id, area in enumerate(self.option_rects()):
                if area.collidepoint(pos):
                    self.context.select_sort(sort_id)
                    return True
            if self.combo_rect.collidepoint(pos):
                return True
        if self.shuffle_rect.collidepoint(pos):
            self.context.shuffle()
            return True
        if self.sort_rect.collidepoint(pos):
            self.context.start_sort()
            return True
        if self.slider_rect.collidepoint(pos):
            self._dragging = True
            self._set_speed(pos[0])
            return True
        if self.combo_rect.collidepoint(pos):
            self.combo_open = True
            return True
        return self.rect.collidepoint(pos)

    def _set_speed(self, x: int) -> None:
        slider = self.slider_rect
        span = max(slider.width - 1, 1)
        self.context.delay_time_normalized = min(max((x - slider.x) / span, 0.0), 1.0)

    def _text(self, surface: pygame.Surface, text: str, area: pygame.Rect) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        image = self._font.render(text, True, _TEXT)
        surface.blit(image, image.get_rect(center=area.center))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel onto ``surface``."""
        pygame.draw.rect(surface, _PANEL_BG, self.rect, border_radius=4)
        title = pygame.Rect(self.rect.x, self.rect.y, self.rect.width, TITLE_HEIGHT)
        pygame.draw.rect(surface, _TITLE_BG, title, border_radius=4)

        for area, label in ((self.shuffle_rect, "Shuffle"), (self.sort_rect, "Sort")):
            pygame.draw.rect(surface, _BUTTON_BG, area, border_radius=4)
            self._text(surface, label, area)

        slider = self.slider_rect
        pygame.draw.rect(surface, _FRAME_BG, slider, border_radius=4)
        speed = self.context.delay_time_normalized
        grab_x = slider.x + round(speed * (slider.width - 10))
        pygame.draw.rect(surface, _GRAB, pygame.Rect(grab_x, slider.y + 2, 10, slider.height - 4), border_radius=4)
        self._text(surface, f"{speed:.3f}", slider)

        manager = self.context.sort_manager
        pygame.draw.rect(surface, _FRAME_BG, self.combo_rect, border_radius=4)
        self._text(surface, manager.sort_name(manager.current_sort_id), self.combo_rect)

        if self.combo_open:
            for sort_id, area in enumerate(self.option_rects()):
                colour = _SELECTED_BG if sort_id == manager.current_sort_id else _PANEL_BG
                pygame.draw.rect(surface, colour, area)
                self._text(surface, manager.sort_name(sort_id), area)


class App:
    """The visualiser: owns the context, the renderer and the control panel."""

    def __init__(
        self,
        context: AppContext | None = None,
        surface: pygame.Surface | None = None,
    ) -> None:
        self.context = context if context is not None else AppContext()
        self.panel = ControlPanel(self.context)
        self.surface = surface
        self.renderer = Renderer(surface) if surface is not None else None
        self._owns_display = False
        if surface is not None:
            self.context.list_manager.resize(*surface.get_size())

    def process_event(self, event: pygame.event.Event) -> bool:
        """Handle one event; return False when the application should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            width = max(event.w, MINIMUM_WINDOW_WIDTH)
            height = max(event.h, MINIMUM_WINDOW_HEIGHT)
            if self._owns_display:
                self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
                self.renderer = Renderer(self.surface)
            self.context.list_manager.resize(width, height)
        self.panel.handle_event(event)
        return True

    def frame(self, delta_time: float) -> bool:
        """Advance sorting by ``delta_time`` seconds and draw one frame."""
        if self.surface is None or self.renderer is None:
            raise RuntimeError("no surface to draw on")
        self.context.advance(delta_time)
        self.renderer.draw_list(self.context.list_manager.items, self.context.list_manager)
        self.panel.draw(self.surface)
        return True

    def run(self) -> None:
        """Open the window and run the event loop until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            self.renderer = Renderer(self.surface)
            self._owns_display = True
            self.context.list_manager.resize(*self.surface.get_size())
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.process_event(event):
                        running = False
                        break
                if not running:
                    break
                self.frame(clock.tick(60) / 1000.0)
                pygame.display.flip()
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Close the window and release pygame."""
        self._owns_display = False
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the visualiser."""
    if argv is None:
        argv = sys.argv[1:]
    App().run()
    return 0