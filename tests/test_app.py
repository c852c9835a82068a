import random

import pygame
import pytest

from sortviz.app import App, ControlPanel
from sortviz.context import MINIMUM_WINDOW_HEIGHT, MINIMUM_WINDOW_WIDTH, AppContext
from sortviz.list_manager import ListManager
from sortviz.renderer import BACKGROUND


def make_context():
    return AppContext(list_manager=ListManager(800, 800, list_count=6, rng=random.Random(2)))


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def test_shuffle_button_records_sequence():
    ctx = make_context()
    panel = ControlPanel(ctx)
    assert panel.handle_event(click(panel.shuffle_rect.center)) is True
    first = ctx.sort_manager.sequence[0]
    assert [r.value for r in first] == [r.value for r in ctx.list_manager.items]


def test_sort_button_starts_sorting():
    ctx = make_context()
    panel = ControlPanel(ctx)
    panel.handle_event(click(panel.sort_rect.center))
    assert ctx.is_sorting is True


def test_slider_sets_speed_at_ends_and_drags():
    ctx = make_context()
    panel = ControlPanel(ctx)
    slider = panel.slider_rect
    panel.handle_event(click((slider.left, slider.centery)))
    assert ctx.delay_time_normalized == 0.0
    panel.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(slider.right + 50, slider.centery)))
    assert ctx.delay_time_normalized == 1.0
    panel.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(slider.right, slider.centery), button=1))
    panel.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(slider.left, slider.centery)))
    assert ctx.delay_time_normalized == 1.0


def test_selector_opens_and_selects_sort():
    ctx = make_context()
    panel = ControlPanel(ctx)
    panel.handle_event(click(panel.combo_rect.center))
    assert panel.combo_open is True
    options = panel.option_rects()
    assert len(options) == ctx.sort_manager.sort_count()
    panel.handle_event(click(options[2].center))
    assert panel.combo_open is False
    assert ctx.sort_manager.current_sort_id == 2


def test_click_outside_panel_is_not_used():
    ctx = make_context()
    panel = ControlPanel(ctx)
    assert panel.handle_event(click((panel.rect.right + 100, panel.rect.bottom + 100))) is False


def test_quit_event_stops_app():
    app = App(make_context(), pygame.Surface((800, 800)))
    assert app.process_event(pygame.event.Event(pygame.QUIT)) is False


def test_resize_event_resizes_list():
    app = App(make_context(), pygame.Surface((800, 800)))
    assert app.process_event(pygame.event.Event(pygame.VIDEORESIZE, w=600, h=500, size=(600, 500))) is True
    assert app.context.list_manager.window_width == 600
    assert app.context.list_manager.window_height == 500


def test_resize_respects_minimum_size():
    app = App(make_context(), pygame.Surface((800, 800)))
    app.process_event(pygame.event.Event(pygame.VIDEORESIZE, w=10, h=10, size=(10, 10)))
    assert app.context.list_manager.window_width == MINIMUM_WINDOW_WIDTH
    assert app.context.list_manager.window_height == MINIMUM_WINDOW_HEIGHT


def test_frame_plays_step_and_draws():
    surface = pygame.Surface((800, 800))
    app = App(make_context(), surface)
    app.context.shuffle()
    app.context.start_sort()
    assert app.frame(1.0) is True
    assert app.context.sort_manager.step_index == 1
    assert tuple(surface.get_at((799, 0)))[:3] == BACKGROUND


def test_frame_without_surface_raises():
    app = App(make_context())
    with pytest.raises(RuntimeError):
        app.frame(0.1)