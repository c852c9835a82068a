import random

from sortviz.list_manager import ListManager
from sortviz.rect import State


def make_manager(count=32, width=800, height=800, seed=1):
    return ListManager(width, height, count, rng=random.Random(seed))


def test_create_list_values_in_order():
    manager = make_manager()
    assert [r.value for r in manager.items] == list(range(1, 33))
    assert all(r.state is State.BASE for r in manager.items)


def test_default_list_count():
    manager = ListManager(800, 800)
    assert len(manager.items) == 32


def test_bars_share_width_and_bottom_edge():
    manager = make_manager()
    widths = {r.width for r in manager.items}
    bottoms = {r.start_y + r.height for r in manager.items}
    assert len(widths) == 1
    assert bottoms == {800 - ListManager.margin}


def test_bars_ordered_left_to_right_without_overlap():
    manager = make_manager()
    for left, right in zip(manager.items, manager.items[1:]):
        assert right.start_x == left.start_x + left.width + ListManager.rect_padding


def test_height_grows_with_value():
    manager = make_manager()
    unit = manager.items[0].height
    assert unit > 0
    assert all(r.height == r.value * unit for r in manager.items)


def test_shuffle_is_permutation_and_resets_state():
    manager = make_manager()
    for rect in manager.items:
        rect.state = State.ORDERED
    manager.shuffle()
    values = [r.value for r in manager.items]
    assert sorted(values) == list(range(1, 33))
    assert values != list(range(1, 33))
    assert all(r.state is State.BASE for r in manager.items)
    unit = manager.items[values.index(1)].height
    assert all(r.height == r.value * unit for r in manager.items)


def test_shuffle_is_reproducible_with_seed():
    a = make_manager(seed=7)
    b = make_manager(seed=7)
    a.shuffle()
    b.shuffle()
    assert [r.value for r in a.items] == [r.value for r in b.items]


def test_resize_recomputes_layout():
    manager = make_manager()
    before = [r.width for r in manager.items]
    manager.resize(400, 400)
    assert manager.window_width == 400
    assert manager.window_height == 400
    assert all(r.width < w for r, w in zip(manager.items, before))
    assert {r.start_y + r.height for r in manager.items} == {
        400 - ListManager.margin
    }


def test_resize_rectangles_restores_geometry():
    manager = make_manager()
    expected = [r.copy() for r in manager.items]
    for rect in manager.items:
        rect.width = 0
        rect.start_x = 0
    manager.resize_rectangles()
    assert manager.items == expected


def test_create_list_resets_after_shuffle():
    manager = make_manager()
    manager.shuffle()
    manager.create_list()
    assert [r.value for r in manager.items] == list(range(1, 33))