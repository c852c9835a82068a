"""Shared state of the running visualiser and the actions the controls trigger."""

from __future__ import annotations

from sortviz.list_manager import ListManager
from sortviz.sort_manager import SortManager

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
MINIMUM_WINDOW_WIDTH = 400
MINIMUM_WINDOW_HEIGHT = 400

DELAY_MIN = 0.01
DELAY_MAX = 0.25


class AppContext:
    """Holds the list, the sort playback and the timing of sorting steps."""

    def __init__(
        self,
        sort_manager: SortManager | None = None,
        list_manager: ListManager | None = None,
    ) -> None:
        self.sort_manager = sort_manager if sort_manager is not None else SortManager()
        self.list_manager = (
            list_manager
            if list_manager is not None
            else ListManager(WINDOW_WIDTH, WINDOW_HEIGHT)
        )
        self.is_sorting = False
        # Time since the last sorting step, in seconds.
        self.elapsed_time = 0.0
        # Sorting speed chosen by the user: 0 is slowest, 1 is fastest.
        self.delay_time_normalized = 0.75

    def delay_time(self) -> float:
        """Return the seconds to wait between two sorting steps."""
        speed = self.delay_time_normalized
        return DELAY_MAX - (DELAY_MAX - DELAY_MIN) * (speed * speed)

    def advance(self, delta_time: float) -> bool:
        """Let ``delta_time`` seconds pass; return True if a step was played.

        At most one step is played per call.
        """
        if not self.is_sorting:
            return False
        self.elapsed_time += delta_time
        delay = self.delay_time()
        if self.elapsed_time < delay:
            return False
        if self.sort_manager.increment_step(self.list_manager.items):
            self.is_sorting = False
            self.sort_manager.step_index = 0
            self.elapsed_time = 0.0
        self.elapsed_time -= delay
        return True

    def shuffle(self) -> None:
        """Stop sorting, shuffle the list and record the current sort on it."""
        self.is_sorting = False
        self.elapsed_time = 0.0
        self.sort_manager.step_index = 0
        self.list_manager.shuffle()
        self.sort_manager.generate_sequence(self.list_manager.items)

    def start_sort(self) -> None:
        """Start playing the recorded sequence from its beginning."""
        if not self.is_sorting:
            self.is_sorting = True
            self.sort_manager.step_index = 0

    def select_sort(self, sort_id: int) -> None:
        """Choose another sort and record it; ignored while sorting."""
        if self.is_sorting:
            return
        self.sort_manager.set_sort(sort_id)
        self.sort_manager.generate_sequence(self.list_manager.items)