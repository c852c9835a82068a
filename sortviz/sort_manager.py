"""Selection of a sorting algorithm and playback of its recorded steps."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence

from sortviz.advanced_sorts import Heap, Merge, Quick
from sortviz.basic_sorts import Bubble, Cocktail, Insertion, Selection
from sortviz.rect import Rectangle
from sortviz.sort import Sort, SortSequence


class SortManager:
    """Owns the available sorts and steps a list through a recorded sequence."""

    def __init__(self) -> None:
        self.sorts: tuple[Sort, ...] = (
            Bubble(),
            Cocktail(),
            Heap(),
            Insertion(),
            Merge(),
            Quick(),
            Selection(),
        )
        self.step_index = 0
        self.current_sort_id = 0
        self.sequence: SortSequence | None = None

    def _valid(self, sort_id: int) -> bool:
        return 0 <= sort_id < len(self.sorts)

    def sort_name(self, sort_id: int) -> str:
        """Return the display name of the sort with ``sort_id``."""
        if not self._valid(sort_id):
            raise IndexError(f"no sort with id {sort_id}")
        return self.sorts[sort_id].name

    def sort_count(self) -> int:
        """Return the number of available sorts."""
        return len(self.sorts)

    def set_sort(self, sort_id: int) -> None:
        """Select the sort with ``sort_id``; out-of-range ids are ignored."""
        if self._valid(sort_id):
            self.current_sort_id = sort_id

    def generate_sequence(self, rects: Iterable[Rectangle]) -> None:
        """Record the steps the current sort takes on ``rects``."""
        if self._valid(self.current_sort_id):
            self.sequence = self.sorts[self.current_sort_id].generate(rects)
        else:
            self.sequence = SortSequence()

    def step(self, rects: MutableSequence[Rectangle], index: int) -> None:
        """Copy the recorded step ``index`` into ``rects``; invalid indices do nothing."""
        if not self.sequence:
            return
        if not 0 <= index < self.sequence.step_count:
            return
        self.step_index = index
        for position, rect in enumerate(self.sequence[index]):
            rects[position] = rect.copy()

    def increment_step(self, rects: MutableSequence[Rectangle]) -> bool:
        """Advance one step into ``rects``; return True once playback is complete."""
        if not self.sequence:
            return True
        if self.step_index >= self.sequence.step_count:
            return True
        self.step_index += 1
        self.step(rects, self.step_index)
        return self.step_index >= self.sequence.step_count