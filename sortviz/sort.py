"""Recording of sorting algorithms as sequences of list snapshots."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, MutableSequence

from sortviz.rect import Rectangle, State

Snapshot = tuple[Rectangle, ...]


class SortSequence:
    """Ordered snapshots of a list taken while it is being sorted."""

    def __init__(self) -> None:
        self.steps: list[Snapshot] = []

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def push(self, rects: Iterable[Rectangle]) -> None:
        """Record a copy of ``rects`` as the next step."""
        self.steps.append(tuple(rect.copy() for rect in rects))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Snapshot:
        return self.steps[index]


class Sort(ABC):
    """A sorting algorithm that records every step it takes."""

    name: str = ""

    def generate(self, rects: Iterable[Rectangle]) -> SortSequence:
        """Sort a copy of ``rects`` and return the recorded steps.

        The first step is the unsorted input, the last step the sorted list
        with every bar marked ordered.
        """
        sequence = SortSequence()
        array = [rect.copy() for rect in rects]
        sequence.push(array)
        self._run(array, sequence)
        for rect in array:
            rect.state = State.ORDERED
        sequence.push(array)
        return sequence

    @abstractmethod
    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        """Sort ``array`` in place, pushing steps to ``sequence``."""