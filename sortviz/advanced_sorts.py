"""Divide-and-conquer and heap-based sorts: heap, merge and quick."""

from __future__ import annotations

from collections.abc import MutableSequence

from sortviz.rect import Rectangle, State
from sortviz.sort import Sort, SortSequence


def _swap(array: MutableSequence[Rectangle], a: int, b: int) -> None:
    array[a], array[b] = array[b], array[a]


def _mark_ordered(array: MutableSequence[Rectangle]) -> None:
    for rect in array:
        rect.state = State.ORDERED


def _reset_unordered(array: MutableSequence[Rectangle]) -> None:
    for rect in array:
        if rect.state is not State.ORDERED:
            rect.state = State.BASE


def _color_heap_region(array: MutableSequence[Rectangle], heap_size: int) -> None:
    """Mark every bar still inside the heap as grouped, leaving ordered bars alone."""
    for rect in array[:heap_size]:
        if rect.state is not State.ORDERED:
            rect.state = State.GROUPING


class Heap(Sort):
    name = "Heap"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        n = len(array)
        if n == 0:
            return

        # Build a max heap.
        for root in range(n // 2 - 1, -1, -1):
            _color_heap_region(array, n)
            self._heapify(array, n, root, sequence)

        # Move the maximum to the end and restore the heap.
        for end in range(n - 1, 0, -1):
            _color_heap_region(array, n)
            _swap(array, 0, end)
            array[end].state = State.ORDERED
            sequence.push(array)
            self._heapify(array, end, 0, sequence)

        array[0].state = State.ORDERED
        sequence.push(array)

    @staticmethod
    def _heapify(
        array: MutableSequence[Rectangle],
        heap_size: int,
        root: int,
        sequence: SortSequence,
    ) -> None:
        current = root
        while True:
            _color_heap_region(array, heap_size)

            left = 2 * current + 1
            right = 2 * current + 2
            largest = current

            array[current].state = State.SELECTED
            sequence.push(array)

            for child in (left, right):
                if child < heap_size:
                    array[child].state = State.COMPARED
                    sequence.push(array)
                    if array[child].value > array[largest].value:
                        largest = child

            if largest == current:
                array[current].state = State.GROUPING
                break

            _swap(array, current, largest)
            sequence.push(array)
            current = largest


class Merge(Sort):
    name = "Merge"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        if not array:
            return
        self._merge_sort(array, 0, len(array) - 1, sequence)
        _mark_ordered(array)
        sequence.push(array)

    def _merge_sort(
        self,
        array: MutableSequence[Rectangle],
        left: int,
        right: int,
        sequence: SortSequence,
    ) -> None:
        if left >= right:
            return
        mid = (left + right) // 2
        self._merge_sort(array, left, mid, sequence)
        self._merge_sort(array, mid + 1, right, sequence)
        self._merge_ranges(array, left, mid, right, sequence)

    @staticmethod
    def _merge_ranges(
        array: MutableSequence[Rectangle],
        left: int,
        mid: int,
        right: int,
        sequence: SortSequence,
    ) -> None:
        def half(x: int) -> State:
            return State.MERGE_LEFT if x <= mid else State.MERGE_RIGHT

        _reset_unordered(array)
        for x in range(left, right + 1):
            array[x].state = half(x)
        sequence.push(array)

        merged: list[Rectangle] = []
        i, j = left, mid + 1

        while i <= mid and j <= right:
            for x in range(left, right + 1):
                if array[x].state in (State.SELECTED, State.COMPARED):
                    array[x].state = half(x)

            array[i].state = State.SELECTED
            array[j].state = State.COMPARED
            sequence.push(array)

            if array[i].value <= array[j].value:
                merged.append(array[i])
                i += 1
            else:
                merged.append(array[j])
                j += 1

            # Show the merged prefix growing.
            for x in range(left, left + len(merged)):
                array[x].state = State.GROUPING
            sequence.push(array)

        merged.extend(array[i : mid + 1])
        merged.extend(array[j : right + 1])

        _reset_unordered(array)
        array[left : right + 1] = merged
        for rect in merged:
            rect.state = State.GROUPING
        sequence.push(array)


class Quick(Sort):
    name = "Quick"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        if not array:
            return
        self._quick_sort(array, 0, len(array) - 1, sequence)
        _mark_ordered(array)

    def _quick_sort(
        self,
        array: MutableSequence[Rectangle],
        low: int,
        high: int,
        sequence: SortSequence,
    ) -> None:
        if low >= high:
            if low < len(array):
                array[low].state = State.ORDERED
            return

        pivot_index = self._partition(array, low, high, sequence)
        if pivot_index > 0:
            self._quick_sort(array, low, pivot_index - 1, sequence)
        self._quick_sort(array, pivot_index + 1, high, sequence)

    @staticmethod
    def _partition(
        array: MutableSequence[Rectangle],
        low: int,
        high: int,
        sequence: SortSequence,
    ) -> int:
        pivot_value = array[high].value
        i = low

        array[high].state = State.SELECTED
        sequence.push(array)

        for j in range(low, high):
            for rect in array[low:i]:
                rect.state = State.GROUPING
            for rect in array[i:high]:
                if rect.state is not State.GROUPING:
                    rect.state = State.BASE

            array[high].state = State.SELECTED
            array[j].state = State.COMPARED
            sequence.push(array)

            if array[j].value < pivot_value:
                _swap(array, i, j)
                array[i].state = State.GROUPING
                sequence.push(array)
                i += 1

            array[j].state = State.BASE

        _swap(array, i, high)
        array[high].state = State.BASE
        array[i].state = State.ORDERED
        sequence.push(array)
        return i