"""Quadratic comparison sorts: bubble, cocktail, insertion and selection."""

from __future__ import annotations

from collections.abc import MutableSequence

from sortviz.rect import Rectangle, State
from sortviz.sort import Sort, SortSequence


def _swap(array: MutableSequence[Rectangle], a: int, b: int) -> None:
    array[a], array[b] = array[b], array[a]


def _reset_unordered(array: MutableSequence[Rectangle], start: int = 0) -> None:
    for rect in array[start:]:
        if rect.state is not State.ORDERED:
            rect.state = State.BASE


def _mark_ordered(array: MutableSequence[Rectangle]) -> None:
    for rect in array:
        rect.state = State.ORDERED


class Bubble(Sort):
    name = "Bubble"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        size = len(array)
        for i in range(size - 1):
            swapped = False
            for j in range(size - i - 1):
                array[j].state = State.SELECTED
                array[j + 1].state = State.COMPARED
                sequence.push(array)

                if array[j].value > array[j + 1].value:
                    _swap(array, j, j + 1)
                    swapped = True
                    array[j].state = State.BASE
                    array[j + 1].state = State.SELECTED
                    sequence.push(array)

                array[j].state = State.BASE
                array[j + 1].state = State.BASE

            array[size - i - 1].state = State.ORDERED
            sequence.push(array)

            if not swapped:
                break

        _mark_ordered(array)


class Cocktail(Sort):
    name = "Cocktail"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        if not array:
            return
        start = 0
        end = len(array) - 1
        swapped = True

        while swapped:
            swapped = False

            for i in range(start, end):
                array[i].state = State.SELECTED
                array[i + 1].state = State.COMPARED
                sequence.push(array)

                if array[i].value > array[i + 1].value:
                    _swap(array, i, i + 1)
                    swapped = True
                    array[i].state = State.BASE
                    array[i + 1].state = State.SELECTED
                    sequence.push(array)

                array[i].state = State.BASE
                array[i + 1].state = State.BASE

            array[end].state = State.ORDERED
            sequence.push(array)

            if not swapped:
                break
            swapped = False
            end -= 1

            for i in range(end, start, -1):
                array[i - 1].state = State.COMPARED
                array[i].state = State.SELECTED
                sequence.push(array)

                if array[i - 1].value > array[i].value:
                    _swap(array, i - 1, i)
                    swapped = True
                    array[i - 1].state = State.SELECTED
                    array[i].state = State.BASE
                    sequence.push(array)

                array[i - 1].state = State.BASE
                array[i].state = State.BASE

            array[start].state = State.ORDERED
            sequence.push(array)

            start += 1

        _mark_ordered(array)


class Insertion(Sort):
    name = "Insertion"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        for i in range(1, len(array)):
            key = array[i].copy()
            j = i

            array[i].state = State.SELECTED
            sequence.push(array)

            while j > 0 and array[j - 1].value > key.value:
                array[j].state = State.SELECTED
                array[j - 1].state = State.COMPARED
                sequence.push(array)

                array[j - 1].state = State.BASE
                array[j] = array[j - 1].copy()
                j -= 1

                array[j].state = State.SELECTED
                sequence.push(array)

            array[j] = key.copy()
            _reset_unordered(array)

        _mark_ordered(array)


class Selection(Sort):
    name = "Selection"

    def _run(self, array: MutableSequence[Rectangle], sequence: SortSequence) -> None:
        size = len(array)
        for i in range(size - 1):
            min_index = i
            array[min_index].state = State.SELECTED
            sequence.push(array)

            for j in range(i + 1, size):
                array[j].state = State.COMPARED
                sequence.push(array)

                if array[j].value < array[min_index].value:
                    array[min_index].state = State.BASE
                    min_index = j
                    array[min_index].state = State.SELECTED
                    sequence.push(array)
                else:
                    array[j].state = State.BASE

            if min_index != i:
                _swap(array, i, min_index)
                sequence.push(array)

            array[i].state = State.ORDERED
            _reset_unordered(array, i + 1)
            sequence.push(array)

        _mark_ordered(array)