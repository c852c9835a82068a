import pytest

from sortviz.rect import Rectangle, State
from sortviz.sort import Sort, SortSequence

LIST_SIZE = 10


def make_rects():
    return [Rectangle(value=i + 1, state=State.BASE) for i in range(LIST_SIZE)]


class _Reverse(Sort):
    name = "Reverse"

    def _run(self, array, sequence):
        array.reverse()
        array[0].state = State.SELECTED
        sequence.push(array)


class _Nothing(Sort):
    name = "Nothing"

    def _run(self, array, sequence):
        pass


def test_sort_is_abstract():
    with pytest.raises(TypeError):
        Sort()


def test_push_stores_independent_copies():
    sequence = SortSequence()
    rects = make_rects()
    sequence.push(rects)
    rects[0].value = 99
    rects[0].state = State.ORDERED
    assert sequence.step_count == 1
    assert sequence[0][0].value == 1
    assert sequence[0][0].state is State.BASE


def test_generate_records_first_and_last_step():
    sequence = _Nothing().generate(make_rects())
    assert sequence.step_count == 2
    assert len(sequence) == 2
    assert [r.value for r in sequence[0]] == list(range(1, LIST_SIZE + 1))
    assert all(r.state is State.BASE for r in sequence[0])
    assert all(r.state is State.ORDERED for r in sequence[-1])


def test_generate_keeps_steps_from_run_and_leaves_input_alone():
    rects = make_rects()
    sequence = _Reverse().generate(rects)
    assert sequence.step_count == 3
    middle = sequence[1]
    assert [r.value for r in middle] == list(range(LIST_SIZE, 0, -1))
    assert middle[0].state is State.SELECTED
    assert [r.value for r in rects] == list(range(1, LIST_SIZE + 1))
    assert all(r.state is State.BASE for r in rects)


def test_iterating_sequence_yields_steps_in_order():
    sequence = _Reverse().generate(make_rects())
    firsts = [step[0].value for step in sequence]
    assert firsts == [1, LIST_SIZE, LIST_SIZE]