# sortviz

A small desktop application that animates classic sorting algorithms on a row
of 32 bars. Shuffle the bars, choose an algorithm, set the speed and watch
each comparison, swap and merge play out one step at a time.

The algorithms are Bubble, Cocktail, Heap, Insertion, Merge, Quick and
Selection.

## Installation

```
pip install .
```

This also installs `pygame`, which draws the window.

## Running

```
sortviz
```

The command takes no options. A resizable window of 800 × 800 pixels opens
and the bars are laid out again whenever it is resized. Sizes below
400 × 400 are treated as 400 × 400. The control panel in the top-left corner
holds:

- **Shuffle**: randomises the bars, stops any sort that is running and
  records the chosen algorithm's steps on the new order.
- **Sort**: plays the recorded steps from the beginning. The steps are
  recorded when you press Shuffle or choose an algorithm, so press one of
  those before the first sort.
- **Speed slider**: runs from 0 (slowest, 0.25 s per step) to 1 (fastest,
  0.01 s per step). The default is 0.75. The delay is
  `0.25 - 0.24 * speed²` seconds, and at most one step is played per frame.
- **Algorithm selector**: click it to open the list of algorithms, then click
  one. Choosing an algorithm records its steps on the current bars. The
  selector does nothing while a sort is running.

Bar colours:

| Colour | Meaning |
|--------|---------|
| grey   | untouched |
| red    | selected element or pivot |
| blue   | element being compared |
| orange | group being built (heap region, partition, merged prefix) |
| cyan / purple | left / right half of a merge |
| green  | in its final place |

## Using the library

The sorting code works without a window. `Sort.generate` sorts a copy of the
bars it is given and returns a `SortSequence` of snapshots. The first snapshot
is the input and the last is the sorted list with every bar in the `ORDERED`
state:

```python
from sortviz.rect import Rectangle
from sortviz.basic_sorts import Bubble

rects = [Rectangle(value=v) for v in (3, 1, 2)]
sequence = Bubble().generate(rects)
for snapshot in sequence.steps:
    print([r.value for r in snapshot], [r.state.name for r in snapshot])
```

The modules:

- `sortviz.rect`: `Rectangle` (value, size, position and `State` of a bar).
- `sortviz.color`: `rectangle_color(state)` returns the `RGBColor` a state is
  drawn in.
- `sortviz.sort`: the `Sort` base class and `SortSequence`.
- `sortviz.basic_sorts`: `Bubble`, `Cocktail`, `Insertion`, `Selection`.
- `sortviz.advanced_sorts`: `Heap`, `Merge`, `Quick`.
- `sortviz.sort_manager`: `SortManager` holds all seven sorts. It provides
  `sort_name`, `sort_count`, `set_sort`, `generate_sequence`, `step` and
  `increment_step` to play a sequence back into a list of bars.
- `sortviz.list_manager`: `ListManager(window_width, window_height,
  list_count=32, rng=None)` builds the bars and lays them out for a window
  size. It provides `create_list`, `resize`, `resize_rectangles` and
  `shuffle`.
- `sortviz.context`: `AppContext` ties a `SortManager` and a `ListManager`
  together. Its `shuffle`, `start_sort`, `select_sort` and `advance` methods
  do what the panel controls do and time the playback.
- `sortviz.renderer`: `Renderer` draws the bars onto a pygame surface.
- `sortviz.app`: `App`, `ControlPanel` and `main`, the entry point of the
  `sortviz` command.

## Tests

```
pip install .[test]
pytest
```