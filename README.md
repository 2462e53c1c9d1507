# uutkit

Small building blocks for a game-style application:

- `uutkit.rectpack`: a skyline rectangle packer (bottom-left or best-fit) for
  building texture atlases.
- `uutkit.containers`: `FixedArray`, `List` (a `list` with predicate
  helpers) and `Dictionary` (a mapping kept in key order).
- `uutkit.hashstring`: `HashString`, a string compared by its 32-bit hash, and
  `string_hash`.
- `uutkit.text`: string helpers `ends_with`, `equals`, `index_of` and `insert`.
- `uutkit.videodefs`: enumerations for buffers, render state, blending and
  texture stages, and the `VertexDeclare` record.
- `uutkit.events`: `EventListener`, `Message` and `EventSource` for turning
  window messages into keyboard and mouse callbacks.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Packing rectangles

```python
from uutkit.rectpack import Heuristic, Packer, Rect, pack_rects

rects = [Rect(id=0, w=32, h=16), Rect(id=1, w=64, h=64), Rect(id=2, w=8, h=8)]
pack_rects(256, 256, rects)
for r in rects:
    print(r.id, r.was_packed, r.x, r.y)

packer = Packer(512, 512, 512)
packer.set_heuristic(Heuristic.BF_SORT_HEIGHT)
all_fitted = packer.pack([Rect(id=3, w=100, h=40)])
```

`Packer(width, height, num_nodes)` packs into a `width` x `height` target
using at most `num_nodes` skyline segments. By default, widths are rounded up
to a multiple of `ceil(width / num_nodes)` so the packer never runs short of
segments. Call `set_allow_out_of_mem(True)` to use exact widths instead. With
exact widths some rectangles may fail to fit once the segments run out.
`pack_rects` creates a packer with one segment per column of width.

Rectangles are placed tallest first (ties go to the wider one). Each one keeps
its place in the list you passed. A rectangle that fitted gets `x`, `y` and
`was_packed = True`. One that did not gets `x = y = None` and
`was_packed = False`.

`Packer.pack` returns `True` when every rectangle fitted. You may call it
several times to keep filling the same target. The `skyline` and `free_nodes`
properties show the current state.

Sizes above 65535 raise `ValueError`, and so do widths below 1. An unknown
heuristic also raises `ValueError`.

## Containers and strings

- `FixedArray(count, fill=None)` has a length that cannot change. `zero()`
  sets every element to 0.
- `List` adds `exists`, `find_all`, `convert_all`, `index_of` and
  `last_index_of` (both give -1 when the item is absent), `remove_all` (returns
  the number removed) and `true_for_all`.
- `Dictionary` keeps its keys sorted. `add(key, value)` inserts only new keys
  and returns whether it inserted. `try_get(key)` returns the value or `None`.
- `HashString(text)` stores the FNV-1a hash of the UTF-8 text as a signed
  32-bit int. Equality, ordering, `int()` and `hash()` all use that hash.
  `HashString()` and `HashString.EMPTY` have hash 0, and `is_empty()` is true
  for them.
- `uutkit.text.equals(a, b, ignore_case=True)` compares character by character
  without regard to case. `index_of` and `insert` take a single character.
  `insert` raises `IndexError` outside `0..len(text)`.

## Dispatching input events

```python
from uutkit.events import EventListener, EventSource, Message

class Printer(EventListener):
    def on_key_down(self, code):
        print("key down", code)

source = EventSource()
source.add_listener(Printer())
source.handle(Message.KEY_DOWN, 65)
source.handle(Message.MOUSE_MOVE, (10, 20))
source.handle(Message.MOUSE_WHEEL, 120)   # listeners get on_mouse_wheel(1.0)
```

`EventSource.handle` calls the matching handler on every listener, in the order
they were added, and returns whether the message was consumed.

- Key codes must be in `0..255`.
- Character codes must be in `1..0xFFFF`.
- Other values are not dispatched, and `handle` returns `False` for them.
- The left, right and middle buttons map to buttons 0, 1 and 2.

`Message.DESTROY` marks the source as `closed`. `begin_frame()` sends a wheel
delta of 0 to every listener and returns `False` once the source is closed.

The default `EventListener` handlers only record the latest event in
`last_event`.

## What it does not do

The package does not open windows, read input from the operating system, or
draw anything. You feed `EventSource` the messages yourself. The
`videodefs` enumerations only describe render settings and are not connected to
any graphics device.