# goldfish

Core data types of a small game engine, usable on their own in any Python
program. Everything here is plain Python with no third-party dependencies.

## Modules

- `goldfish.prop`: `PropertyContainer`, a keyed store. Each key has an
  owned value slot (written by `set_text`, `set_integer`, `set_floating`,
  `set_ptr`) and a separate "keep" slot for a borrowed reference (written by
  `set_ptr_keep`). Setting either slot replaces the whole entry for that key.
  `get_integer` and `get_floating` return the marker `NO_SUCH` (`0xFFFFFF`)
  for a missing key; `get_text`, `get_ptr` and `get_ptr_keep` return `None`.
  The container supports `in`, `len()` and iteration over its keys, plus
  `delete` and `clear`.
- `goldfish.compat`: `to_fixed(value, bits, signed)` wraps an integer into an
  8, 16, 32 or 64-bit range, two's complement when signed. Other widths raise
  `ValueError`.
- `goldfish.vecmath`: `log2`, `cot`, `round_half_away` (halves round away
  from zero), and three-component vector helpers `subtract`, `multiply`
  (cross product), `normalize` (raises `ValueError` on a zero vector) and
  `normal` (unit normal of a triangle). Vectors are tuples; inputs may be any
  sequence of at least three numbers. `PI` is the constant `3.14159265`.
- `goldfish.graphic`: `Color`, a frozen RGBA record with `with_alpha`, and
  `Dimension` (`TWO_D`, `THREE_D`).
- `goldfish.version`: `Version`, a frozen record of major/minor/patch numbers
  and build details. Text fields are limited in UTF-8 length (`date` and
  `full` to 63 bytes, the others to 31); longer values raise `ValueError`.
- `goldfish.gui`: `Component`, `ComponentType`, `GuiEvent`, `BorderStyle`,
  `lookup_component` for finding a component kind by name (raises `KeyError`
  for an unknown name), `COMPONENT_NAMES`, and the default sizes `FONT_SIZE`
  and `SMALL_FONT_SIZE`. A `Component` may be given its type as a name and
  cannot be its own parent.
- `goldfish.input`: `InputState` (mouse position and button flags) and the
  `MouseButton` flags; `is_pressed` checks that every given button is held.
- `goldfish.assets`: `Texture`, `FontBoundingBox`, `FontGlyph`, `FontCache`,
  `Triangle`, `Mesh`, `Model` and `ResourceEntry`. These records check their
  own consistency, for example a texture's internal size may not be smaller
  than its visible size, and a resource entry's cached data must match its
  original size.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from goldfish.prop import PropertyContainer
from goldfish.vecmath import normal
from goldfish.graphic import Color

props = PropertyContainer()
props.set_integer("score", 10)
props.set_text("name", "player one")

print(props.get_integer("score"))   # 10
print("name" in props, len(props))  # True 2
print(props.get_integer("missing")) # 16777215

print(normal((0, 0, 0), (1, 0, 0), (0, 1, 0)))  # (0.0, 0.0, 1.0)

red = Color(1.0, 0.0, 0.0, 1.0)
faded = red.with_alpha(0.5)
```

## What this package does not do

It describes data only. There is no window, rendering, font rasterising,
audio playback, networking or scripting, no reading or writing of resource
packs (a `ResourceEntry` is just a record; nothing compresses or
decompresses it), and no command-line program.