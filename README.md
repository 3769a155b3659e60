# ironoxide

A small library of building blocks. It has no dependencies outside the
standard library.

## Modules

- `ironoxide.vec2`, `ironoxide.vec3`, `ironoxide.vec4`: `Vec2`, `Vec3` and
  `Vec4` are float vectors. They support element-wise `+ - * /` with another
  vector of the same kind, and the same operators with a scalar. In-place
  operators are also supported. `Vec2` and `Vec3` accept a vector for `+=`,
  `-=` and `*=`. All three accept a vector or a scalar for `/=`. `Vec4 += other`
  changes only x, y and z. Division by zero gives IEEE infinities or NaN and
  does not raise.
  - Comparison is a partial order. `a < b` holds only when both x and y are
    smaller. `<=` and `>=` also accept full equality.
  - `Vec2` has `min()`, `max()` (of its components), `length()`, and
    `Vec2.MAX` / `Vec2.MIN`.
  - `Vec3` and `Vec4` have `length()`, `magnitude()`, `dot()`, `cross()`,
    `distance()`, `normalize()` and `lerp()`. A zero vector normalizes to
    itself. `Vec4.cross` uses the xyz parts and sets w to 0.
- `ironoxide.point`: contains two records.
  - `Point(x, y)` is ordered by `(x, y)`.
  - `Matrix4` holds four `Vec4` rows.
- `ironoxide.hashing`: `hash_u32(seed)` is a 32-bit integer mixing hash. The
  seed wraps to 32 bits.
- `ironoxide.uncreative`: `encrypt(data, key)` and `decrypt(data)` form a
  reversible byte scrambler.
  - The output starts with an 8-byte header (`HEADER`). The masked 16-bit key
    follows it.
  - `encrypt` raises `ValueError` for empty data or for a key outside
    0–65535.
  - `decrypt` raises `ValueError` for input of 10 bytes or less, or for a
    wrong header.
  - This is obfuscation, not security.
- `ironoxide.ui_unit`: `UiUnit` resolves a length to pixels against an
  available `Vec2` space.
  - It is built with `UiUnit.px`, `relative`, `relative_width`,
    `relative_height`, `relative_max`, `relative_min`, `rem`, `zero`, `auto`,
    `undefined` or `fill`, and resolved with `pixelx` / `pixely`.
  - `UnitKind` lists the kinds.
  - `Align` places a box inside a space with `get_pos`. It also answers
    `is_horizontal_centered` / `is_vertical_centered`.
- `ironoxide.style`: `FlexDirection` (`VERTICAL`, `HORIZONTAL`) and `OutArea`.
  - `OutArea` holds margins or padding. It is built with `uniform`,
    `horizontal`, `vertical` or `zero`, and measured with `x`, `y`, `start`
    and `size`.
  - `size` resolves the bottom edge along the horizontal axis.
- `ironoxide.overflow`: `OverflowAxis` and `Overflow`, built with
  `scroll()`, `clip()`, `hidden()` or `visible()`.
- `ironoxide.kinds`: the enumerations `Interaction`, `RenderMode`,
  `ElementType` and `UiEvent`, and the `RawUiElement` record. That record
  holds an element's computed position, size, border, view and corner.
- `ironoxide.font`: `Font` is a glyph table of 1024 little-endian 16-bit
  words.
  - `Font.parse(path)` reads up to 2048 bytes of a file.
  - `Font.from_bytes(data)` takes exactly 768 bytes.
  - `get_data(char)` returns the four words for a character code or
    one-character string, counted from code 32.
  - Control characters raise `ValueError`.
- `ironoxide.build_context`: `BuildContext` carries layout state.
  - `BuildContext.root(font, size)` starts a layout.
  - `BuildContext.from_parent(...)` starts the layout of an element's
    children.
  - `fits_in_line(pos, size)` places an element along the flex direction.
    It returns the moved position and whether the element fit on the
    current line. When it does not fit, a new line is started.
  - `apply_data(pos, size)` records the result.
- `ironoxide.events`: contains the event and selection types.
  - `EventResult` has the members `NONE`, `OLD` and `NEW`, with `is_none`,
    `is_new` and `is_old`.
  - `DirtyFlags` and `SelectedFlags` are enumerations.
  - `Selected` tracks the element under the cursor.
  - `QueuedEvent.from_element(element, event, message)` takes any object
    with `id` and `typ`.
  - `CallbackResult` is built with `rebuild_needed()` or `no_rebuild()`.

## Examples

```python
from ironoxide.vec3 import Vec3

a = Vec3(1.0, 0.0, 0.0)
b = Vec3(0.0, 1.0, 0.0)
a.cross(b)            # Vec3(x=0.0, y=0.0, z=1.0)
(a + b).length()      # 1.414...
a.lerp(b, 0.5)        # Vec3(x=0.5, y=0.5, z=0.0)
```

```python
from ironoxide.hashing import hash_u32

value = hash_u32(42) / 0xFFFFFFFF   # pseudo-random float in [0, 1]
```

```python
from ironoxide.uncreative import encrypt, decrypt

blob = encrypt(b"hello", 1234)
assert decrypt(blob) == b"hello"
```

```python
from ironoxide.ui_unit import UiUnit, Align
from ironoxide.vec2 import Vec2

space = Vec2(800.0, 600.0)
UiUnit.relative(0.5).pixelx(space)                             # 400.0
Align.CENTER.get_pos(space, Vec2(100.0, 100.0), Vec2.zero())   # Vec2(x=350.0, y=250.0)
```

## What it does not do

The UI modules provide units, alignment, spacing, a glyph table, line-by-line
placement and event types. The package does not provide:

- an element tree, widgets or a UI state object;
- text layout;
- a window;
- any drawing or GPU rendering.

## Running the tests

```
pip install -e ".[test]"
pytest
```