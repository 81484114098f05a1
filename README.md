# sceneshapes

Editable 2D shapes for annotation and measurement tools, independent of any
GUI toolkit. Each shape item is a plain object that receives pointer events
in scene coordinates (`press`, `drag`, `hover_move`) and updates its own
geometry, anchor points, hover region and requested cursor shape, staying
inside a given scene rectangle.

## Installation

```
pip install sceneshapes
```

To run the tests:

```
pip install "sceneshapes[test]"
pytest
```

## Modules

- `sceneshapes.geometry` — `Point`, `Line`, `Rect`, the `CursorShape` enum
  and helpers: `bounding_rect`, `translate_points`, `polygon_contains`
  (odd-even rule), `calculate_circle` (least-squares fit, returns
  `(center, radius)` and raises `ValueError` for fewer than three or
  collinear points), `cursor_from_angle`, `bounding_from_line`, `distance`
  and `convert_to_360`.
- `sceneshapes.base` — `BasicGraphicsItem`, the abstract base of all shape
  items, with `ShapeType`, `MouseRegion` and `MouseButton`. It keeps the
  anchor points (`cache`), the handle size (`margin`, adapted to a zoom
  factor by `set_margin`), the hover region and `anchor_rects()`.
- Shape items, each with `press(pos, button)`, `drag(pos, buttons)` and
  `hover_move(pos)`:
  - `sceneshapes.line.GraphicsLineItem` — two clicks; end points or the
    whole line can be dragged.
  - `sceneshapes.circle.GraphicsCircleItem` with `Circle` — circle through
    three clicks; resized by anchors or edge, or moved.
  - `sceneshapes.polygon.GraphicsPolygonItem` — points added by clicks,
    closed by clicking near the first point.
  - `sceneshapes.roundedrect.GraphicsRoundedRectItem` with `RoundedRect`,
    and `sceneshapes.rect.GraphicsRectItem` (zero corner radius) — two
    clicks; corners, edges or the whole rectangle can be dragged.
  - `sceneshapes.ring.GraphicsRingItem` with `Ring` — three points on the
    outer circle, one more for the inner radius.
  - `sceneshapes.rotatedrect.GraphicsRotatedRectItem` with `RotatedRect` —
    three clicks; edges stretch it and a handle from the center rotates it.
  - `sceneshapes.arc.GraphicsArcItem` with `Arc` — an arc band from four
    clicks; radii, end angles and anchors can be dragged.
- `sceneshapes.validators` — `IntValidator` and `DoubleValidator`, which
  classify typed text as `State.INVALID`, `State.INTERMEDIATE` or
  `State.ACCEPTABLE` for a `[bottom, top]` range.
- `sceneshapes.asynclog` — `AsyncLog` (a singleton via `AsyncLog.instance()`)
  formats messages and writes them to standard output/error and, once
  started, through a worker thread to a `RollingFile` that starts anew each
  day or when it grows past 1 GB. `Orientation` selects the targets and
  `LogLevel` the threshold.
- `sceneshapes.osinfo` — `HostOsInfo` and per-OS conventions such as
  `with_executable_suffix`, `path_list_separator`,
  `path_with_native_separators` and `file_name_case_sensitivity`.
- `sceneshapes.fsutils` — per-user configuration locations (`config_location`,
  `config_path`, `config_file_path`, `log_path`, `crash_path`),
  `file_size`, `generate_directories`, `remove_directory`,
  `convert_bytes_to_string`, `json_from_bytes`, `json_from_file`,
  `system_info` and `kill_process`.

## Example

```python
from sceneshapes.base import MouseButton
from sceneshapes.circle import Circle, GraphicsCircleItem
from sceneshapes.geometry import Point, Rect

scene = Rect(0, 0, 800, 600)
item = GraphicsCircleItem(scene, Circle(Point(200, 200), 50))
print(item.is_valid())  # True

# Build a circle interactively from three clicks.
drawn = GraphicsCircleItem(scene)
for p in (Point(100, 100), Point(200, 100), Point(150, 150)):
    drawn.press(p, MouseButton.LEFT)
print(drawn.circle)  # center near (150, 100), radius near 50
```

```python
from sceneshapes.fsutils import convert_bytes_to_string

print(convert_bytes_to_string(1536))  # "1.50 KB"
```

## What it does not do

The package holds geometry and interaction state only. It does not draw
anything, open windows or load and display images; rendering the shapes,
their anchor rectangles and the requested cursors is left to the
application. There is no command-line program.