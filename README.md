# fdfview

fdfview shows a height map as a wireframe. You can rotate it, zoom it, move it and flatten it, and draw it in isometric or in parallel projection.

## Installation

```
pip install .
```

The window is drawn with pygame.

## Usage

```
fdfview path/to/map.fdf
```

The command takes exactly one argument, the map file. Its name must end in `.fdf`. When the program ends it prints a status message (in yellow) and returns its exit status:

| Status | Meaning |
| --- | --- |
| 0 | The viewer was closed normally |
| 1 | Wrong number of arguments |
| 2 | The map file could not be opened |
| 4 | The map is empty |
| 6 | The window could not be opened |
| 7 | The file name does not end in `.fdf` |
| 8 | A row of the map holds fewer than two values |

### Map format

Each line of the file is one row of the map. Each row holds heights separated by spaces. A height may carry a colour, written as `,0xRRGGBB`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

The number of values in the first line sets the width of the map. Longer rows are cut to that width and shorter rows are filled with zeros. Every row needs at least two values.

If any point in the map carries a colour, points without one are drawn white. If no point carries a colour, each point is coloured by its height. Press `C` to switch between the two height palettes. Lines are shaded from the colour of one end to the colour of the other.

### Controls

| Key | Action |
| --- | --- |
| `R` | Reset the view |
| `W` / `S` | Move the view down / up |
| `A` / `D` | Move the view right / left |
| `+` (or `=`) / `-` | Zoom in / out |
| `Up` / `Down` | Raise / flatten the heights |
| `1` / `2` | Rotate around the X axis |
| `3` / `4` | Rotate around the Y axis |
| `5` / `6` | Rotate around the Z axis |
| `Tab` | Switch between isometric and parallel projection |
| `C` | Change the colour palette |
| `Esc` or close the window | Quit |

The control menu is drawn in the top left corner of the window.

## Use as a library

The parsing, projection and drawing code can be used without opening a window:

```python
from fdfview.mapfile import load_map
from fdfview.view import Key, View
from fdfview.raster import Canvas, render

height_map = load_map("map.fdf")
view = View(height_map, 1920, 1080)
view.handle_key(Key.TAB)          # switch to parallel projection
canvas = Canvas(1920, 1080, False)
render(canvas, view)
print(hex(canvas.pixel(960, 540)))
```

- `fdfview.mapfile`: `load_map` reads a file and `parse_lines` parses lines into a `HeightMap` (heights, colours and the height range).
- `fdfview.view`: `View` holds zoom, shift, rotation, flattening, projection and palette, and turns grid points into screen points with `create_point` and `transform_point`. `handle_key` applies a `Key` and returns `False` for `Key.ESC`.
- `fdfview.raster`: `Canvas` is a 32-bit pixel buffer; `line_points` and `draw_line` rasterise a line, `render` draws the whole wireframe, and `menu_lines` gives the control menu text and positions.
- `fdfview.color`: `Point` and the colour interpolation helpers.

Errors are raised as `fdfview.errors.FdfError`. Its `status` is an `ExitStatus` value and its `message` the text the command prints.

## Running the tests

```
pip install .[test]
pytest
```