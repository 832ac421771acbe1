# wirefdf

Wireframe rendering of `.fdf` height maps, in pure Python with no
dependencies.

Each line of a map file is a row of points. Each point is a height, which may
be followed by a colour such as `10,0xFF0000`. A point without a colour gets
`0x33FF33`. The map is projected in an isometric view and drawn as a grid of
lines into an in-memory raster image. You can change the view by rotating,
scaling, panning or flattening it.

## Installing

```
pip install .
```

## Rendering a map

```python
from wirefdf.mapfile import load_map
from wirefdf.geometry import Grid
from wirefdf.image import Image
from wirefdf.render import draw_frame

points = load_map("maps/42.fdf")      # rows of Point objects
grid = Grid(points, 1920, 1080)       # starts in the isometric view
image = Image(1920, 1080, 32, False)
draw_frame(image, grid)               # clear, project, draw
rgb = image.to_rgb_bytes()            # packed R, G, B bytes, row by row
```

`load_map` raises `wirefdf.mapfile.MapError` in three cases: the file cannot
be opened, its name does not end in `.fdf`, or its lines do not all hold the
same number of values. `parse_map` does the same parsing on lines that are
already in memory.

### Changing the view

A `Grid` keeps its view settings as attributes:

- `x_iso`, `y_iso`, `z_iso`: rotation angles in degrees.
- `z`: the height scale.
- `scaling`: the zoom.
- `x_offset`, `y_offset`: the pan, in pixels.

`Grid.reset()` returns to the isometric view. `Grid.flatten()` switches to the
view from straight above. Both also refit the scale with `Grid.fit_scale()`.
After changing any setting, call `draw_frame` again.

### Lower-level pieces

- `wirefdf.image.Image`: a raster whose rows are padded to 32 bits.
  - It supports 8, 16, 24 or 32 bits per pixel, in either byte order.
  - Methods: `set_pixel`, `get_pixel`, `fill`, `plot` and `contains`.
  - `plot` rounds real coordinates and ignores points outside the image.
- `wirefdf.render`: `color_gradient`, `draw_line`, `draw_grid`, `clear` and
  `draw_frame`.
- `wirefdf.geometry`: the projection, with these parts:
  - a `Quaternion` class with rotations about each axis;
  - rotation matrices `matrix_x`, `matrix_y` and `matrix_z`;
  - the point rotations `rotate_x`, `rotate_y` and `rotate_z`.

## XPM images

`wirefdf.xpm.xpm_file_to_image(path)` reads an XPM file into an `Image`.
`xpm_to_image(lines)` does the same from the XPM strings in memory. Colours
can be given in two forms:

- as `#RRGGBB`;
- as X11 colour names, resolved by `wirefdf.xcolors.lookup_color`.

A colour given as `None` becomes the pixel value `0xFF000000`. Malformed data
raises `wirefdf.xpm.XpmError`.

## printf-style formatting

`wirefdf.printf.ft_format(fmt, *args)` returns formatted text.
`ft_printf(fmt, *args)` writes that text to standard output and returns its
length.

- Conversions: `c s p d i u x X %`.
- Flags: `- + # 0` and space, with width and precision.
- Integers are treated as 32-bit values.
- A `None` string prints as `(null)`.
- A zero pointer prints as `(nil)`.
- An unknown conversion raises `ValueError`.
- Too few arguments raises `TypeError`.

## What it does not do

wirefdf does not open a window, handle keyboard or mouse input, or provide a
command-line program. It renders into `Image` objects. To show the result on
screen, pass the bytes from `Image.to_rgb_bytes()` to a graphics library of
your choice.

## Tests

```
pip install .[test]
pytest
```