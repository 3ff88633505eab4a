# fpgraphics

A compact graphics toolkit built around an in-memory raster canvas. It draws
with the origin in the lower-left corner, and y grows upwards. The package
contains these modules:

- `fpgraphics.canvas` provides the `Canvas` class. It draws points, clipped
  and unclipped lines, rectangles, triangles, polygons, circles and sectors,
  each outlined or filled. It also sets the pen colour and reads pixels back.
  The module has a few helpers as well: `pixel_to_rgb_int`,
  `rgb_int_to_rgb`, `sector_points` and `local_time`.
- `fpgraphics.clip2d` clips a polygon against a line or against a convex
  window, using the Sutherland–Hodgman method.
- `fpgraphics.bmp` saves a canvas as an uncompressed 24-bit BMP file, reads
  the size of a BMP file, and draws a BMP file onto a canvas.
- `fpgraphics.xwd` saves a canvas as an X window dump (XWD) file and loads
  such files back onto a canvas.

No third-party packages are required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Drawing on a canvas

```python
from fpgraphics.canvas import Canvas
from fpgraphics.bmp import save_bmp

canvas = Canvas(400, 300)         # starts white, with a black pen
canvas.rgb(1.0, 0.0, 0.0)         # colour components in [0, 1], clamped
canvas.fill_circle(200, 150, 80)
canvas.rgb_int(0, 0, 255)         # colour components in [0, 255], clamped
canvas.line(-50, -50, 450, 350)   # clipped to the canvas
canvas.polygon([10, 100, 60], [10, 10, 90])
canvas.fill_sector(300, 80, 50, 0.0, 1.5)

save_bmp(canvas, "picture.bmp")
```

Coordinates are truncated to whole pixels.

- `canvas.point(x, y)` returns `False` when the point lies off the canvas.
- `canvas.line(...)` returns `False` when clipping leaves nothing to draw.
- `canvas.polygon` and `canvas.fill_polygon` return `False` when they are
  given no points. They use at most the first 1000 points and give a warning
  when there are more. `fill_polygon` fills by the even-odd rule.
- `canvas.sector` and `canvas.fill_sector` raise `ValueError` when the sweep
  from `start_radians` to `end_radians` is negative or larger than a full
  turn.

### Reading pixels back

`canvas.get_pixel(x, y)` returns the packed `0xRRGGBB` value at a point and
raises `IndexError` off the canvas. `canvas.get_pixel_safe(x, y)` returns
`None` off the canvas instead.

`pixel_to_rgb_int(pixel)` splits a packed value into `(r, g, b)` integers.
`rgb_int_to_rgb(rgb)` turns those integers into floats in `(0, 1)`, each at
the middle of its colour interval.

`canvas.rows()` yields the pixel rows from the top of the image down.

## Clipping

```python
from fpgraphics.clip2d import clip_polygon_against_convex_window, iter_convex_window_clip

triangle = [(70, 350), (460, 25), (400, 550)]
window = [(100, 150), (600, 200), (550, 450), (150, 500)]
print(clip_polygon_against_convex_window(triangle, window))

for step in iter_convex_window_clip(triangle, window):
    print(step)   # the polygon after each window edge
```

`clip_polygon_against_line(a, b, c, points)` keeps the part of the polygon
that lies where `a*x + b*y + c < 0`.

## Image files

```python
from fpgraphics.bmp import read_bmp_dimensions, display_bmp
from fpgraphics.xwd import save_xwd, read_xwd, read_xwd_dimensions, load_xwd_into

save_xwd(canvas, "picture.xwd")
print(read_xwd_dimensions("picture.xwd"))
image = read_xwd("picture.xwd")        # an XwdImage with width, height, pixels

other = Canvas(800, 600)
load_xwd_into(other, "picture.xwd", 10, 10)    # lower left corner at (10, 10)
print(read_bmp_dimensions("picture.bmp"))
display_bmp(other, "picture.bmp", 400, 10)
```

The two loaders treat the pen colour differently:

- `display_bmp` leaves the pen set to the colour of the last pixel it drew.
- `put_image` and `load_xwd_into` restore the pen colour afterwards.

Both skip any pixels that fall off the canvas. A malformed or truncated file
raises `fpgraphics.bmp.ImageFormatError`, which is a subclass of
`ValueError`.

## What this package does not do

The canvas lives only in memory. The package does not:

- open a window or show anything on screen;
- read keyboard or mouse input;
- draw text;
- provide matrix transforms, 3D mesh loading, shading or 3D rendering;
- install any command-line program.

To see a drawing, save it with `save_bmp` or `save_xwd` and open the file in
an image viewer.