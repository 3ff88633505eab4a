"""An in-memory raster canvas with a y-up coordinate system.

The origin is the lower left corner; ``y`` grows upwards. Pixels are 24-bit
``0xRRGGBB`` integers. Drawing follows a current pen colour. The canvas
starts as white paper with a black pen.
"""

from __future__ import annotations

import math
import time
import warnings
from collections.abc import Iterable, Iterator, Sequence

MAX_POLYGON_POINTS = 1000
SECTOR_POINTS_IN_FULL_CIRCLE = 500
_MAX_SECTOR_SEGMENTS = 500

WHITE = 0xFFFFFF
BLACK = 0x000000


def _clamp(value, low, high):
    return low if value < low else high if value > high else value


def pixel_to_rgb_int(pixel: int) -> tuple[int, int, int]:
    """Split a 24-bit pixel into ``(r, g, b)`` components in 0..255."""
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


def rgb_int_to_rgb(rgb: Sequence[int]) -> tuple[float, float, float]:
    """Convert 0..255 components to floats at the middle of their interval."""
    half_step = 0.5 / 256.0
    return tuple(component / 256.0 + half_step for component in rgb[:3])  # type: ignore[return-value]


def sector_points(
    xcenter: float,
    ycenter: float,
    radius: float,
    start_radians: float,
    end_radians: float,
    points_in_full_circle: int,
) -> list[tuple[float, float]]:
    """Return the outline of a circular sector, closed by its centre.

    The arc runs from ``start_radians`` to ``end_radians``; the centre point
    comes last. Raises ValueError if the sweep is negative or exceeds a full
    turn.
    """
    delta = end_radians - start_radians
    if delta < 0 or delta > 2 * math.pi:
        raise ValueError(
            f"sector sweep must lie in [0, 2*pi], got {delta!r} radians"
        )
    segments = int(points_in_full_circle * delta / (2 * math.pi))
    segments = _clamp(segments, 1, _MAX_SECTOR_SEGMENTS)
    points = [
        (
            xcenter + radius * math.cos(start_radians + j * delta / segments),
            ycenter + radius * math.sin(start_radians + j * delta / segments),
        )
        for j in range(segments + 1)
    ]
    points.append((xcenter, ycenter))
    return points


def local_time() -> tuple[int, int, int]:
    """Return the local ``(hour, minute, second)``."""
    now = time.localtime()
    return now.tm_hour, now.tm_min, now.tm_sec


class Canvas:
    """A width x height pixel buffer with simple drawing primitives."""

    def __init__(self, width: int, height: int) -> None:
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._color = BLACK
        self.last_clear_color = WHITE
        self._buffer = [[WHITE] * width for _ in range(height)]
        self.rgb_int(255, 255, 255)
        self.clear()
        self.rgb_int(0, 0, 0)

    # ------------------------------------------------------------------
    # colour

    @property
    def color(self) -> int:
        """The current pen colour as a 24-bit pixel."""
        return self._color

    def rgb(self, r: float, g: float, b: float) -> None:
        """Set the pen colour from components in [0, 1] (clamped)."""
        self.rgb_int(
            int(256 * _clamp(r, 0.0, 1.0)),
            int(256 * _clamp(g, 0.0, 1.0)),
            int(256 * _clamp(b, 0.0, 1.0)),
        )

    def rgb_int(self, r: int, g: int, b: int) -> None:
        """Set the pen colour from components in [0, 255] (clamped)."""
        r, g, b = (_clamp(int(v), 0, 255) for v in (r, g, b))
        self._color = (r << 16) | (g << 8) | b

    def clear(self) -> None:
        """Fill the whole canvas with the pen colour."""
        for row in self._buffer:
            row[:] = [self._color] * self.width
        self.last_clear_color = self._color

    # ------------------------------------------------------------------
    # buffer-space helpers (column, row-from-top)

    def _row(self, y: float) -> int:
        return self.height - 1 - int(y)

    def _plot(self, col: int, row: int) -> bool:
        if 0 <= col < self.width and 0 <= row < self.height:
            self._buffer[row][col] = self._color
            return True
        return False

    def _draw_segment(self, c0: int, r0: int, c1: int, r1: int) -> None:
        dc = abs(c1 - c0)
        dr = -abs(r1 - r0)
        step_c = 1 if c0 < c1 else -1
        step_r = 1 if r0 < r1 else -1
        err = dc + dr
        while True:
            self._plot(c0, r0)
            if c0 == c1 and r0 == r1:
                return
            twice = 2 * err
            if twice >= dr:
                err += dr
                c0 += step_c
            if twice <= dc:
                err += dc
                r0 += step_r

    def _draw_closed(self, vertices: Sequence[tuple[int, int]]) -> None:
        for (c0, r0), (c1, r1) in zip(vertices, vertices[1:]):
            self._draw_segment(c0, r0, c1, r1)
        first, last = vertices[0], vertices[-1]
        self._draw_segment(first[0], first[1], last[0], last[1])

    def _fill_vertices(self, vertices: Sequence[tuple[int, int]]) -> None:
        rows = [r for _, r in vertices]
        top = max(0, math.floor(min(rows)))
        bottom = min(self.height - 1, math.ceil(max(rows)))
        edges = list(zip(vertices, list(vertices[1:]) + [vertices[0]]))
        for row in range(top, bottom + 1):
            center = row + 0.5
            crossings = sorted(
                c0 + (center - r0) * (c1 - c0) / (r1 - r0)
                for (c0, r0), (c1, r1) in edges
                if (r0 <= center < r1) or (r1 <= center < r0)
            )
            for left, right in zip(crossings[0::2], crossings[1::2]):
                start = max(0, math.ceil(left - 0.5))
                stop = min(self.width, math.ceil(right - 0.5))
                for col in range(start, stop):
                    self._buffer[row][col] = self._color

    def _polygon_vertices(
        self, xs: Iterable[float], ys: Iterable[float]
    ) -> list[tuple[int, int]]:
        pairs = list(zip(xs, ys))
        if len(pairs) > MAX_POLYGON_POINTS:
            warnings.warn(
                f"polygon has {len(pairs)} points; points past the first "
                f"{MAX_POLYGON_POINTS} are ignored",
                stacklevel=3,
            )
            pairs = pairs[:MAX_POLYGON_POINTS]
        return [(int(x), int(self.height - 1 - y)) for x, y in pairs]

    # ------------------------------------------------------------------
    # points and lines

    def pixel(self, x: float, y: float) -> None:
        """Plot a pixel; coordinates off the canvas are ignored."""
        self._plot(int(x), self._row(y))

    def point(self, x: float, y: float) -> bool:
        """Plot a pixel; return False if it lies off the canvas."""
        return self._plot(int(x), self._row(y))

    def unclipped_line(self, xs: float, ys: float, xe: float, ye: float) -> None:
        """Draw a line between two points, one pixel wide."""
        self._draw_segment(int(xs), self._row(ys), int(xe), self._row(ye))

    def line(self, xs: float, ys: float, xe: float, ye: float) -> bool:
        """Draw a line clipped to the canvas; return False if nothing remains."""
        ixs, iys, ixe, iye = int(xs), int(ys), int(xe), int(ye)
        w, h = self.width, self.height
        if 0 <= ixs < w and 0 <= ixe < w and 0 <= iys < h and 0 <= iye < h:
            self._draw_segment(ixs, h - 1 - iys, ixe, h - 1 - iye)
            return True

        x0, y0, x1, y1 = float(ixs), float(iys), float(ixe), float(iye)

        def clip_y(edge, inside):
            nonlocal x0, y0, x1, y1
            in0, in1 = inside(y0), inside(y1)
            if in0 and in1:
                return True
            if not in0 and not in1:
                return False
            t = (edge - y0) / (y1 - y0)
            if in0:
                x1, y1 = x0 + t * (x1 - x0), edge
            else:
                x0, y0 = x0 + t * (x1 - x0), edge
            return True

        def clip_x(edge, inside):
            nonlocal x0, y0, x1, y1
            in0, in1 = inside(x0), inside(x1)
            if in0 and in1:
                return True
            if not in0 and not in1:
                return False
            t = (edge - x0) / (x1 - x0)
            if in0:
                x1, y1 = edge, y0 + t * (y1 - y0)
            else:
                x0, y0 = edge, y0 + t * (y1 - y0)
            return True

        top = h - 1
        right = w - 1
        if not (
            clip_y(0.0, lambda v: v >= 0.0)
            and clip_y(float(top), lambda v: v <= top)
            and clip_x(0.0, lambda v: v >= 0.0)
            and clip_x(float(right), lambda v: v <= right)
        ):
            return False
        self._draw_segment(int(x0), int(h - 1 - y0), int(x1), int(h - 1 - y1))
        return True

    def single_pixel_horizontal_line(self, x0: float, x1: float, y: float) -> bool:
        """Draw a horizontal run of pixels; return False if wholly off canvas."""
        ix0, ix1, iy = int(x0), int(x1), int(y)
        if iy < 0 or iy >= self.height:
            return False
        if ix0 > ix1:
            ix0, ix1 = ix1, ix0
        if ix1 < 0 or ix0 >= self.width:
            return False
        ix0 = max(ix0, 0)
        ix1 = min(ix1, self.width - 1)
        for x in range(ix0, ix1 + 1):
            self.point(x, iy)
        return True

    # ------------------------------------------------------------------
    # shapes

    def rectangle(self, xleft: float, yleft: float, width: float, height: float) -> None:
        """Draw the outline of a rectangle."""
        w, h = int(width), int(height)
        col = int(xleft)
        row = self.height - int(yleft) - h
        self._draw_closed([(col, row), (col + w, row), (col + w, row + h), (col, row + h)])

    def fill_rectangle(
        self, xleft: float, yleft: float, width: float, height: float
    ) -> None:
        """Fill a rectangle whose lower left corner is ``(xleft, yleft)``."""
        w, h = int(width), int(height)
        col = int(xleft)
        row = self.height - int(yleft) - h
        for r in range(max(row, 0), min(row + h, self.height)):
            for c in range(max(col, 0), min(col + w, self.width)):
                self._buffer[r][c] = self._color

    def triangle(self, x0, y0, x1, y1, x2, y2) -> None:
        """Draw the outline of a triangle."""
        self._draw_closed(
            [(int(x), self._row(y)) for x, y in ((x0, y0), (x1, y1), (x2, y2))]
        )

    def fill_triangle(self, x0, y0, x1, y1, x2, y2) -> None:
        """Fill a triangle."""
        self._fill_vertices(
            [(int(x), self._row(y)) for x, y in ((x0, y0), (x1, y1), (x2, y2))]
        )

    def polygon(self, xs: Iterable[float], ys: Iterable[float]) -> bool:
        """Draw a closed polygon outline; return False if it has no points."""
        vertices = self._polygon_vertices(xs, ys)
        if not vertices:
            return False
        self._draw_closed(vertices)
        return True

    def fill_polygon(self, xs: Iterable[float], ys: Iterable[float]) -> bool:
        """Fill a polygon (even-odd rule); return False if it has no points."""
        vertices = self._polygon_vertices(xs, ys)
        if not vertices:
            return False
        self._fill_vertices(vertices)
        return True

    def _midpoint_circle(self, r: int) -> Iterator[tuple[int, int]]:
        x, y, e = r, 0, 0
        while x >= y:
            yield x, y
            e1 = e + y + y + 1
            e2 = e1 - x - x + 1
            y += 1
            if abs(e2) < abs(e1):
                x -= 1
                e = e2
            else:
                e = e1

    def circle(self, a: float, b: float, r: float) -> None:
        """Draw the outline of a circle centred on ``(a, b)``."""
        ia, ib = int(a), int(b)
        for x, y in self._midpoint_circle(int(r)):
            for dx, dy in ((x, y), (y, x)):
                self.point(ia + dx, ib + dy)
                self.point(ia - dx, ib + dy)
                self.point(ia + dx, ib - dy)
                self.point(ia - dx, ib - dy)

    def fill_circle(self, a: float, b: float, r: float) -> None:
        """Fill a circle centred on ``(a, b)``."""
        ia, ib = int(a), int(b)
        for x, y in self._midpoint_circle(int(r)):
            self.single_pixel_horizontal_line(ia - x, ia + x, ib + y)
            self.single_pixel_horizontal_line(ia - x, ia + x, ib - y)
            self.single_pixel_horizontal_line(ia - y, ia + y, ib + x)
            self.single_pixel_horizontal_line(ia - y, ia + y, ib - x)

    def sector(self, xcenter, ycenter, radius, start_radians, end_radians) -> None:
        """Draw the outline of a circular sector."""
        points = sector_points(
            xcenter, ycenter, radius, start_radians, end_radians,
            SECTOR_POINTS_IN_FULL_CIRCLE,
        )
        xs, ys = zip(*points)
        self.polygon(xs, ys)

    def fill_sector(self, xcenter, ycenter, radius, start_radians, end_radians) -> None:
        """Fill a circular sector."""
        points = sector_points(
            xcenter, ycenter, radius, start_radians, end_radians,
            SECTOR_POINTS_IN_FULL_CIRCLE,
        )
        xs, ys = zip(*points)
        self.fill_polygon(xs, ys)

    # ------------------------------------------------------------------
    # reading back

    def get_pixel(self, x: float, y: float) -> int:
        """Return the pixel at ``(x, y)``; raise IndexError if off canvas."""
        col, row = int(x), self._row(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the canvas")
        return self._buffer[row][col]

    def get_pixel_safe(self, x: float, y: float) -> int | None:
        """Return the pixel at ``(x, y)``, or None if it lies off the canvas."""
        try:
            return self.get_pixel(x, y)
        except IndexError:
            return None

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield pixel rows from the top of the image down to ``y == 0``."""
        for row in self._buffer:
            yield tuple(row)