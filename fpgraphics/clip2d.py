"""Clipping of 2D polygons against lines and convex windows."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Point = tuple[float, float]


def clip_polygon_against_line(
    a: float, b: float, c: float, points: Sequence[Point]
) -> list[Point]:
    """Clip a polygon against the line ``a*x + b*y + c = 0``.

    The half-plane ``a*x + b*y + c < 0`` is inside. Returns the vertices of
    the clipped polygon, which may be empty.
    """
    result: list[Point] = []
    size = len(points)
    for i, (x1, y1) in enumerate(points):
        x2, y2 = points[(i + 1) % size]
        s1 = a * x1 + b * y1 + c
        s2 = a * x2 + b * y2 + c

        if s1 >= 0 and s2 >= 0:
            continue
        if s1 < 0 and s2 < 0:
            result.append((x2, y2))
            continue

        x21, y21 = x2 - x1, y2 - y1
        den = a * x21 + b * y21
        if den == 0:
            continue
        t = -s1 / den
        crossing = (x1 + t * x21, y1 + t * y21)
        result.append(crossing)
        if s1 >= 0:
            result.append((x2, y2))
    return result


def _edge_lines(window: Sequence[Point]) -> Iterator[tuple[float, float, float]]:
    if not window:
        raise ValueError("window must have at least one vertex")
    count = len(window)
    cx = sum(x for x, _ in window) / count
    cy = sum(y for _, y in window) / count
    for k, (xk, yk) in enumerate(window):
        xm, ym = window[(k + 1) % count]
        a = ym - yk
        b = xk - xm
        c = -(a * xk + b * yk)
        if a * cx + b * cy + c > 0:
            a, b, c = -a, -b, -c
        yield a, b, c


def iter_convex_window_clip(
    polygon: Sequence[Point], window: Sequence[Point]
) -> Iterator[list[Point]]:
    """Clip ``polygon`` edge by edge against a convex ``window``.

    Yields the partially clipped polygon after each window edge; the last
    value is the fully clipped polygon.
    """
    current = [(float(x), float(y)) for x, y in polygon]
    for a, b, c in _edge_lines(window):
        current = clip_polygon_against_line(a, b, c, current)
        yield list(current)


def clip_polygon_against_convex_window(
    polygon: Sequence[Point], window: Sequence[Point]
) -> list[Point]:
    """Return ``polygon`` clipped to the inside of a convex ``window``."""
    result = [(float(x), float(y)) for x, y in polygon]
    for result in iter_convex_window_clip(polygon, window):
        pass
    return result