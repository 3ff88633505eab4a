import pytest

from fpgraphics import clip2d

SQUARE = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]

POLY = [(70.0, 350.0), (460.0, 25.0), (400.0, 550.0)]
WINDOW = [(100.0, 150.0), (600.0, 200.0), (550.0, 450.0), (150.0, 500.0)]


def _area(points):
    n = len(points)
    return abs(
        sum(
            points[i][0] * points[(i + 1) % n][1]
            - points[(i + 1) % n][0] * points[i][1]
            for i in range(n)
        )
    ) / 2.0


def _inside_convex(point, window, tol=1e-6):
    n = len(window)
    cx = sum(x for x, _ in window) / n
    cy = sum(y for _, y in window) / n
    px, py = point
    for i in range(n):
        (x1, y1), (x2, y2) = window[i], window[(i + 1) % n]
        side = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
        centre_side = (x2 - x1) * (cy - y1) - (y2 - y1) * (cx - x1)
        if side * centre_side < -tol * abs(centre_side):
            return False
    return True


def test_line_clip_halves_square():
    result = clip2d.clip_polygon_against_line(1.0, 0.0, 0.0, SQUARE)
    assert all(x <= 1e-12 for x, _ in result)
    assert _area(result) == pytest.approx(_area(SQUARE) / 2)


def test_line_clip_fully_inside_keeps_vertices():
    result = clip2d.clip_polygon_against_line(1.0, 0.0, -5.0, SQUARE)
    assert sorted(result) == sorted(SQUARE)


def test_line_clip_empty_polygon():
    assert clip2d.clip_polygon_against_line(1.0, 1.0, 1.0, []) == []


def test_window_clip_result_lies_inside_window():
    result = clip2d.clip_polygon_against_convex_window(POLY, WINDOW)
    assert len(result) >= 3
    assert all(_inside_convex(p, WINDOW) for p in result)
    assert 0 < _area(result) < min(_area(POLY), _area(WINDOW))


def test_window_clip_of_contained_polygon_is_unchanged():
    inner = [(200.0, 250.0), (400.0, 260.0), (300.0, 400.0)]
    result = clip2d.clip_polygon_against_convex_window(inner, WINDOW)
    assert sorted(result) == sorted(inner)


def test_window_clip_of_enclosing_polygon_gives_window():
    big = [(-1000.0, -1000.0), (1000.0, -1000.0), (1000.0, 1000.0), (-1000.0, 1000.0)]
    result = clip2d.clip_polygon_against_convex_window(big, WINDOW)
    assert _area(result) == pytest.approx(_area(WINDOW))


def test_window_clip_disjoint_polygon_is_empty():
    far = [(2000.0, 2000.0), (2100.0, 2000.0), (2050.0, 2100.0)]
    assert clip2d.clip_polygon_against_convex_window(far, WINDOW) == []


def test_window_orientation_does_not_matter():
    forward = clip2d.clip_polygon_against_convex_window(POLY, WINDOW)
    backward = clip2d.clip_polygon_against_convex_window(POLY, WINDOW[::-1])
    assert _area(forward) == pytest.approx(_area(backward))


def test_iter_yields_one_stage_per_edge_ending_in_final():
    stages = list(clip2d.iter_convex_window_clip(POLY, WINDOW))
    assert len(stages) == len(WINDOW)
    assert stages[-1] == clip2d.clip_polygon_against_convex_window(POLY, WINDOW)


def test_iter_stages_never_grow_in_area():
    areas = [_area(POLY)] + [
        _area(s) for s in clip2d.iter_convex_window_clip(POLY, WINDOW)
    ]
    assert all(later <= earlier + 1e-6 for earlier, later in zip(areas, areas[1:]))


def test_empty_window_raises():
    with pytest.raises(ValueError):
        clip2d.clip_polygon_against_convex_window(POLY, [])