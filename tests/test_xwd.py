import struct

import pytest

from fpgraphics.bmp import ImageFormatError
from fpgraphics.canvas import Canvas
from fpgraphics.xwd import (
    XwdImage,
    load_xwd_into,
    put_image,
    read_xwd,
    read_xwd_dimensions,
    save_xwd,
)

RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


def _painted_canvas():
    canvas = Canvas(4, 3)
    canvas.rgb_int(255, 0, 0)
    canvas.point(0, 0)
    canvas.rgb_int(0, 255, 0)
    canvas.point(3, 2)
    canvas.rgb_int(0, 0, 255)
    canvas.point(1, 1)
    return canvas


def test_header_fields(tmp_path):
    path = tmp_path / "out.xwd"
    save_xwd(_painted_canvas(), path)
    data = path.read_bytes()
    fields = struct.unpack(">25i", data[:100])
    assert fields[0] == 104
    assert fields[1] == 7
    assert fields[2] == 2
    assert fields[3] == 24
    assert fields[4:6] == (4, 3)
    assert fields[11] == 32
    assert fields[12] == 4 * 4
    assert fields[14:17] == (0x00FF0000, 0x0000FF00, 0x000000FF)
    assert data[100:104] == bytes(4)
    assert len(data) == 104 + 4 * 4 * 3


def test_pixel_bytes_little_endian(tmp_path):
    path = tmp_path / "out.xwd"
    canvas = Canvas(1, 1)
    canvas.rgb_int(0x12, 0x34, 0x56)
    canvas.clear()
    save_xwd(canvas, path)
    assert path.read_bytes()[104:] == bytes((0x56, 0x34, 0x12, 0x00))


def test_round_trip(tmp_path):
    path = tmp_path / "out.xwd"
    canvas = _painted_canvas()
    save_xwd(canvas, path)
    image = read_xwd(path)
    assert (image.width, image.height) == (4, 3)
    assert image.pixels == tuple(canvas.rows())


def test_dimensions(tmp_path):
    path = tmp_path / "out.xwd"
    save_xwd(_painted_canvas(), path)
    assert read_xwd_dimensions(path) == (4, 3)


def test_load_into_reproduces_canvas(tmp_path):
    path = tmp_path / "out.xwd"
    original = _painted_canvas()
    save_xwd(original, path)
    target = Canvas(4, 3)
    load_xwd_into(target, path, 0, 0)
    assert list(target.rows()) == list(original.rows())


def test_put_image_places_lower_left_corner():
    image = XwdImage(2, 2, ((RED, GREEN), (BLUE, RED)))
    canvas = Canvas(5, 5)
    put_image(canvas, image, 2, 1)
    assert canvas.get_pixel(2, 2) == RED
    assert canvas.get_pixel(3, 2) == GREEN
    assert canvas.get_pixel(2, 1) == BLUE
    assert canvas.get_pixel(3, 1) == RED
    assert canvas.get_pixel(1, 1) == canvas.last_clear_color


def test_put_image_clips_at_top_and_right():
    image = XwdImage(2, 2, ((RED, GREEN), (BLUE, RED)))
    canvas = Canvas(3, 3)
    put_image(canvas, image, 2, 2)
    assert canvas.get_pixel(2, 2) == BLUE
    assert canvas.get_pixel(1, 2) == canvas.last_clear_color


def test_put_image_keeps_pen():
    canvas = Canvas(2, 2)
    canvas.rgb_int(10, 20, 30)
    before = canvas.color
    put_image(canvas, XwdImage(1, 1, ((RED,),)), 0, 0)
    assert canvas.color == before
    assert canvas.get_pixel(0, 0) == RED


def test_image_shape_validated():
    with pytest.raises(ValueError):
        XwdImage(2, 1, ((RED,),))


def test_short_header_rejected(tmp_path):
    path = tmp_path / "bad.xwd"
    path.write_bytes(b"\x00\x00")
    with pytest.raises(ImageFormatError):
        read_xwd(path)
    with pytest.raises(ImageFormatError):
        read_xwd_dimensions(path)


def test_truncated_pixels_rejected(tmp_path):
    path = tmp_path / "out.xwd"
    save_xwd(_painted_canvas(), path)
    path.write_bytes(path.read_bytes()[:-4])
    with pytest.raises(ImageFormatError):
        read_xwd(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_xwd(tmp_path / "missing.xwd")