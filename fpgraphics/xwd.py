"""Reading and writing X window dump (XWD) images of a canvas.

Files are written with a 104-byte big-endian header: 25 fields followed by
an empty, null-terminated window name padded to four bytes. Pixels follow
as 32-bit values, least significant byte first, rows from the top down.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

from fpgraphics.bmp import ImageFormatError
from fpgraphics.canvas import Canvas, pixel_to_rgb_int

HEADER_SIZE = 104
FILE_VERSION = 7
Z_PIXMAP = 2
DEPTH = 24
BITS_PER_PIXEL = 32
_BITMAP_UNIT = 32
_BITMAP_PAD = 32
_VISUAL_CLASS = 5
_RED_MASK = 0x00FF0000
_GREEN_MASK = 0x0000FF00
_BLUE_MASK = 0x000000FF
_BITS_PER_RGB = 24
_LSB_FIRST = 0

_FIELDS = struct.Struct(">25i")
_DIMENSIONS = struct.Struct(">6i")
_WINDOW_NAME = bytes(4)


@dataclass(frozen=True)
class XwdImage:
    """A 24-bit image; ``pixels`` holds rows of ``0xRRGGBB`` from the top down."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"image size must not be negative, got {self.width}x{self.height}"
            )
        if len(self.pixels) != self.height or any(
            len(row) != self.width for row in self.pixels
        ):
            raise ValueError(
                f"pixel rows do not form a {self.width}x{self.height} image"
            )

    @classmethod
    def from_canvas(cls, canvas: Canvas) -> "XwdImage":
        """Capture the current contents of ``canvas``."""
        return cls(canvas.width, canvas.height, tuple(canvas.rows()))


def _encode(image: XwdImage) -> bytes:
    width, height = image.width, image.height
    bytes_per_line = width * 4
    header = _FIELDS.pack(
        HEADER_SIZE,
        FILE_VERSION,
        Z_PIXMAP,
        DEPTH,
        width,
        height,
        0,
        _LSB_FIRST,
        _BITMAP_UNIT,
        0,
        _BITMAP_PAD,
        BITS_PER_PIXEL,
        bytes_per_line,
        _VISUAL_CLASS,
        _RED_MASK,
        _GREEN_MASK,
        _BLUE_MASK,
        _BITS_PER_RGB,
        0,
        0,
        width,
        height,
        0,
        0,
        0,
    )
    body = b"".join(
        struct.pack(f"<{width}I", *row) for row in image.pixels
    )
    return header + _WINDOW_NAME + body


def save_xwd(canvas: Canvas, path: str | os.PathLike[str]) -> None:
    """Write the whole canvas to ``path`` as an XWD file."""
    data = _encode(XwdImage.from_canvas(canvas))
    with open(path, "wb") as stream:
        stream.write(data)


def _decode(data: bytes) -> XwdImage:
    if len(data) < _FIELDS.size:
        raise ImageFormatError(
            f"XWD header needs {_FIELDS.size} bytes, file has {len(data)}"
        )
    fields = _FIELDS.unpack_from(data)
    header_size = fields[0]
    width, height = fields[4], fields[5]
    byte_order = fields[7]
    bits_per_pixel = fields[11]
    bytes_per_line = fields[12]

    if header_size < _FIELDS.size:
        raise ImageFormatError(f"header size {header_size} is too small")
    if width < 0 or height < 0:
        raise ImageFormatError(f"invalid image size {width}x{height}")
    if bits_per_pixel != BITS_PER_PIXEL:
        raise ImageFormatError(
            f"only {BITS_PER_PIXEL}-bit pixels are supported, got {bits_per_pixel}"
        )
    if bytes_per_line < width * 4:
        raise ImageFormatError(
            f"line length {bytes_per_line} is too short for width {width}"
        )

    body = data[header_size:]
    needed = bytes_per_line * height
    if len(body) < needed:
        raise ImageFormatError("pixel data is truncated")

    order = "<" if byte_order == _LSB_FIRST else ">"
    row_format = struct.Struct(f"{order}{width}I")
    pixels = tuple(
        tuple(value & 0xFFFFFF for value in row_format.unpack_from(body, r * bytes_per_line))
        for r in range(height)
    )
    return XwdImage(width, height, pixels)


def read_xwd(path: str | os.PathLike[str]) -> XwdImage:
    """Read the XWD file at ``path``."""
    with open(path, "rb") as stream:
        data = stream.read()
    return _decode(data)


def read_xwd_dimensions(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Return ``(width, height)`` from the header of the XWD file at ``path``."""
    with open(path, "rb") as stream:
        data = stream.read(_DIMENSIONS.size)
    if len(data) < _DIMENSIONS.size:
        raise ImageFormatError("file is too short to hold an XWD header")
    fields = _DIMENSIONS.unpack(data)
    return fields[4], fields[5]


def put_image(canvas: Canvas, image: XwdImage, x: float, y: float) -> None:
    """Copy ``image`` onto ``canvas`` with its lower left corner at ``(x, y)``.

    Parts of the image falling off the canvas are dropped. The pen colour is
    left unchanged.
    """
    ix, iy = int(x), int(y)
    saved = canvas.color
    try:
        for r, row in enumerate(image.pixels):
            dest_y = iy + image.height - 1 - r
            if not 0 <= dest_y < canvas.height:
                continue
            for c, pixel in enumerate(row):
                dest_x = ix + c
                if 0 <= dest_x < canvas.width:
                    canvas.rgb_int(*pixel_to_rgb_int(pixel))
                    canvas.point(dest_x, dest_y)
    finally:
        canvas.rgb_int(*pixel_to_rgb_int(saved))


def load_xwd_into(
    canvas: Canvas, path: str | os.PathLike[str], x: float, y: float
) -> None:
    """Read the XWD file at ``path`` and put it on ``canvas`` at ``(x, y)``."""
    put_image(canvas, read_xwd(path), x, y)