"""Reading and writing uncompressed 24-bit BMP files."""

from __future__ import annotations

import os
import struct

from fpgraphics.canvas import Canvas

HEADER_SIZE = 54
_INFO_HEADER_SIZE = 40
_PIXELS_PER_METRE = 0x0B13
_HEADER = struct.Struct("<2sIHHIIiiHHIIiiII")


class ImageFormatError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


def _row_size(width: int) -> int:
    return (3 * width + 3) // 4 * 4


def _read_header(data: bytes) -> tuple[int, int, int, int]:
    if len(data) < HEADER_SIZE:
        raise ImageFormatError(
            f"BMP header needs {HEADER_SIZE} bytes, file has {len(data)}"
        )
    fields = _HEADER.unpack_from(data)
    if fields[0] != b"BM":
        raise ImageFormatError("missing BM signature")
    file_size, width, height, raw_size = fields[1], fields[6], fields[7], fields[11]
    return file_size, width, height, raw_size


def save_bmp(canvas: Canvas, path: str | os.PathLike[str]) -> None:
    """Write the canvas to ``path`` as a bottom-up 24-bit BMP file."""
    width, height = canvas.width, canvas.height
    row_size = _row_size(width)
    raw_size = row_size * height
    header = _HEADER.pack(
        b"BM",
        raw_size + HEADER_SIZE,
        0,
        0,
        HEADER_SIZE,
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        24,
        0,
        raw_size,
        _PIXELS_PER_METRE,
        _PIXELS_PER_METRE,
        0,
        0,
    )
    padding = bytes(row_size - 3 * width)
    body = bytearray()
    for row in reversed(list(canvas.rows())):
        for pixel in row:
            body += bytes((pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF))
        body += padding
    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(body)


def read_bmp_dimensions(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Return ``(width, height)`` from the header of the BMP file at ``path``."""
    with open(path, "rb") as stream:
        data = stream.read(HEADER_SIZE)
    _, width, height, _ = _read_header(data)
    return width, height


def display_bmp(
    canvas: Canvas, path: str | os.PathLike[str], xoffset: int, yoffset: int
) -> None:
    """Draw the BMP file at ``path`` with its lower left corner at the offset.

    Pixels falling off the canvas are skipped. The pen is left set to the
    colour of the last pixel drawn. Raises ImageFormatError if the header is
    inconsistent or the pixel data is truncated or followed by extra bytes.
    """
    with open(path, "rb") as stream:
        data = stream.read()
    file_size, width, height, raw_size = _read_header(data)

    row_size = _row_size(width)
    if row_size * height != raw_size:
        raise ImageFormatError(
            f"raw data size {raw_size} does not match {width}x{height} image"
        )
    if raw_size + HEADER_SIZE != file_size:
        raise ImageFormatError(
            f"file size field {file_size} does not match raw data size {raw_size}"
        )
    body = data[HEADER_SIZE:]
    if len(body) < raw_size:
        raise ImageFormatError("pixel data is truncated")
    if len(body) > raw_size:
        raise ImageFormatError("unexpected data after the pixel rows")

    for y in range(height):
        start = y * row_size
        for x in range(width):
            b, g, r = body[start + 3 * x : start + 3 * x + 3]
            canvas.rgb_int(r, g, b)
            canvas.point(x + xoffset, y + yoffset)