"""Reading and writing of PGM/PPM (PXM) image files."""

from __future__ import annotations

import os

import numpy as np

from .image import Depth, Image

_CHANNELS = {b"P2": 1, b"P3": 3, b"P5": 1, b"P6": 3}
_BINARY = {b"P5", b"P6"}
_COMMENT = b"# Created by Programming OUYOU\n"


class PxmFormatError(ValueError):
    """Raised when a file is not a readable 8-bit PGM/PPM image."""


def _next_token(buf: bytes, pos: int) -> tuple[bytes, int]:
    """Return the next header token and the position just after it."""
    size = len(buf)
    while pos < size:
        char = buf[pos:pos + 1]
        if char.isspace():
            pos += 1
        elif char == b"#":
            end = buf.find(b"\n", pos)
            pos = size if end < 0 else end + 1
        else:
            break
    start = pos
    while pos < size:
        char = buf[pos:pos + 1]
        if char.isspace() or char == b"#":
            break
        pos += 1
    if start == pos:
        raise PxmFormatError("unexpected end of header")
    return buf[start:pos], pos


def _header_int(buf: bytes, pos: int, what: str) -> tuple[int, int]:
    token, pos = _next_token(buf, pos)
    try:
        value = int(token)
    except ValueError:
        raise PxmFormatError(f"bad {what} {token!r}") from None
    if value < 0:
        raise PxmFormatError(f"negative {what} {value}")
    return value, pos


def read_pxm(path) -> Image:
    """Read a PGM (gray) or PPM (color) file into an 8U image."""
    with open(os.fspath(path), "rb") as handle:
        buf = handle.read()

    magic, pos = _next_token(buf, 0)
    if magic not in _CHANNELS:
        raise PxmFormatError(f"unsupported magic number {magic!r}")
    channels = _CHANNELS[magic]
    cols, pos = _header_int(buf, pos, "width")
    rows, pos = _header_int(buf, pos, "height")
    maxval, pos = _header_int(buf, pos, "maximum value")
    if not 0 < maxval <= 255:
        raise PxmFormatError(f"unsupported maximum value {maxval}")

    size = rows * cols * channels
    if magic in _BINARY:
        pos += 1  # the single whitespace byte that ends the header
        raw = buf[pos:pos + size]
        if len(raw) < size:
            raise PxmFormatError(
                f"pixel data truncated: {len(raw)} of {size} bytes"
            )
        values = np.frombuffer(raw, dtype=np.uint8)
    else:
        tokens = buf[pos:].split()[:size]
        if len(tokens) < size:
            raise PxmFormatError(
                f"pixel data truncated: {len(tokens)} of {size} values"
            )
        try:
            values = np.array([int(token) for token in tokens], dtype=np.int64)
        except ValueError:
            raise PxmFormatError("non-numeric pixel value") from None
        if values.size and (values.min() < 0 or values.max() > maxval):
            raise PxmFormatError("pixel value out of range")
    return Image(rows, cols, channels, Depth.U8, values)


def write_pxm(path, image: Image) -> None:
    """Write an 8U image as binary PGM (1 channel) or PPM (3 channels)."""
    if image.depth is not Depth.U8:
        raise ValueError(f"only 8U images can be written, got {image.depth.value}")
    if image.channels == 1:
        magic = b"P5\n"
    elif image.channels == 3:
        magic = b"P6\n"
    else:
        raise ValueError(f"cannot write an image with {image.channels} channels")
    header = magic + _COMMENT + f"{image.cols} {image.rows}\n255\n".encode("ascii")
    with open(os.fspath(path), "wb") as handle:
        handle.write(header)
        handle.write(np.ascontiguousarray(image.data).tobytes())
        handle.write(b"\n")