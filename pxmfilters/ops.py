"""Border padding, color conversion, channel split/merge and PSNR."""

from __future__ import annotations

import math

import numpy as np

from .image import Image


def copy_make_border(src: Image, top: int, bottom: int, left: int, right: int) -> Image:
    """Return ``src`` enlarged on each side by replicating its edge pixels."""
    if min(top, bottom, left, right) < 0:
        raise ValueError("border sizes must not be negative")
    if (src.rows == 0 and (top or bottom or left or right)) or (
        src.cols == 0 and (top or bottom or left or right)
    ):
        raise ValueError("cannot replicate the border of an empty image")
    padded = np.pad(
        src.data, ((top, bottom), (left, right), (0, 0)), mode="edge"
    )
    return Image.from_array(padded, src.depth)


def cvt_color_gray(src: Image) -> Image:
    """Convert a 3-channel image to one channel as the rounded channel mean."""
    if src.channels != 3:
        raise ValueError(f"expected a 3-channel image, got {src.channels}")
    total = src.data.astype(np.float32).sum(axis=2, dtype=np.float32)
    gray = total * np.float32(0.3333) + np.float32(0.5)
    if src.depth.is_integer:
        gray = np.trunc(gray)
    return Image.from_array(gray, src.depth)


def split(src: Image) -> list[Image]:
    """Return one single-channel image per channel of ``src``."""
    return [
        Image.from_array(plane, src.depth)
        for plane in np.moveaxis(src.data, 2, 0)
    ]


def merge(planes) -> Image:
    """Interleave single-channel images into one multi-channel image."""
    planes = list(planes)
    if not planes:
        raise ValueError("nothing to merge")
    first = planes[0]
    for plane in planes:
        if plane.channels != 1:
            raise ValueError("only single-channel images can be merged")
        if (plane.rows, plane.cols) != (first.rows, first.cols):
            raise ValueError("planes differ in size")
        if plane.depth is not first.depth:
            raise ValueError("planes differ in depth")
    merged = np.concatenate([plane.data for plane in planes], axis=2)
    return Image.from_array(merged, first.depth)


def calc_psnr(first: Image, second: Image) -> float:
    """Peak signal-to-noise ratio in dB for a peak of 255; inf if equal."""
    if first.channels != second.channels:
        raise ValueError("different number of channels")
    if (first.rows, first.cols) != (second.rows, second.cols):
        raise ValueError("different image size")
    diff = first.data.astype(np.float64) - second.data.astype(np.float64)
    sse = float(np.sum(diff * diff))
    if sse <= 1e-10:
        return math.inf
    mse = sse / diff.size
    return 10.0 * math.log10((255.0 * 255.0) / mse)