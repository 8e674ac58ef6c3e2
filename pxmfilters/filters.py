"""Point and neighbourhood filters on 8-bit images."""

from __future__ import annotations

import numpy as np

from .image import Depth, Image
from .ops import copy_make_border


def _check_radius(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _check_positive(name: str, value: float) -> np.float32:
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return np.float32(value)


def _to_u8(values: np.ndarray) -> Image:
    """Saturate to [0, 255] and truncate toward zero."""
    return Image.from_array(values, Depth.U8)


def gamma_correction(src: Image, gamma: float) -> Image:
    """Apply ``255 * (v / 255) ** (1 / gamma)`` to every element."""
    if gamma == 0:
        raise ValueError("gamma must not be zero")
    exponent = np.float32(1.0) / np.float32(gamma)
    scaled = src.data.astype(np.float32) / np.float32(255.0)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        out = np.power(scaled, exponent) * np.float32(255.0)
    return _to_u8(out)


def mean_var(src: Image) -> tuple[float, float]:
    """Return the mean and the variance over all elements of ``src``."""
    if src.data.size == 0:
        raise ValueError("cannot compute statistics of an empty image")
    values = src.data.astype(np.float64)
    count = values.size
    mean = float(values.sum()) / count
    var = float((values * values).sum()) / count - mean * mean
    return mean, var


def gaussian_filter(src: Image, r: int, sigma: float) -> Image:
    """Smooth with a (2r+1) x (2r+1) Gaussian kernel, replicating the border."""
    r = _check_radius("r", r)
    sigma = _check_positive("sigma", sigma)
    rows, cols = src.rows, src.cols
    padded = copy_make_border(src, r, r, r, r).data.astype(np.float32)
    denom = np.float32(2.0) * sigma * sigma

    total = np.zeros(src.shape, dtype=np.float32)
    wsum = np.float32(0.0)
    for j in range(-r, r + 1):
        for i in range(-r, r + 1):
            weight = np.exp(np.float32(-(j * j + i * i)) / denom)
            total += padded[r + j:r + j + rows, r + i:r + i + cols] * weight
            wsum += weight
    return _to_u8(total / wsum)


def bilateral_filter(src: Image, r: int, sigma_r: float, sigma_s: float) -> Image:
    """Edge-preserving smoothing of a 3-channel image."""
    if src.channels != 3:
        raise ValueError(
            f"bilateral filter needs a 3-channel image, got {src.channels}"
        )
    r = _check_radius("r", r)
    sigma_r = _check_positive("sigma_r", sigma_r)
    sigma_s = _check_positive("sigma_s", sigma_s)
    rows, cols = src.rows, src.cols
    padded = copy_make_border(src, r, r, r, r).data.astype(np.float32)
    centre = padded[r:r + rows, r:r + cols]
    denom_s = np.float32(2.0) * sigma_s * sigma_s
    denom_r = np.float32(2.0) * sigma_r * sigma_r

    total = np.zeros(src.shape, dtype=np.float32)
    wsum = np.zeros((rows, cols, 1), dtype=np.float32)
    for i in range(-r, r + 1):
        for j in range(-r, r + 1):
            space_weight = np.exp(np.float32(-(j * j + i * i)) / denom_s)
            ref = padded[r + j:r + j + rows, r + i:r + i + cols]
            diff = ref - centre
            range_distance = (diff * diff).sum(axis=2, keepdims=True, dtype=np.float32)
            weight = space_weight * np.exp(-range_distance / denom_r)
            total += ref * weight
            wsum += weight
    return _to_u8(total / wsum + np.float32(0.5))


def non_local_means_filter(src: Image, template_r: int, search_r: int, h: float) -> Image:
    """Denoise a 1-channel image by weighting pixels with similar patches."""
    if src.channels != 1:
        raise ValueError(
            f"non-local means filter needs a 1-channel image, got {src.channels}"
        )
    tr = _check_radius("template_r", template_r)
    sr = _check_radius("search_r", search_r)
    if h == 0:
        raise ValueError("h must not be zero")
    h2 = np.float32(h) * np.float32(h)
    pad = sr + tr
    rows, cols = src.rows, src.cols
    plane = copy_make_border(src, pad, pad, pad, pad).data[:, :, 0].astype(np.float32)

    def window(dy: int, dx: int) -> np.ndarray:
        return plane[pad + dy:pad + dy + rows, pad + dx:pad + dx + cols]

    total = np.zeros((rows, cols), dtype=np.float32)
    wsum = np.zeros((rows, cols), dtype=np.float32)
    for i in range(-sr, sr + 1):
        for j in range(-sr, sr + 1):
            distance = np.zeros((rows, cols), dtype=np.float32)
            for k in range(-tr, tr + 1):
                for l in range(-tr, tr + 1):
                    diff = window(j + l, i + k) - window(l, k)
                    distance += diff * diff
            weight = np.exp(-distance / h2)
            total += window(j, i) * weight
            wsum += weight
    out = total / wsum + np.float32(0.5)
    return _to_u8(out[:, :, np.newaxis])