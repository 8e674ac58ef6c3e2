"""In-memory images with a fixed element depth and interleaved channels."""

from __future__ import annotations

from enum import Enum

import numpy as np

_DTYPES = {
    "8U": np.dtype(np.uint8),
    "16S": np.dtype(np.int16),
    "32S": np.dtype(np.int32),
    "32F": np.dtype(np.float32),
    "64F": np.dtype(np.float64),
}


class Depth(Enum):
    """Element type of an image."""

    U8 = "8U"
    S16 = "16S"
    S32 = "32S"
    F32 = "32F"
    F64 = "64F"

    @property
    def dtype(self) -> np.dtype:
        return _DTYPES[self.value]

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in "iu"

    @classmethod
    def from_dtype(cls, dtype) -> "Depth":
        """Return the depth whose element type is exactly ``dtype``."""
        dtype = np.dtype(dtype)
        for depth in cls:
            if depth.dtype == dtype:
                return depth
        raise ValueError(f"no image depth for element type {dtype}")


def _cast(values: np.ndarray, depth: Depth) -> np.ndarray:
    """Convert values to ``depth``, saturating only when the target is 8U."""
    values = np.asarray(values)
    with np.errstate(invalid="ignore", over="ignore"):
        if depth is Depth.U8 and values.dtype != np.uint8:
            values = np.clip(values, 0, 255)
        return values.astype(depth.dtype)


def _default_rng(rng):
    return np.random.default_rng() if rng is None else rng


def _check_range(depth: Depth, low, high) -> None:
    if low > high:
        raise ValueError(f"empty random range [{low}, {high}]")
    if depth.is_integer:
        limits = np.iinfo(depth.dtype)
        if low < limits.min or high > limits.max:
            raise ValueError(
                f"range [{low}, {high}] does not fit depth {depth.value}"
            )


def _random_block(depth: Depth, low, high, rng, size):
    _check_range(depth, low, high)
    rng = _default_rng(rng)
    if depth.is_integer:
        drawn = rng.integers(int(low), int(high) + 1, size=size)
    else:
        # Like the integer case, the span is widened by one.
        drawn = low + rng.random(size=size) * (high - low + 1.0)
    return np.asarray(drawn).astype(depth.dtype)


def rand_value(depth, low, high, rng=None):
    """Draw one random value of the given depth.

    Integer depths give a value in ``[low, high]``; floating depths give a
    value in ``[low, high + 1)``.
    """
    depth = Depth(depth)
    return _random_block(depth, low, high, rng, None).item()


class Image:
    """A ``rows`` x ``cols`` image with ``channels`` interleaved channels."""

    __hash__ = None

    def __init__(self, rows, cols, channels=1, depth=Depth.U8, data=None):
        if rows < 0 or cols < 0 or channels < 1:
            raise ValueError(
                f"invalid image shape {rows} x {cols} x {channels}"
            )
        self.rows = int(rows)
        self.cols = int(cols)
        self.channels = int(channels)
        self.depth = Depth(depth)
        shape = (self.rows, self.cols, self.channels)
        if data is None:
            self.data = np.zeros(shape, dtype=self.depth.dtype)
        else:
            array = np.asarray(data)
            if array.size != self.rows * self.cols * self.channels:
                raise ValueError(
                    f"data holds {array.size} values, image needs "
                    f"{self.rows * self.cols * self.channels}"
                )
            self.data = _cast(array, self.depth).reshape(shape).copy()

    @classmethod
    def from_array(cls, array, depth=None):
        """Build an image from a 2-D (gray) or 3-D (rows, cols, channels) array."""
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        elif array.ndim != 3:
            raise ValueError(f"expected a 2-D or 3-D array, got {array.ndim}-D")
        if depth is None:
            depth = Depth.from_dtype(array.dtype)
        rows, cols, channels = array.shape
        return cls(rows, cols, channels, depth, array)

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.rows, self.cols, self.channels)

    def convert(self, depth) -> "Image":
        """Return a copy with elements converted to ``depth``.

        Conversion to 8U saturates to [0, 255]; other conversions cast
        directly, truncating fractions toward zero for integer depths.
        """
        depth = Depth(depth)
        return Image(self.rows, self.cols, self.channels, depth, self.data)

    def copy(self) -> "Image":
        return Image(self.rows, self.cols, self.channels, self.depth, self.data)

    def fill(self, value) -> "Image":
        """Set every element to ``value``; returns the image itself."""
        self.data[...] = _cast(np.asarray(value), self.depth)
        return self

    def randomize(self, low, high, rng=None) -> "Image":
        """Fill with random values drawn like :func:`rand_value`."""
        self.data[...] = _random_block(self.depth, low, high, rng, self.shape)
        return self

    def info(self) -> str:
        """One-line description such as ``[ 512 x 512 x 3 ]  8U``."""
        return (
            f"[ {self.rows} x {self.cols} x {self.channels} ] "
            f"{self.depth.value:>3}"
        )

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.depth is other.depth
            and self.shape == other.shape
            and bool(np.array_equal(self.data, other.data))
        )

    def __repr__(self) -> str:
        return f"Image({self.info()})"