import numpy as np
import pytest

from pxmfilters.filters import (
    bilateral_filter,
    gamma_correction,
    gaussian_filter,
    mean_var,
    non_local_means_filter,
)
from pxmfilters.image import Depth, Image


def _random_image(rows, cols, channels, seed=0):
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=(rows, cols, channels), dtype=np.uint8)
    return Image.from_array(data, Depth.U8)


def test_gamma_keeps_black_and_white():
    img = Image.from_array(np.array([[0, 255]], dtype=np.uint8))
    out = gamma_correction(img, 2.0)
    assert out.data[:, :, 0].tolist() == [[0, 255]]


def test_gamma_is_monotonic_and_brightens():
    ramp = np.arange(256, dtype=np.uint8).reshape(16, 16)
    img = Image.from_array(ramp)
    result = gamma_correction(img, 2.0)
    assert result.shape == (16, 16, 1)
    out = result.data.ravel().astype(int)
    assert int((np.diff(out) < 0).sum()) == 0
    assert int((out < ramp.ravel().astype(int)).sum()) == 0


def test_gamma_keeps_shape_and_depth():
    img = _random_image(4, 5, 3)
    out = gamma_correction(img, 2.2)
    assert out.shape == img.shape
    assert out.depth is Depth.U8


def test_gamma_zero_raises():
    with pytest.raises(ValueError):
        gamma_correction(_random_image(2, 2, 1), 0)


def test_mean_var_constant_image():
    img = Image(3, 4, 3, Depth.U8).fill(7)
    mean, var = mean_var(img)
    assert mean == pytest.approx(7.0)
    assert var == pytest.approx(0.0, abs=1e-9)


def test_mean_var_two_values():
    img = Image.from_array(np.array([[0, 2]], dtype=np.uint8))
    mean, var = mean_var(img)
    assert mean == pytest.approx(1.0)
    assert var == pytest.approx(1.0)


def test_mean_var_empty_raises():
    with pytest.raises(ValueError):
        mean_var(Image(0, 0, 1))


def test_gaussian_radius_zero_is_identity():
    img = _random_image(6, 7, 3)
    assert gaussian_filter(img, 0, 1.0) == img


def test_gaussian_zero_image_stays_zero():
    img = Image(5, 5, 3, Depth.U8)
    out = gaussian_filter(img, 2, 1.0)
    assert not out.data.any()


def test_gaussian_output_within_input_range():
    img = _random_image(8, 8, 3, seed=3)
    out = gaussian_filter(img, 2, 1.5)
    assert out.shape == img.shape
    assert int(out.data.max()) <= int(img.data.max())
    assert int(out.data.min()) >= int(img.data.min()) - 1


def test_gaussian_works_on_gray():
    img = _random_image(5, 5, 1, seed=4)
    out = gaussian_filter(img, 1, 1.0)
    assert out.shape == (5, 5, 1)


def test_gaussian_bad_parameters():
    img = _random_image(3, 3, 3)
    with pytest.raises(ValueError):
        gaussian_filter(img, -1, 1.0)
    with pytest.raises(ValueError):
        gaussian_filter(img, 1, 0.0)


def test_bilateral_radius_zero_is_identity():
    img = _random_image(5, 6, 3, seed=1)
    assert bilateral_filter(img, 0, 16.0, 1.0) == img


def test_bilateral_constant_image_is_unchanged():
    img = Image(6, 6, 3, Depth.U8).fill(100)
    assert bilateral_filter(img, 3, 16.0, 1.0) == img


def test_bilateral_preserves_sharp_edge():
    data = np.zeros((6, 8, 3), dtype=np.uint8)
    data[:, 4:, :] = 255
    img = Image.from_array(data)
    assert bilateral_filter(img, 2, 1.0, 1.0) == img


def test_bilateral_rejects_gray():
    with pytest.raises(ValueError):
        bilateral_filter(_random_image(4, 4, 1), 1, 16.0, 1.0)


def test_nlm_search_radius_zero_is_identity():
    img = _random_image(6, 5, 1, seed=2)
    assert non_local_means_filter(img, 1, 0, 20.0) == img


def test_nlm_constant_image_is_unchanged():
    img = Image(7, 7, 1, Depth.U8).fill(42)
    assert non_local_means_filter(img, 1, 3, 20.0) == img


def test_nlm_output_within_input_range():
    img = _random_image(8, 8, 1, seed=5)
    out = non_local_means_filter(img, 1, 2, 20.0)
    assert out.shape == img.shape
    assert int(out.data.max()) <= int(img.data.max())
    assert int(out.data.min()) >= int(img.data.min())


def test_nlm_rejects_color():
    with pytest.raises(ValueError):
        non_local_means_filter(_random_image(4, 4, 3), 1, 1, 20.0)


def test_nlm_zero_h_raises():
    with pytest.raises(ValueError):
        non_local_means_filter(_random_image(4, 4, 1), 1, 1, 0)