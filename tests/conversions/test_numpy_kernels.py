import numpy as np

from chromavalue.conversions import (
    hsv_to_rgb, rgb_to_hsv, hsv_to_hsl, hsl_to_hsv,
    np_hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_hsl, np_hsl_to_hsv,
    np_round_half_up,
)
from chromavalue.notation import parse_hsl_string
from ..samples import samples_hsv_rgb, samples_rgb_hsv, hsv, rgb, hsl

hsv_grid = np.array(
    [(h, s, v) for h in range(0, 360, 15) for s in range(0, 101, 25) for v in range(0, 101, 10)]
)
rgb_grid = np.array(
    [(r, g, b) for r in range(0, 256, 17) for g in range(0, 256, 17) for b in range(0, 256, 17)]
)


def test_np_round_half_up():
    result = np_round_half_up(np.array([0.5, 1.5, 2.5, -0.5, 2.49]))
    assert result.tolist() == [1, 2, 3, 0, 2]


def test_np_hsv_to_rgb_samples():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_np_rgb_to_hsv_samples():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_np_hsv_to_rgb_matches_scalar():
    result = np_hsv_to_rgb(hsv_grid[..., 0], hsv_grid[..., 1], hsv_grid[..., 2])
    assert result.shape == (len(hsv_grid), 3)
    for (h, s, v), row in zip(hsv_grid.tolist(), result.tolist()):
        assert row == list(hsv_to_rgb(hsv(h, s, v)).values())


def test_np_rgb_to_hsv_matches_scalar():
    result = np_rgb_to_hsv(rgb_grid[..., 0], rgb_grid[..., 1], rgb_grid[..., 2])
    for (r, g, b), row in zip(rgb_grid.tolist(), result.tolist()):
        assert row == list(rgb_to_hsv(rgb(r, g, b)).values())


def test_np_hsv_to_hsl_matches_scalar():
    result = np_hsv_to_hsl(hsv_grid[..., 0], hsv_grid[..., 1], hsv_grid[..., 2])
    for (h, s, v), row in zip(hsv_grid.tolist(), result.tolist()):
        assert row == list(hsv_to_hsl(hsv(h, s, v)).values())


def test_np_hsl_to_hsv_matches_scalar():
    # same grid read as (h, s, l)
    result = np_hsl_to_hsv(hsv_grid[..., 0], hsv_grid[..., 1], hsv_grid[..., 2])
    for (h, s, l), row in zip(hsv_grid.tolist(), result.tolist()):
        assert row == list(hsl_to_hsv(hsl(h, s, l)).values())


def test_np_kernels_broadcast_scalars():
    result = np_hsv_to_rgb(np.array([0, 120, 240]), 100, 100)
    assert result.tolist() == [[255, 0, 0], [0, 255, 0], [0, 0, 255]]

    single = np_hsv_to_rgb(0, 100, 100)
    assert single.shape == (3,)
    assert single.tolist() == [255, 0, 0]


def test_np_hsl_kernels_pass_fractional_hue_through():
    hues = np.array([0.25, 137.5, 200.75, 359.5])
    to_hsv = np_hsl_to_hsv(hues, 50, 25)
    to_hsl = np_hsv_to_hsl(hues, 50, 25)
    for h, hsv_row, hsl_row in zip(hues.tolist(), to_hsv.tolist(), to_hsl.tolist()):
        assert hsv_row == list(hsl_to_hsv(hsl(h, 50, 25)).values())
        assert hsl_row == list(hsv_to_hsl(hsv(h, 50, 25)).values())


def test_np_hsl_to_hsv_matches_parsed_decimal_hue():
    parsed = parse_hsl_string("hsl(137.5, 50%, 25%)")
    scalar = hsl_to_hsv(parsed)
    assert scalar == {"h": 137.5, "s": 67, "v": 38}
    result = np_hsl_to_hsv(parsed["h"], parsed["s"], parsed["l"])
    assert result.tolist() == [137.5, 67, 38]
