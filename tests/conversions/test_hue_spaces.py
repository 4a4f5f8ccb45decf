import numpy as np
import pytest

from chromaspace.conversions import HSL_to_RGB, HSV_to_RGB, RGB_to_HSL, RGB_to_HSV
from chromaspace.samples.colors import (
    BLACK_HSL, BLACK_HSV, BLACK_RGB,
    BLUE_HSL, BLUE_HSV, BLUE_RGB,
    CYAN_HSL, CYAN_HSV, CYAN_RGB,
    GREEN_HSL, GREEN_HSV, GREEN_RGB,
    MAGENTA_HSL, MAGENTA_HSV, MAGENTA_RGB,
    OFF_GAMUT_RGB,
    RED_HSL, RED_HSV, RED_RGB,
    WHITE_HSL, WHITE_HSV, WHITE_RGB,
    YELLOW_HSL, YELLOW_HSV, YELLOW_RGB,
    get_gray_hsv,
)

tolerance = 1e-12

samples_rgb_hsv = [
    (RED_RGB, RED_HSV),
    (GREEN_RGB, GREEN_HSV),
    (BLUE_RGB, BLUE_HSV),
    (YELLOW_RGB, YELLOW_HSV),
    (MAGENTA_RGB, MAGENTA_HSV),
    (CYAN_RGB, CYAN_HSV),
    (WHITE_RGB, WHITE_HSV),
    (BLACK_RGB, BLACK_HSV),
]

samples_rgb_hsl = [
    (RED_RGB, RED_HSL),
    (GREEN_RGB, GREEN_HSL),
    (BLUE_RGB, BLUE_HSL),
    (YELLOW_RGB, YELLOW_HSL),
    (MAGENTA_RGB, MAGENTA_HSL),
    (CYAN_RGB, CYAN_HSL),
    (WHITE_RGB, WHITE_HSL),
    (BLACK_RGB, BLACK_HSL),
]


def test_rgb_to_hsv_samples():
    for rgb, hsv in samples_rgb_hsv:
        assert np.allclose(RGB_to_HSV(rgb), hsv, atol=tolerance), rgb


def test_hsv_to_rgb_samples():
    for rgb, hsv in samples_rgb_hsv:
        assert np.allclose(HSV_to_RGB(hsv), rgb, atol=tolerance), hsv


def test_rgb_to_hsl_samples():
    for rgb, hsl in samples_rgb_hsl:
        assert np.allclose(RGB_to_HSL(rgb), hsl, atol=tolerance), rgb


def test_hsl_to_rgb_samples():
    for rgb, hsl in samples_rgb_hsl:
        assert np.allclose(HSL_to_RGB(hsl), rgb, atol=tolerance), hsl


def test_pure_red_hsl():
    assert RGB_to_HSL([1, 0, 0]) == [0.0, 1.0, 0.5]


def test_achromatic_boundary():
    for v in np.linspace(0.0, 1.0, 11):
        assert RGB_to_HSV([v, v, v]) == [0.0, 0.0, v]
        assert RGB_to_HSL([v, v, v]) == [0.0, 0.0, v]
        for h in (0.0, 90.0, 180.5, 359.9, 720.0):
            assert HSV_to_RGB(get_gray_hsv(h, v)) == [v, v, v]
            assert HSL_to_RGB([h, 0.0, v]) == [v, v, v]


def test_hue_wraps():
    assert np.allclose(HSV_to_RGB([360.0, 1.0, 1.0]), RED_RGB, atol=tolerance)
    assert np.allclose(HSV_to_RGB([-120.0, 1.0, 1.0]), BLUE_RGB, atol=tolerance)
    assert np.allclose(HSL_to_RGB([480.0, 1.0, 0.5]), GREEN_RGB, atol=tolerance)
    assert np.allclose(HSV_to_RGB([-1e-17, 1.0, 1.0]), RED_RGB, atol=tolerance)


def test_fractional_hue_survives():
    rgb = [0.8, 0.4, 0.2]
    h, s, l = RGB_to_HSL(rgb)
    assert h == pytest.approx(20.0)
    assert np.allclose(HSL_to_RGB([h, s, l]), rgb, atol=tolerance)
    assert np.allclose(HSV_to_RGB(RGB_to_HSV(rgb)), rgb, atol=tolerance)


def test_round_trip_grid():
    for r in np.linspace(0, 1, 6):
        for g in np.linspace(0, 1, 6):
            for b in np.linspace(0, 1, 6):
                rgb = [r, g, b]
                assert np.allclose(HSV_to_RGB(RGB_to_HSV(rgb)), rgb, atol=tolerance), rgb
                assert np.allclose(HSL_to_RGB(RGB_to_HSL(rgb)), rgb, atol=tolerance), rgb


def test_off_gamut_round_trip():
    for rgb in OFF_GAMUT_RGB:
        assert np.allclose(HSV_to_RGB(RGB_to_HSV(rgb)), rgb, atol=tolerance), rgb
        assert np.allclose(HSL_to_RGB(RGB_to_HSL(rgb)), rgb, atol=tolerance), rgb


def test_degenerate_denominators_do_not_raise():
    h, s, v = RGB_to_HSV([0.0, -0.5, 0.0])
    assert s == 0.0
    assert v == 0.0
    h, s, l = RGB_to_HSL([1.5, 0.5, 0.5])
    assert s == 0.0


def test_hue_range():
    for rgb in ([1, 0, 0.0001], [0.2, 0.1, 0.3], [0.5, 1, 0.5]):
        h = RGB_to_HSV(rgb)[0]
        assert 0.0 <= h < 360.0
        assert RGB_to_HSL(rgb)[0] == h
