import numpy as np

from chromaspace.conversions import RGB_to_linear_RGB, linear_RGB_to_RGB
from chromaspace.conversions.gamma import (
    LINEAR_TO_SRGB_TH,
    SRGB_TO_LINEAR_TH,
    linear_to_srgb,
    srgb_to_linear,
)

tolerance = 1e-12
channel_grid = np.linspace(-1.5, 1.5, 61)


def test_srgb_linear_segment():
    assert srgb_to_linear(SRGB_TO_LINEAR_TH) == SRGB_TO_LINEAR_TH / 12.92
    assert linear_to_srgb(LINEAR_TO_SRGB_TH) == 12.92 * LINEAR_TO_SRGB_TH
    assert srgb_to_linear(0.0) == 0.0


def test_srgb_endpoints():
    assert abs(srgb_to_linear(1.0) - 1.0) < tolerance
    assert abs(linear_to_srgb(1.0) - 1.0) < tolerance


def test_srgb_curve_is_continuous_at_breakpoints():
    eps = 1e-9
    assert abs(srgb_to_linear(SRGB_TO_LINEAR_TH + eps) - srgb_to_linear(SRGB_TO_LINEAR_TH)) < 1e-6
    assert abs(linear_to_srgb(LINEAR_TO_SRGB_TH + eps) - linear_to_srgb(LINEAR_TO_SRGB_TH)) < 1e-6


def test_srgb_is_odd_symmetric():
    for c in channel_grid:
        assert srgb_to_linear(-c) == -srgb_to_linear(c)
        assert linear_to_srgb(-c) == -linear_to_srgb(c)


def test_srgb_round_trip():
    for c in channel_grid:
        assert abs(linear_to_srgb(srgb_to_linear(c)) - c) < tolerance


def test_power_law_spaces():
    assert RGB_to_linear_RGB([0.5, 0.5, 0.5], "NTSC") == [0.5 ** 2.2] * 3
    assert RGB_to_linear_RGB([0.5, 0.5, 0.5], "Apple RGB") == [0.5 ** 1.8] * 3


def test_power_law_handles_negative_channels():
    lin = RGB_to_linear_RGB([-0.5, 0.0, 0.5], "NTSC")
    assert lin[0] == -(0.5 ** 2.2)
    assert lin[1] == 0.0
    assert lin[2] == 0.5 ** 2.2


def test_round_trip_every_space():
    rgb = [0.8, -0.2, 0.35]
    for space in ("sRGB", "NTSC", "ProPhoto", "CIE", "Adobe"):
        back = linear_RGB_to_RGB(RGB_to_linear_RGB(rgb, space), space)
        assert np.allclose(back, rgb, atol=tolerance), space


def test_default_space_is_srgb():
    assert RGB_to_linear_RGB([0.5, 0.2, 0.9]) == RGB_to_linear_RGB([0.5, 0.2, 0.9], "sRGB")
