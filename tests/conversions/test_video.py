import numpy as np

from chromaspace.conversions import RGB_to_YCbCr, RGB_to_YPbPr, YCbCr_to_RGB, YPbPr_to_RGB
from chromaspace.conversions.video import YCBCR_OFFSET
from chromaspace.samples.colors import ROUND_TRIP_RGB

tolerance = 1e-9
round_trip_tolerance = 5e-6


def test_ypbpr_white_and_black():
    assert np.allclose(RGB_to_YPbPr([1, 1, 1]), [1.0, 0.0, 0.0], atol=tolerance)
    assert RGB_to_YPbPr([0, 0, 0]) == [0.0, 0.0, 0.0]


def test_ypbpr_red():
    assert np.allclose(RGB_to_YPbPr([1, 0, 0]), [0.299, -0.168736, 0.5], atol=tolerance)


def test_ycbcr_studio_range():
    assert RGB_to_YCbCr([0, 0, 0]) == list(YCBCR_OFFSET)
    assert np.allclose(RGB_to_YCbCr([1, 1, 1]), [235.0, 128.0, 128.0], atol=tolerance)


def test_ycbcr_is_not_clipped():
    y, cb, cr = RGB_to_YCbCr([2, 2, 2])
    assert y > 255


def test_round_trips():
    for rgb in ROUND_TRIP_RGB:
        back = YPbPr_to_RGB(RGB_to_YPbPr(rgb))
        assert np.abs(np.subtract(back, rgb)).sum() < round_trip_tolerance, rgb
        back = YCbCr_to_RGB(RGB_to_YCbCr(rgb))
        assert np.abs(np.subtract(back, rgb)).sum() < round_trip_tolerance, rgb
