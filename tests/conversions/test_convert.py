import numpy as np
import pytest

from chromaspace.conversions import SPACE_CAPABILITIES, convert
from chromaspace.errors import ContextDefaultWarning, UnsupportedConversionError
from chromaspace.types.color_types import ColorSpace, parse_space

tolerance = 1e-6


def test_every_space_has_a_capability():
    assert set(SPACE_CAPABILITIES) == set(ColorSpace)
    for cap in SPACE_CAPABILITIES.values():
        assert callable(cap.to_xyz)
        assert callable(cap.from_xyz)


def test_parse_space_case_insensitive():
    assert parse_space("Lab") is ColorSpace.LAB
    assert parse_space("lab") is ColorSpace.LAB
    assert parse_space("XYY") is ColorSpace.XYY
    assert parse_space("ycbcr") is ColorSpace.YCBCR
    assert parse_space(ColorSpace.HSV) is ColorSpace.HSV


def test_convert_rgb_to_hsv():
    h, s, v = convert([1, 0, 0], "rgb", "hsv", space="sRGB")
    assert min(h, 360 - h) < tolerance
    assert abs(s - 1) < tolerance
    assert abs(v - 1) < tolerance


def test_convert_srgb_red_to_xyz():
    xyz = convert([1, 0, 0], ColorSpace.RGB, ColorSpace.XYZ, space="sRGB")
    assert np.allclose(xyz, [0.4124, 0.2127, 0.0193], atol=1e-3)


def test_same_space_returns_copy():
    value = [0.1, 0.2, 0.3]
    out = convert(value, "Lab", "Lab")
    assert out == value
    assert out is not value


def test_cmyk_has_four_channels():
    cmyk = convert([1, 0, 0], "RGB", "CMYK", space="NTSC")
    assert len(cmyk) == 4
    assert np.allclose(cmyk, [0, 1, 1, 0], atol=tolerance)


def test_white_point_override_changes_lab():
    xyz = [0.3, 0.3, 0.3]
    d65 = convert(xyz, "XYZ", "Lab", space="sRGB")
    d50 = convert(xyz, "XYZ", "Lab", space="sRGB", white_point="D50")
    assert not np.allclose(d65, d50)


def test_white_point_does_not_adapt_rgb():
    xyz = convert([1, 0, 0], "RGB", "XYZ", space="sRGB", white_point="D50")
    assert np.allclose(xyz, [0.412424, 0.212656, 0.019332], atol=tolerance)
    back = convert(xyz, "XYZ", "RGB", space="sRGB", white_point="D50")
    assert np.allclose(back, [1, 0, 0], atol=tolerance)


def test_broadcast_spaces_use_ntsc_matrices():
    ypbpr = convert([0.3, 0.6, 0.9], "RGB", "YPbPr", space="sRGB")
    assert np.allclose(ypbpr, [0.563680, 0.158337, -0.092138], atol=1e-5)


def test_unset_context_warns():
    with pytest.warns(ContextDefaultWarning):
        convert([0.5, 0.5, 0.5], "RGB", "XYZ")


@pytest.mark.parametrize("name", ["YUV", "YIQ", "YCC", "yuv"])
def test_unimplemented_spaces(name):
    with pytest.raises(UnsupportedConversionError):
        convert([0.5, 0.5, 0.5], "RGB", name, space="sRGB")
    with pytest.raises(NotImplementedError):
        convert([0.5, 0.5, 0.5], name, "RGB", space="sRGB")


def test_unknown_space_is_value_error():
    with pytest.raises(ValueError):
        convert([0.5, 0.5, 0.5], "RGB", "Munsell")


def test_wrong_arity_is_value_error():
    with pytest.raises(ValueError):
        convert([0.5, 0.5], "RGB", "XYZ", space="sRGB")
    with pytest.raises(ValueError):
        convert([0.5, 0.5, 0.5], "CMYK", "RGB", space="sRGB")
