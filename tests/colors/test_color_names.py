import numpy as np
import pytest

from chromaspace import Color
from chromaspace.colors.names import HTML_COLORS, lookup_color_name, normalize_name, split_channels

tolerance = 1e-12


def test_html_names():
    assert len(HTML_COLORS) == 16
    assert lookup_color_name("red") == [1.0, 0.0, 0.0]
    assert lookup_color_name("Navy") == [0.0, 0.0, 128 / 255]
    assert lookup_color_name("  Sil-ver ") == [192 / 255] * 3


def test_unknown_name():
    assert lookup_color_name("no such color") is None
    assert lookup_color_name("") is None
    assert lookup_color_name("#12345") is None
    assert lookup_color_name("#xyz") is None


def test_normalize():
    assert normalize_name("Dark Olive_Green!") == "darkolivegreen!"
    assert normalize_name("#FA4") == "#fa4"


def test_hex_codes_of_every_width():
    for code in ("#f00", "#ff0000", "#fff000000", "#ffff00000000"):
        assert np.allclose(lookup_color_name(code), [1, 0, 0], atol=tolerance), code
    assert np.allclose(lookup_color_name("#fa4"), [1.0, 10 / 15, 4 / 15], atol=tolerance)


def test_cmyk_code():
    assert np.allclose(lookup_color_name("%0000"), [1, 1, 1], atol=tolerance)
    assert np.allclose(lookup_color_name("%000f"), [0, 0, 0], atol=tolerance)
    assert np.allclose(lookup_color_name("%0ff0"), [1, 0, 0], atol=tolerance)


def test_hsv_and_hsl_codes():
    assert np.allclose(lookup_color_name("!0ff"), [1, 0, 0], atol=tolerance)
    assert np.allclose(lookup_color_name("&0f8"), [1, 1 / 15, 1 / 15], atol=tolerance)
    green = lookup_color_name("!55ffff")
    assert np.allclose(green, [0, 1, 0], atol=tolerance)


def test_split_channels():
    assert split_channels("0f8", 3) == [0.0, 1.0, 8 / 15]
    assert split_channels("0f8f", 3) is None
    assert split_channels("00000000000000000000", 4) is None


def test_from_name():
    color = Color.from_name("teal", space="sRGB")
    assert color.as_RGB255() == [0, 128, 128]


def test_from_name_custom_lookup():
    color = Color.from_name("brand", lookup={"brand": [0.1, 0.2, 0.3]}.get, space="sRGB")
    assert np.allclose(color.as_RGB(), [0.1, 0.2, 0.3], atol=1e-9)


def test_from_name_unknown():
    with pytest.raises(KeyError):
        Color.from_name("no such color", space="sRGB")
