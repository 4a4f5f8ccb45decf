import pytest

from chromaspace.conversions import RGB255_to_RGB, RGB_to_RGB255, RGB_to_RGBhex, RGBhex_to_RGB


def test_rgb255():
    assert RGB_to_RGB255([1, 0, 0]) == [255, 0, 0]
    assert RGB_to_RGB255([0.2, 0.4, 0.6]) == [51, 102, 153]


def test_rgb255_clamps():
    assert RGB_to_RGB255([1.5, -0.2, 0.5]) == [255, 0, 128]


def test_rgb255_returns_ints():
    assert all(type(v) is int for v in RGB_to_RGB255([0.3, 0.3, 0.3]))


def test_rgb255_to_rgb():
    assert RGB255_to_RGB([255, 0, 51]) == [1.0, 0.0, 0.2]


def test_hex():
    assert RGB_to_RGBhex([1, 0, 0]) == "FF0000"
    assert RGB_to_RGBhex([1, 0.5, 0]) == "FF8000"
    assert RGB_to_RGBhex([0, 0, 0]) == "000000"


def test_hex_to_rgb():
    assert RGBhex_to_RGB("#FF0000") == [1, 0, 0]
    assert RGBhex_to_RGB("ff0000") == [1.0, 0.0, 0.0]
    assert RGBhex_to_RGB("#000080") == [0.0, 0.0, 128 / 255]


def test_hex_round_trip():
    for text in ("123456", "ABCDEF", "00FF7F"):
        assert RGB_to_RGBhex(RGBhex_to_RGB(text)) == text


@pytest.mark.parametrize("text", ["#FF00", "FF00001", "#GG0000", "", "##FF0000"])
def test_invalid_hex(text):
    with pytest.raises(ValueError):
        RGBhex_to_RGB(text)
