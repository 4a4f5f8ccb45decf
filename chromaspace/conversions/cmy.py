from ..types.color_types import Color3, Color4, ColorInput, element_to_list
from ..utils.linalg import min3


def RGB_to_CMY(rgb: ColorInput) -> Color3:
    """``1 - RGB`` per channel."""
    r, g, b = element_to_list(rgb)
    return [1 - r, 1 - g, 1 - b]


def CMY_to_RGB(cmy: ColorInput) -> Color3:
    c, m, y = element_to_list(cmy)
    return [1 - c, 1 - m, 1 - y]


def CMY_to_CMYK(cmy: ColorInput) -> Color4:
    """
    Pull the shared component out as black.

    ``K = min(C, M, Y)`` is subtracted from each channel. This is the naive
    under-colour removal model and does not describe any real ink set.
    """
    c, m, y = element_to_list(cmy)
    k = min3(c, m, y)
    return [c - k, m - k, y - k, k]


def CMYK_to_CMY(cmyk: ColorInput) -> Color3:
    c, m, y, k = element_to_list(cmyk, channels=4)
    return [c + k, m + k, y + k]
