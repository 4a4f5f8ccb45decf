from typing import Union

from ..tables.rgb_spaces import RGBSpace, as_rgb_space
from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import apow

# sRGB transfer curve (IEC 61966-2-1)
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_EXPONENT = 2.4
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308


def srgb_to_linear(c: float) -> float:
    """Linearize one sRGB channel; symmetric about zero for out-of-gamut values."""
    if abs(c) <= SRGB_TO_LINEAR_TH:
        return c / SRGB_SLOPE
    magnitude = ((abs(c) + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_EXPONENT
    return magnitude if c >= 0 else -magnitude


def linear_to_srgb(c: float) -> float:
    """Encode one linear channel with the sRGB curve."""
    if abs(c) <= LINEAR_TO_SRGB_TH:
        return SRGB_SLOPE * c
    magnitude = SRGB_DIVISOR * abs(c) ** (1 / SRGB_EXPONENT) - SRGB_OFFSET
    return magnitude if c >= 0 else -magnitude


def RGB_to_linear_RGB(rgb: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    """
    Remove the working space's gamma encoding.

    Args:
        rgb: Non-linear RGB, nominally in [0, 1]
        space: Working space name or entry (sRGB when None)

    Returns:
        Linear-light RGB
    """
    s = as_rgb_space(space)
    rgb = element_to_list(rgb)
    if s.is_srgb_gamma:
        return [srgb_to_linear(c) for c in rgb]
    return [apow(c, s.gamma) for c in rgb]


def linear_RGB_to_RGB(rgb: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    """Apply the working space's gamma encoding to linear-light RGB."""
    s = as_rgb_space(space)
    rgb = element_to_list(rgb)
    if s.is_srgb_gamma:
        return [linear_to_srgb(c) for c in rgb]
    return [apow(c, 1 / s.gamma) for c in rgb]
