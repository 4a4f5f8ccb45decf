from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import max3, min3
from .to_hsv import rgb_hue


def RGB_to_HSL(rgb: ColorInput) -> Color3:
    """
    Convert RGB to HSL.

    Args:
        rgb: RGB, nominally in [0, 1]

    Returns:
        [hue in degrees [0, 360), saturation, lightness]

    Saturation divides by ``max + min`` when ``L <= 0.5`` and by ``2 - max - min``
    otherwise; achromatic input yields ``[0, 0, L]``.
    """
    r, g, b = element_to_list(rgb)
    max_c = max3(r, g, b)
    min_c = min3(r, g, b)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return [0.0, 0.0, lightness]

    if lightness <= 0.5:
        denom = max_c + min_c
    else:
        denom = 2 - max_c - min_c
    saturation = delta / denom if denom != 0 else 0.0

    return [rgb_hue(r, g, b, max_c, delta), saturation, lightness]
