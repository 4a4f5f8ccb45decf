from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import max3, min3

HUE_MAX = 360.0
HUE_SECTOR = 60.0


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hexagonal hue in degrees, [0, 360). ``delta`` must be non-zero."""
    if r == max_c:
        h = (g - b) / delta
    elif g == max_c:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta
    h *= HUE_SECTOR
    if h < 0:
        h += HUE_MAX
    # -1e-15 + 360 rounds to 360.0
    if h >= HUE_MAX:
        h -= HUE_MAX
    return h


def RGB_to_HSV(rgb: ColorInput) -> Color3:
    """
    Convert RGB to HSV.

    Args:
        rgb: RGB, nominally in [0, 1]

    Returns:
        [hue in degrees [0, 360), saturation, value]

    Achromatic input (max == min) has hue and saturation defined as 0.
    """
    r, g, b = element_to_list(rgb)
    max_c = max3(r, g, b)
    min_c = min3(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return [0.0, 0.0, max_c]
    # out-of-gamut input can put a non-zero spread under a zero maximum
    s = delta / max_c if max_c != 0 else 0.0
    return [rgb_hue(r, g, b, max_c, delta), s, max_c]
