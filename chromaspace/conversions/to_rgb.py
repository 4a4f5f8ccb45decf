import math

from ..types.color_types import Color3, ColorInput, element_to_list
from .to_hsv import HUE_MAX, HUE_SECTOR


def HSV_to_RGB(hsv: ColorInput) -> Color3:
    """
    Convert HSV to RGB.

    Args:
        hsv: [hue in degrees, saturation, value]

    Returns:
        [r, g, b]

    Hue is wrapped into [0, 360) and split into six sectors by ``floor(H / 60)``.
    Zero saturation returns the grey ``[v, v, v]`` whatever the hue.
    """
    h, s, v = element_to_list(hsv)
    if s == 0:
        return [v, v, v]

    h = (h % HUE_MAX) / HUE_SECTOR
    i = math.floor(h)
    f = h - i
    # h % 360 can round up to exactly 360 for tiny negative hues
    i %= 6
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if i == 0:
        return [v, t, p]
    elif i == 1:
        return [q, v, p]
    elif i == 2:
        return [p, v, t]
    elif i == 3:
        return [p, q, v]
    elif i == 4:
        return [t, p, v]
    else:
        return [v, p, q]


def _hue_segment(p1: float, p2: float, h: float) -> float:
    """Piecewise-linear channel ramp for HSL; ``h`` is wrapped into [0, 360)."""
    h = h % HUE_MAX
    if h < 60:
        return p1 + (p2 - p1) * h / 60
    elif h < 180:
        return p2
    elif h < 240:
        return p1 + (p2 - p1) * (240 - h) / 60
    else:
        return p1


def HSL_to_RGB(hsl: ColorInput) -> Color3:
    """
    Convert HSL to RGB.

    Args:
        hsl: [hue in degrees, saturation, lightness]

    Returns:
        [r, g, b]
    """
    h, s, l = element_to_list(hsl)
    if s == 0:
        return [l, l, l]

    if l <= 0.5:
        p2 = l * (1 + s)
    else:
        p2 = l + s - l * s
    p1 = 2 * l - p2

    return [
        _hue_segment(p1, p2, h + 120),
        _hue_segment(p1, p2, h),
        _hue_segment(p1, p2, h - 120),
    ]
