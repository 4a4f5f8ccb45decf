"""Cartesian <-> cylindrical helpers shared by LCHab and LCHuv."""
import math
from typing import Tuple

from ..types.color_types import Color3, ColorInput, element_to_list

HUE_MAX = 360.0


def to_polar(first: float, second: float) -> Tuple[float, float]:
    """Return chroma and hue in degrees, hue in [0, 360)."""
    chroma = math.hypot(first, second)
    hue = math.degrees(math.atan2(second, first))
    if hue < 0:
        hue += HUE_MAX
    if hue >= HUE_MAX:
        hue -= HUE_MAX
    return chroma, hue


def from_polar(chroma: float, hue: float) -> Tuple[float, float]:
    """
    Recover the signed pair from chroma and hue in degrees.

    The magnitude of the first component comes from ``tan(H)``; the signs follow the
    quadrant: first is negated for 90 < H < 270, second for H > 180.
    """
    hue = hue % HUE_MAX
    th = math.tan(math.radians(hue))
    first = chroma / math.sqrt(th * th + 1)
    # rounding can push C^2 - first^2 a hair below zero
    second = math.sqrt(max(chroma * chroma - first * first, 0.0))
    if 90.0 < hue < 270.0:
        first = -first
    if hue > 180.0:
        second = -second
    return first, second


def cartesian_to_lch(value: ColorInput) -> Color3:
    L, first, second = element_to_list(value)
    C, H = to_polar(first, second)
    return [L, C, H]


def lch_to_cartesian(value: ColorInput) -> Color3:
    L, C, H = element_to_list(value)
    first, second = from_polar(C, H)
    return [L, first, second]
