from typing import Sequence, Tuple

from ..types.color_types import Color3, ColorInput, element_to_list
from .lab import LAB_EPSILON, LAB_KAPPA
from .polar import cartesian_to_lch, lch_to_cartesian


def _uv_prime(X: float, Y: float, Z: float) -> Tuple[float, float]:
    denom = X + 15 * Y + 3 * Z
    return 4 * X / denom, 9 * Y / denom


def XYZ_to_Luv(xyz: ColorInput, xyz_white: Sequence[float]) -> Color3:
    """
    Convert XYZ to CIELUV relative to a reference white.

    Black (or any XYZ whose u'v' denominator vanishes) takes the white's own
    chromaticity, so u = v = 0.
    """
    X, Y, Z = element_to_list(xyz)
    Xw, Yw, Zw = xyz_white

    yr = Y / Yw
    if yr > LAB_EPSILON:
        L = 116 * yr ** (1 / 3) - 16
    else:
        L = LAB_KAPPA * yr

    up_w, vp_w = _uv_prime(Xw, Yw, Zw)
    if X + 15 * Y + 3 * Z != 0:
        up, vp = _uv_prime(X, Y, Z)
    else:
        up, vp = up_w, vp_w

    return [L, 13 * L * (up - up_w), 13 * L * (vp - vp_w)]


def Luv_to_XYZ(luv: ColorInput, xyz_white: Sequence[float]) -> Color3:
    """Convert CIELUV back to XYZ. ``L == 0`` maps to black."""
    L, u, v = element_to_list(luv)
    Xw, Yw, Zw = xyz_white

    if L > LAB_KAPPA * LAB_EPSILON:
        Y = ((L + 16) / 116) ** 3
    else:
        Y = L / LAB_KAPPA

    up_w, vp_w = _uv_prime(Xw, Yw, Zw)
    u_denom = u + 13 * L * up_w
    v_denom = v + 13 * L * vp_w
    if L == 0 or u_denom == 0 or v_denom == 0:
        return [0.0, Y, 0.0]

    a = (52 * L / u_denom - 1) / 3
    b = -5 * Y
    c = -1 / 3
    d = Y * (39 * L / v_denom - 5)

    X = (d - b) / (a - c)
    Z = X * a + b
    return [X, Y, Z]


def Luv_to_LCHuv(luv: ColorInput) -> Color3:
    """[L, u, v] -> [L, C, H] with H in degrees, [0, 360)."""
    return cartesian_to_lch(luv)


def LCHuv_to_Luv(lch: ColorInput) -> Color3:
    """[L, C, H] -> [L, u, v]."""
    return lch_to_cartesian(lch)
