from typing import Sequence, Union

from ..tables.rgb_spaces import RGBSpace, as_rgb_space
from ..types.color_types import Color3, ColorInput, element_to_list
from .polar import cartesian_to_lch, lch_to_cartesian
from .xyz import RGB_to_XYZ, XYZ_to_RGB

# CIE breakpoint constants; kept at the published 4-digit values so that
# forward and inverse branches agree
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t + 16) / 116


def _lab_f_inv(f: float) -> float:
    cube = f ** 3
    if cube > LAB_EPSILON:
        return cube
    return (116 * f - 16) / LAB_KAPPA


def XYZ_to_Lab(xyz: ColorInput, xyz_white: Sequence[float]) -> Color3:
    """
    Convert XYZ to CIELAB relative to a reference white.

    Args:
        xyz: CIE XYZ
        xyz_white: XYZ of the reference white

    Returns:
        [L, a, b]
    """
    X, Y, Z = element_to_list(xyz)
    Xw, Yw, Zw = xyz_white
    fx = _lab_f(X / Xw)
    fy = _lab_f(Y / Yw)
    fz = _lab_f(Z / Zw)
    return [116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)]


def Lab_to_XYZ(lab: ColorInput, xyz_white: Sequence[float]) -> Color3:
    """Convert CIELAB back to XYZ relative to a reference white."""
    L, a, b = element_to_list(lab)
    Xw, Yw, Zw = xyz_white

    if L > LAB_KAPPA * LAB_EPSILON:
        yr = ((L + 16) / 116) ** 3
    else:
        yr = L / LAB_KAPPA
    if yr > LAB_EPSILON:
        fy = (L + 16) / 116
    else:
        fy = (LAB_KAPPA * yr + 16) / 116

    fx = a / 500 + fy
    fz = fy - b / 200
    return [_lab_f_inv(fx) * Xw, yr * Yw, _lab_f_inv(fz) * Zw]


def Lab_to_LCHab(lab: ColorInput) -> Color3:
    """[L, a, b] -> [L, C, H] with H in degrees, [0, 360)."""
    return cartesian_to_lch(lab)


def LCHab_to_Lab(lch: ColorInput) -> Color3:
    """[L, C, H] -> [L, a, b]."""
    return lch_to_cartesian(lch)


def RGB_to_Lab(rgb: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    """RGB straight to Lab, using the working space's RGB white (1, 1, 1) as reference."""
    s = as_rgb_space(space)
    return XYZ_to_Lab(RGB_to_XYZ(rgb, s), RGB_to_XYZ([1.0, 1.0, 1.0], s))


def Lab_to_RGB(lab: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    s = as_rgb_space(space)
    return XYZ_to_RGB(Lab_to_XYZ(lab, RGB_to_XYZ([1.0, 1.0, 1.0], s)), s)
