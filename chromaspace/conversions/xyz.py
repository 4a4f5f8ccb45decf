from typing import Optional, Sequence, Union

from ..tables.rgb_spaces import RGBSpace, as_rgb_space
from ..tables.white_points import lookup_white_point
from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import vec_times_mat
from .gamma import RGB_to_linear_RGB, linear_RGB_to_RGB


def RGB_to_XYZ(rgb: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    """Linearize, then apply the working space's RGB-to-XYZ matrix."""
    s = as_rgb_space(space)
    return vec_times_mat(RGB_to_linear_RGB(rgb, s), s.m)


def XYZ_to_RGB(xyz: ColorInput, space: Union[str, RGBSpace, None] = None) -> Color3:
    """Apply the working space's XYZ-to-RGB matrix, then gamma-encode."""
    s = as_rgb_space(space)
    return linear_RGB_to_RGB(vec_times_mat(element_to_list(xyz), s.m_inv), s)


def XYZ_to_xyY(xyz: ColorInput, xyz_white: Optional[Sequence[float]] = None) -> Color3:
    """
    XYZ to chromaticity plus luminance.

    When ``X + Y + Z == 0`` the chromaticity of the reference white is returned
    (D65 if no white is given).
    """
    X, Y, Z = element_to_list(xyz)
    total = X + Y + Z
    if total != 0:
        return [X / total, Y / total, Y]
    Xw, Yw, Zw = xyz_white if xyz_white is not None else lookup_white_point(None).xyz
    total_w = Xw + Yw + Zw
    return [Xw / total_w, Yw / total_w, Y]


def xyY_to_XYZ(xyy: ColorInput) -> Color3:
    """
    Chromaticity plus luminance to XYZ.

    ``y == 0`` maps to black; that edge is not invertible.
    """
    x, y, Y = element_to_list(xyy)
    if y == 0:
        return [0.0, 0.0, 0.0]
    return [x * Y / y, Y, (1 - x - y) * Y / y]
