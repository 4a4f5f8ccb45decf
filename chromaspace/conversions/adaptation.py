"""
Bradford chromatic adaptation.

``BRADFORD_MA`` maps XYZ into a cone-response basis and ``BRADFORD_MA_INV`` maps
back. The inverse is the published fitted approximation rather than the exact
matrix inverse, so adapting there and back again is only close to the identity.

Reference: http://www.brucelindbloom.com/Eqn_ChromAdapt.html
"""
from typing import Sequence

from ..tables.white_points import lookup_white_point
from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import mat_times_mat, vec_times_mat

BRADFORD_MA = (
    (0.8951, -0.7502, 0.0389),
    (0.2664, 1.7135, -0.0685),
    (-0.1614, 0.0367, 1.0296),
)
BRADFORD_MA_INV = (
    (0.986993, 0.432305, -0.008529),
    (-0.147054, 0.518360, 0.040043),
    (0.159963, 0.049291, 0.968487),
)


def adaptation_matrix(white_old: Sequence[float], white_new: Sequence[float]):
    """Combined 3x3 for the row-vector product ``xyz @ M``."""
    cone_old = vec_times_mat(white_old, BRADFORD_MA)
    cone_new = vec_times_mat(white_new, BRADFORD_MA)
    q = [
        [cone_new[0] / cone_old[0], 0.0, 0.0],
        [0.0, cone_new[1] / cone_old[1], 0.0],
        [0.0, 0.0, cone_new[2] / cone_old[2]],
    ]
    return mat_times_mat(BRADFORD_MA, mat_times_mat(q, BRADFORD_MA_INV))


def adapt_white_point(
    xyz: ColorInput,
    white_old: Sequence[float],
    white_new: Sequence[float],
) -> Color3:
    """
    Re-express ``xyz`` measured under ``white_old`` as seen under ``white_new``.

    Args:
        xyz: CIE XYZ relative to the old white
        white_old: XYZ of the old reference white
        white_new: XYZ of the new reference white

    Returns:
        CIE XYZ relative to the new white
    """
    return vec_times_mat(element_to_list(xyz), adaptation_matrix(white_old, white_new))


def rebase_white_point(xyz: ColorInput, old: str, new: str) -> Color3:
    """
    Adapt between two named white points.

    Identical names return the input values unchanged.
    """
    xyz = element_to_list(xyz)
    old_wp = lookup_white_point(old)
    new_wp = lookup_white_point(new)
    if old_wp.name == new_wp.name:
        return xyz
    return adapt_white_point(xyz, old_wp.xyz, new_wp.xyz)
