"""
Broadcast luma/chroma encodings.

Both take and return non-linear Rec. 601 (NTSC) RGB. The matrices are laid out
for the column-vector product ``M @ rgb``.

Reference: http://www.poynton.com/notes/colour_and_gamma/ColorFAQ.txt
"""
from ..types.color_types import Color3, ColorInput, element_to_list
from ..utils.linalg import add3, mat_times_vec

YPBPR_MATRIX = (
    (0.299, 0.587, 0.114),
    (-0.168736, -0.331264, 0.5),
    (0.5, -0.418688, -0.081312),
)
YPBPR_INVERSE = (
    (1.0, 0.0, 1.402),
    (1.0, -0.344136, -0.714136),
    (1.0, 1.772, 0.0),
)

# 8-bit studio range: Y in [16, 235], Cb/Cr in [16, 240]
YCBCR_MATRIX = (
    (65.481, 128.553, 24.966),
    (-37.797, -74.203, 112.0),
    (112.0, -93.786, -18.214),
)
YCBCR_INVERSE = (
    (0.00456621, 0.0, 0.00625893),
    (0.00456621, -0.00153632, -0.00318811),
    (0.00456621, 0.00791071, 0.0),
)
YCBCR_OFFSET = (16.0, 128.0, 128.0)


def RGB_to_YPbPr(rgb: ColorInput) -> Color3:
    return mat_times_vec(YPBPR_MATRIX, element_to_list(rgb))


def YPbPr_to_RGB(ypbpr: ColorInput) -> Color3:
    return mat_times_vec(YPBPR_INVERSE, element_to_list(ypbpr))


def RGB_to_YCbCr(rgb: ColorInput) -> Color3:
    """
    Convert NTSC RGB to 8-bit studio-range YCbCr.

    The result is not clipped; out-of-gamut input gives values outside 0..255.
    """
    return add3(mat_times_vec(YCBCR_MATRIX, element_to_list(rgb)), YCBCR_OFFSET)


def YCbCr_to_RGB(ycbcr: ColorInput) -> Color3:
    centered = add3(element_to_list(ycbcr), [-o for o in YCBCR_OFFSET])
    return mat_times_vec(YCBCR_INVERSE, centered)
