from __future__ import annotations
from enum import Enum
from typing import List, Sequence, Union

from ..errors import UnsupportedConversionError

Scalar = Union[int, float]
Color3 = List[float]
Color4 = List[float]
ColorInput = Sequence[Scalar]
Matrix3x3 = Sequence[Sequence[float]]


class ColorSpace(str, Enum):
    RGB = "RGB"
    XYZ = "XYZ"
    XYY = "xyY"
    LAB = "Lab"
    LCHAB = "LCHab"
    LUV = "Luv"
    LCHUV = "LCHuv"
    HSL = "HSL"
    HSV = "HSV"
    CMY = "CMY"
    CMYK = "CMYK"
    YPBPR = "YPbPr"
    YCBCR = "YCbCr"


# Recognised names with no conversion behind them yet
UNIMPLEMENTED_SPACES = ("YUV", "YIQ", "YCC")

# Sentinel gamma mode for the piecewise sRGB transfer curve
SRGB_GAMMA = "sRGB"
GammaMode = Union[float, str]


def channel_count(space: ColorSpace) -> int:
    """Number of channels a value in ``space`` carries."""
    return 4 if space is ColorSpace.CMYK else 3


def element_to_list(element: ColorInput, channels: int = 3) -> List[float]:
    """
    Coerce a color element to a list of floats, checking its arity.

    Args:
        element: Any sequence of numbers (tuple, list, 1d ndarray)
        channels: Expected number of channels

    Returns:
        List of floats
    """
    values = [float(v) for v in element]
    if len(values) != channels:
        raise ValueError(f"expected {channels} channels, got {len(values)}")
    return values


def parse_space(name: Union[str, ColorSpace]) -> ColorSpace:
    """
    Resolve a color space name to a ``ColorSpace`` member.

    Exact names are tried first, then a case-insensitive match.
    """
    if isinstance(name, ColorSpace):
        return name
    try:
        return ColorSpace(name)
    except ValueError:
        pass
    lowered = str(name).lower()
    for member in ColorSpace:
        if member.value.lower() == lowered:
            return member
    if lowered in {s.lower() for s in UNIMPLEMENTED_SPACES}:
        raise UnsupportedConversionError(name)
    raise ValueError(f"Unknown color space: {name}")
