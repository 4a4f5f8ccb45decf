"""
Chromaspace Color Space Conversions
===================================

Closed-form transforms between CIE XYZ and every supported color space, plus the
stateless ``convert`` dispatcher built on top of them.

All functions take a 3-sequence (4 for CMYK) and return a new list of floats.
Out-of-gamut values are accepted and propagated; nothing is clipped except the
8-bit and hex encodings.

Conversion Functions
--------------------

RGB ↔ XYZ (working-space matrices, gamma):
    RGB_to_XYZ(rgb, space), XYZ_to_RGB(xyz, space)
    RGB_to_linear_RGB(rgb, space), linear_RGB_to_RGB(rgb, space)

CIE spaces (reference white as XYZ):
    XYZ_to_xyY(xyz, xyz_white), xyY_to_XYZ(xyy)
    XYZ_to_Lab(xyz, xyz_white), Lab_to_XYZ(lab, xyz_white)
    XYZ_to_Luv(xyz, xyz_white), Luv_to_XYZ(luv, xyz_white)
    Lab_to_LCHab(lab), LCHab_to_Lab(lch)
    Luv_to_LCHuv(luv), LCHuv_to_Luv(lch)
    RGB_to_Lab(rgb, space), Lab_to_RGB(lab, space)

Hexagonal hue spaces:
    RGB_to_HSV(rgb), HSV_to_RGB(hsv)
    RGB_to_HSL(rgb), HSL_to_RGB(hsl)

Subtractive:
    RGB_to_CMY(rgb), CMY_to_RGB(cmy)
    CMY_to_CMYK(cmy), CMYK_to_CMY(cmyk)

Broadcast (NTSC non-linear RGB):
    RGB_to_YPbPr(rgb), YPbPr_to_RGB(ypbpr)
    RGB_to_YCbCr(rgb), YCbCr_to_RGB(ycbcr)

Encodings:
    RGB_to_RGB255(rgb), RGB255_to_RGB(rgb255)
    RGB_to_RGBhex(rgb), RGBhex_to_RGB(text)

White point adaptation (Bradford):
    adapt_white_point(xyz, white_old, white_new)

High-Level API
--------------
    convert(value, from_space, to_space, space=None, white_point=None)
        Any supported space to any other, through XYZ

Examples
--------
>>> from chromaspace.conversions import RGBhex_to_RGB, RGB_to_HSL
>>> RGBhex_to_RGB("#FF0000")
[1.0, 0.0, 0.0]
>>> RGB_to_HSL([1, 0, 0])
[0.0, 1.0, 0.5]
"""

from .gamma import RGB_to_linear_RGB, linear_RGB_to_RGB
from .xyz import RGB_to_XYZ, XYZ_to_RGB, XYZ_to_xyY, xyY_to_XYZ
from .lab import (
    XYZ_to_Lab,
    Lab_to_XYZ,
    Lab_to_LCHab,
    LCHab_to_Lab,
    RGB_to_Lab,
    Lab_to_RGB,
)
from .luv import XYZ_to_Luv, Luv_to_XYZ, Luv_to_LCHuv, LCHuv_to_Luv
from .to_hsv import RGB_to_HSV
from .to_hsl import RGB_to_HSL
from .to_rgb import HSV_to_RGB, HSL_to_RGB
from .cmy import RGB_to_CMY, CMY_to_RGB, CMY_to_CMYK, CMYK_to_CMY
from .video import RGB_to_YPbPr, YPbPr_to_RGB, RGB_to_YCbCr, YCbCr_to_RGB
from .rgb_formats import RGB_to_RGB255, RGB255_to_RGB, RGB_to_RGBhex, RGBhex_to_RGB
from .adaptation import adapt_white_point, rebase_white_point

# High-level API
from .context import ColorContext
from .wrapper import SPACE_CAPABILITIES, SpaceCapability, convert

__all__ = [
    # RGB ↔ XYZ
    'RGB_to_linear_RGB',
    'linear_RGB_to_RGB',
    'RGB_to_XYZ',
    'XYZ_to_RGB',

    # CIE
    'XYZ_to_xyY',
    'xyY_to_XYZ',
    'XYZ_to_Lab',
    'Lab_to_XYZ',
    'Lab_to_LCHab',
    'LCHab_to_Lab',
    'RGB_to_Lab',
    'Lab_to_RGB',
    'XYZ_to_Luv',
    'Luv_to_XYZ',
    'Luv_to_LCHuv',
    'LCHuv_to_Luv',

    # Hue spaces
    'RGB_to_HSV',
    'RGB_to_HSL',
    'HSV_to_RGB',
    'HSL_to_RGB',

    # Subtractive
    'RGB_to_CMY',
    'CMY_to_RGB',
    'CMY_to_CMYK',
    'CMYK_to_CMY',

    # Broadcast
    'RGB_to_YPbPr',
    'YPbPr_to_RGB',
    'RGB_to_YCbCr',
    'YCbCr_to_RGB',

    # Encodings
    'RGB_to_RGB255',
    'RGB255_to_RGB',
    'RGB_to_RGBhex',
    'RGBhex_to_RGB',

    # Adaptation
    'adapt_white_point',
    'rebase_white_point',

    # High-level API
    'ColorContext',
    'SPACE_CAPABILITIES',
    'SpaceCapability',
    'convert',
]
