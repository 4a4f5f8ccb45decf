"""
Read-only registries of RGB working spaces and white points.

Both registries are built once at import and exposed as ``MappingProxyType``
views; lookups fall back to sRGB / D65 with an ``UnknownNameWarning``.
"""

from .white_points import (
    DEFAULT_WHITE_POINT,
    WHITE_POINTS,
    WhitePoint,
    list_white_points,
    lookup_white_point,
)
from .rgb_spaces import (
    DEFAULT_RGB_SPACE,
    RGB_SPACES,
    RGB_SPACE_ALIASES,
    RGBSpace,
    as_rgb_space,
    list_rgb_spaces,
    lookup_rgb_space,
)

__all__ = [
    'DEFAULT_WHITE_POINT',
    'WHITE_POINTS',
    'WhitePoint',
    'list_white_points',
    'lookup_white_point',
    'DEFAULT_RGB_SPACE',
    'RGB_SPACES',
    'RGB_SPACE_ALIASES',
    'RGBSpace',
    'as_rgb_space',
    'list_rgb_spaces',
    'lookup_rgb_space',
]
