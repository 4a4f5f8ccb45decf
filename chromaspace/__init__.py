"""Chromaspace: color conversion between RGB working spaces, CIE and video color spaces."""

from .colors.color import Color, DEFAULT_ACCURACY
from .colors.names import ColorNameLookup, lookup_color_name
from .conversions import *  # noqa: F401,F403
from .conversions import __all__ as _conversions_all
from .errors import (
    ChromaspaceError,
    ContextDefaultWarning,
    UnknownNameWarning,
    UnsupportedConversionError,
)
from .tables import (
    DEFAULT_RGB_SPACE,
    DEFAULT_WHITE_POINT,
    RGBSpace,
    WhitePoint,
    list_rgb_spaces,
    list_white_points,
    lookup_rgb_space,
    lookup_white_point,
)
from .types.color_types import ColorSpace

__version__ = "0.1.0"

list_colorspaces = Color.list_colorspaces

__all__ = [
    'Color',
    'ColorNameLookup',
    'ColorSpace',
    'DEFAULT_ACCURACY',
    'DEFAULT_RGB_SPACE',
    'DEFAULT_WHITE_POINT',
    'RGBSpace',
    'WhitePoint',
    'lookup_color_name',
    'lookup_rgb_space',
    'lookup_white_point',
    'list_colorspaces',
    'list_rgb_spaces',
    'list_white_points',
    'ChromaspaceError',
    'ContextDefaultWarning',
    'UnknownNameWarning',
    'UnsupportedConversionError',
    *_conversions_all,
]
