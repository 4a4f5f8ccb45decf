"""
Chromaspace Color Object
========================

``Color`` holds a single color as CIE XYZ together with an optional RGB working
space and white point, and converts to any supported space on demand.

Usage
-----
>>> from chromaspace.colors import Color
>>>
>>> red = Color.new_RGB([1, 0, 0], space="sRGB")
>>> red.as_RGBhex()
'FF0000'
>>>
>>> # Move the same color to a D50 working space; XYZ is adapted
>>> red.set_working_space("ProPhoto").white_point
'D50'
>>>
>>> # Named colors and compact codes
>>> Color.from_name("navy").as_RGB255()
[0, 0, 128]
"""

from .color import Color, DEFAULT_ACCURACY
from .names import ColorNameLookup, lookup_color_name
from ..conversions.context import ColorContext

__all__ = [
    'Color',
    'ColorContext',
    'ColorNameLookup',
    'DEFAULT_ACCURACY',
    'lookup_color_name',
]
