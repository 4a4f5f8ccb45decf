"""
Name -> RGB lookup used by ``Color.from_name``.

Any callable matching ``ColorNameLookup`` can be passed in; ``lookup_color_name``
is the built-in one. Besides the sixteen HTML 4 names it understands compact
codes, each channel written with 1 to 4 hex digits:

    #rgb   RGB
    %cmyk  CMYK, with r = 1 - c - k
    !hsv   HSV, hue scaled from the full digit range to 360 degrees
    &hsl   HSL, hue scaled the same way
"""
import re
from types import MappingProxyType
from typing import Callable, Dict, List, Optional, Protocol

from ..conversions.rgb_formats import RGBhex_to_RGB
from ..conversions.to_rgb import HSL_to_RGB, HSV_to_RGB
from ..types.color_types import Color3

_STRIP_RE = re.compile(r'[^#!%&a-z0-9]')
_HEX_DIGITS = set('0123456789abcdef')


class ColorNameLookup(Protocol):
    def __call__(self, name: str) -> Optional[Color3]: ...


HTML_COLORS = MappingProxyType({
    'aqua':    '00FFFF',
    'black':   '000000',
    'blue':    '0000FF',
    'fuchsia': 'FF00FF',
    'gray':    '808080',
    'green':   '008000',
    'lime':    '00FF00',
    'maroon':  '800000',
    'navy':    '000080',
    'olive':   '808000',
    'purple':  '800080',
    'red':     'FF0000',
    'silver':  'C0C0C0',
    'teal':    '008080',
    'white':   'FFFFFF',
    'yellow':  'FFFF00',
})


def normalize_name(name: str) -> str:
    """Lower-case and drop everything but letters, digits and the code prefixes."""
    return _STRIP_RE.sub('', name.lower())


def split_channels(body: str, channels: int) -> Optional[List[float]]:
    """
    Split ``body`` into equal-width hex channels scaled to [0, 1].

    Returns None unless ``body`` is ``channels`` groups of 1 to 4 hex digits.
    """
    width, rest = divmod(len(body), channels)
    if rest or not 1 <= width <= 4 or not set(body) <= _HEX_DIGITS:
        return None
    full = 16 ** width - 1
    return [int(body[i:i + width], 16) / full for i in range(0, len(body), width)]


def _cmyk_code(body: str) -> Optional[Color3]:
    values = split_channels(body, 4)
    if values is None:
        return None
    c, m, y, k = values
    return [1 - c - k, 1 - m - k, 1 - y - k]


def _hue_code(to_rgb: Callable[[List[float]], Color3]) -> Callable[[str], Optional[Color3]]:
    def parse(body: str) -> Optional[Color3]:
        values = split_channels(body, 3)
        if values is None:
            return None
        h, a, b = values
        return to_rgb([360 * h, a, b])
    return parse


_CODE_PARSERS: Dict[str, Callable[[str], Optional[Color3]]] = {
    '#': lambda body: split_channels(body, 3),
    '%': _cmyk_code,
    '!': _hue_code(HSV_to_RGB),
    '&': _hue_code(HSL_to_RGB),
}


def lookup_color_name(name: str) -> Optional[Color3]:
    """
    Resolve a color name or code to RGB in [0, 1].

    >>> lookup_color_name("Red")
    [1.0, 0.0, 0.0]
    >>> lookup_color_name("#f00")
    [1.0, 0.0, 0.0]

    Returns None when nothing matches.
    """
    key = normalize_name(name)
    if not key:
        return None
    parser = _CODE_PARSERS.get(key[0])
    if parser is not None:
        return parser(key[1:])
    code = HTML_COLORS.get(key)
    if code is None:
        return None
    return RGBhex_to_RGB(code)
