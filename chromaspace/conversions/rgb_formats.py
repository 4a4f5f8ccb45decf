"""8-bit and hex encodings of RGB."""
import re
from typing import List

import numpy as np

from ..types.color_types import Color3, ColorInput, element_to_list

RGB255_MAX = 255

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6})$')


def RGB_to_RGB255(rgb: ColorInput) -> List[int]:
    """
    Clamp to [0, 1], scale to 0..255 and round half to even.

    >>> RGB_to_RGB255([1, 0, 0])
    [255, 0, 0]
    """
    clipped = np.clip(np.asarray(element_to_list(rgb), dtype=float), 0.0, 1.0)
    return [int(v) for v in np.rint(clipped * RGB255_MAX)]


def RGB255_to_RGB(rgb255: ColorInput) -> Color3:
    return [v / RGB255_MAX for v in element_to_list(rgb255)]


def RGB_to_RGBhex(rgb: ColorInput) -> str:
    """Upper-case ``RRGGBB`` without a leading ``#``."""
    return '{:02X}{:02X}{:02X}'.format(*RGB_to_RGB255(rgb))


def RGBhex_to_RGB(text: str) -> Color3:
    """
    Parse ``RRGGBB`` or ``#RRGGBB``.

    Raises:
        ValueError: If ``text`` is not six hex digits with an optional ``#``.
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid RGB hex string: {text!r}")
    digits = match.group(1)
    return RGB255_to_RGB([int(digits[i:i + 2], 16) for i in (0, 2, 4)])
