"""Standard illuminant white points, as CIE 1931 chromaticity (x, y)."""
import warnings
from types import MappingProxyType
from typing import List, NamedTuple, Optional

from ..errors import UnknownNameWarning
from ..types.color_types import Color3

DEFAULT_WHITE_POINT = "D65"


class WhitePoint(NamedTuple):
    name: str
    x: float
    y: float

    @property
    def xyz(self) -> Color3:
        """Reference white as XYZ with luminance ``Y = 1``."""
        return [self.x / self.y, 1.0, (1.0 - self.x - self.y) / self.y]


# reference: http://www.aim-dtp.net/aim/technology/cie_xyz/cie_xyz.htm
_WHITE_POINTS = {
    "A":   WhitePoint("A",   0.4476,   0.4074),    # tungsten lamp
    "B":   WhitePoint("B",   0.3484,   0.3516),
    "C":   WhitePoint("C",   0.310063, 0.316158),  # average sunlight
    "D50": WhitePoint("D50", 0.3457,   0.3585),
    "D55": WhitePoint("D55", 0.3324,   0.3474),
    "D65": WhitePoint("D65", 0.312713, 0.329016),  # daylight
    "D75": WhitePoint("D75", 0.299,    0.3149),
    "D93": WhitePoint("D93", 0.2848,   0.2932),    # old CRT monitors
    "E":   WhitePoint("E",   0.333333, 0.333333),  # equal energy
}

WHITE_POINTS = MappingProxyType(_WHITE_POINTS)


def lookup_white_point(name: Optional[str]) -> WhitePoint:
    """
    Look up a white point by name.

    ``None`` silently yields D65. An unknown name yields D65 and emits
    ``UnknownNameWarning``.
    """
    if name is None:
        return WHITE_POINTS[DEFAULT_WHITE_POINT]
    entry = WHITE_POINTS.get(name)
    if entry is None:
        warnings.warn(
            f"white point not found: {name!r}, defaulting to {DEFAULT_WHITE_POINT}",
            UnknownNameWarning,
            stacklevel=2,
        )
        return WHITE_POINTS[DEFAULT_WHITE_POINT]
    return entry


def list_white_points() -> List[str]:
    return sorted(WHITE_POINTS)
