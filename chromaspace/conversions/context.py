"""
Working-space / white-point context threaded through conversions.

Resolution order for both fields: explicit argument > stored value > global
default. The effective white point of a context with only a working space is
that space's native white.
"""
import warnings
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import ContextDefaultWarning
from ..tables.rgb_spaces import DEFAULT_RGB_SPACE, RGBSpace, as_rgb_space, lookup_rgb_space
from ..tables.white_points import DEFAULT_WHITE_POINT, WhitePoint, lookup_white_point
from ..types.color_types import Color3
from ..utils.default import first_defined


@dataclass(frozen=True)
class ColorContext:
    working_space: Optional[str] = None
    white_point: Optional[str] = None

    @classmethod
    def create(
        cls,
        working_space: Union[str, RGBSpace, None] = None,
        white_point: Optional[str] = None,
    ) -> "ColorContext":
        """Build a context with canonical names; aliases and unknown names are resolved here."""
        if working_space is not None:
            working_space = as_rgb_space(working_space).name
        if white_point is not None:
            white_point = lookup_white_point(white_point).name
        return cls(working_space, white_point)

    def override(
        self,
        working_space: Union[str, RGBSpace, None] = None,
        white_point: Optional[str] = None,
    ) -> "ColorContext":
        return ColorContext.create(
            first_defined(working_space, self.working_space),
            first_defined(white_point, self.white_point),
        )

    def rgb_space(self) -> RGBSpace:
        if self.working_space is None:
            warnings.warn(
                f"no rgb space specified in operation that requires it, defaulting to {DEFAULT_RGB_SPACE}",
                ContextDefaultWarning,
                stacklevel=2,
            )
        return lookup_rgb_space(self.working_space)

    def white_point_name(self) -> str:
        if self.white_point is not None:
            return self.white_point
        if self.working_space is not None:
            return lookup_rgb_space(self.working_space).white_point
        warnings.warn(
            f"no white point specified in operation that requires it, defaulting to {DEFAULT_WHITE_POINT}",
            ContextDefaultWarning,
            stacklevel=2,
        )
        return DEFAULT_WHITE_POINT

    def white_point_entry(self) -> WhitePoint:
        return lookup_white_point(self.white_point_name())

    def reference_white(self) -> Color3:
        """XYZ (Y = 1) of the effective white point."""
        return self.white_point_entry().xyz
