from __future__ import annotations
from dataclasses import replace
from typing import List, Optional, Union

from ..conversions.adaptation import rebase_white_point
from ..conversions.context import ColorContext
from ..conversions.rgb_formats import (
    RGB255_to_RGB,
    RGB_to_RGB255,
    RGB_to_RGBhex,
    RGBhex_to_RGB,
)
from ..conversions.wrapper import (
    BROADCAST_RGB_SPACE,
    context_XYZ_to_RGB,
    from_XYZ,
    to_XYZ,
)
from ..errors import UnsupportedConversionError
from ..tables.rgb_spaces import RGBSpace, as_rgb_space, list_rgb_spaces, lookup_rgb_space
from ..tables.white_points import list_white_points, lookup_white_point
from ..types.color_types import Color3, ColorInput, ColorSpace, element_to_list, parse_space
from ..utils.default import first_defined, value_or_default
from ..utils.linalg import delta3
from .names import ColorNameLookup, lookup_color_name

DEFAULT_ACCURACY = 1e-4

SpaceArg = Union[str, RGBSpace, None]

# constructors for these ignore the caller's context and pin NTSC
_BROADCAST_SPACES = (ColorSpace.YPBPR, ColorSpace.YCBCR)


class Color:
    """
    A color stored as CIE XYZ plus the context needed to read it back.

    ``xyz`` is what the working space's matrix gives for the RGB value; xyY, Lab
    and Luv read it against ``effective_white_point``. The stored working space
    and white point may each be unset; reads then fall back to sRGB and to the
    working space's own white point (D65 if no space is set either).

    Accessors recompute from XYZ on every call. Only ``set_working_space`` and
    ``set_white_point`` mutate, and they are the only place XYZ is adapted to
    another white point.
    """
    __slots__ = ('_xyz', '_context')

    def __init__(self, xyz: ColorInput, context: Optional[ColorContext] = None) -> None:
        self._xyz: Color3 = element_to_list(xyz)
        self._context: ColorContext = value_or_default(context, ColorContext())

    # ---- constructors ----

    @classmethod
    def new(
        cls,
        color_space: Union[str, ColorSpace],
        value: ColorInput,
        space: SpaceArg = None,
        white_point: Optional[str] = None,
    ) -> Color:
        """
        Build a color from a value in any supported space.

        Args:
            color_space: Space ``value`` is expressed in, e.g. ``"Lab"``
            value: Channels (four for CMYK)
            space: RGB working space
            white_point: Reference white, overriding the working space's own

        YPbPr and YCbCr values are always read as NTSC, whatever ``space`` and
        ``white_point`` say.
        """
        src = parse_space(color_space)
        if src in _BROADCAST_SPACES:
            context = ColorContext.create(BROADCAST_RGB_SPACE)
        else:
            context = ColorContext.create(space, white_point)
        return cls(to_XYZ(value, src, context), context)

    @classmethod
    def new_XYZ(cls, xyz: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls(xyz, ColorContext.create(space, white_point))

    @classmethod
    def new_xyY(cls, xyy: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.XYY, xyy, space, white_point)

    @classmethod
    def new_RGB(cls, rgb: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        """
        >>> Color.new_RGB([1, 0, 0], space="sRGB").as_RGB255()
        [255, 0, 0]
        """
        return cls.new(ColorSpace.RGB, rgb, space, white_point)

    @classmethod
    def new_RGB255(cls, rgb255: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new_RGB(RGB255_to_RGB(rgb255), space, white_point)

    @classmethod
    def new_RGBhex(cls, rgbhex: str, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new_RGB(RGBhex_to_RGB(rgbhex), space, white_point)

    @classmethod
    def new_Lab(cls, lab: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.LAB, lab, space, white_point)

    @classmethod
    def new_LCHab(cls, lch: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.LCHAB, lch, space, white_point)

    @classmethod
    def new_Luv(cls, luv: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.LUV, luv, space, white_point)

    @classmethod
    def new_LCHuv(cls, lch: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.LCHUV, lch, space, white_point)

    @classmethod
    def new_HSL(cls, hsl: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.HSL, hsl, space, white_point)

    @classmethod
    def new_HSV(cls, hsv: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.HSV, hsv, space, white_point)

    @classmethod
    def new_CMY(cls, cmy: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.CMY, cmy, space, white_point)

    @classmethod
    def new_CMYK(cls, cmyk: ColorInput, space: SpaceArg = None, white_point: Optional[str] = None) -> Color:
        return cls.new(ColorSpace.CMYK, cmyk, space, white_point)

    @classmethod
    def new_YPbPr(cls, ypbpr: ColorInput) -> Color:
        return cls.new(ColorSpace.YPBPR, ypbpr)

    @classmethod
    def new_YCbCr(cls, ycbcr: ColorInput) -> Color:
        return cls.new(ColorSpace.YCBCR, ycbcr)

    @classmethod
    def from_name(
        cls,
        name: str,
        lookup: Optional[ColorNameLookup] = None,
        space: SpaceArg = None,
        white_point: Optional[str] = None,
    ) -> Color:
        """
        Build a color from a name or code understood by ``lookup``.

        Raises:
            KeyError: If the lookup does not know ``name``.
        """
        rgb = value_or_default(lookup, lookup_color_name)(name)
        if rgb is None:
            raise KeyError(f"unknown color name: {name!r}")
        return cls.new_RGB(rgb, space, white_point)

    # ---- accessors ----

    def as_(self, color_space: Union[str, ColorSpace]) -> List[float]:
        """Read the color in any supported space."""
        return from_XYZ(self._xyz, color_space, self._context)

    def as_XYZ(self) -> Color3:
        return list(self._xyz)

    def as_xyY(self) -> Color3:
        return self.as_(ColorSpace.XYY)

    def as_RGB(self, space: SpaceArg = None) -> Color3:
        """
        Read as RGB in the stored working space, or in ``space`` if given.

        An explicit ``space`` only swaps the matrix; XYZ is not adapted.
        """
        return context_XYZ_to_RGB(self._xyz, self._context.override(working_space=space))

    def as_RGB255(self, space: SpaceArg = None) -> List[int]:
        return RGB_to_RGB255(self.as_RGB(space))

    def as_RGBhex(self, space: SpaceArg = None) -> str:
        return RGB_to_RGBhex(self.as_RGB(space))

    def as_Lab(self) -> Color3:
        return self.as_(ColorSpace.LAB)

    def as_LCHab(self) -> Color3:
        return self.as_(ColorSpace.LCHAB)

    def as_Luv(self) -> Color3:
        return self.as_(ColorSpace.LUV)

    def as_LCHuv(self) -> Color3:
        return self.as_(ColorSpace.LCHUV)

    def as_HSL(self) -> Color3:
        return self.as_(ColorSpace.HSL)

    def as_HSV(self) -> Color3:
        return self.as_(ColorSpace.HSV)

    def as_CMY(self) -> Color3:
        return self.as_(ColorSpace.CMY)

    def as_CMYK(self) -> List[float]:
        return self.as_(ColorSpace.CMYK)

    def as_YPbPr(self) -> Color3:
        return self.as_(ColorSpace.YPBPR)

    def as_YCbCr(self) -> Color3:
        return self.as_(ColorSpace.YCBCR)

    def as_YUV(self) -> Color3:
        raise UnsupportedConversionError("YUV")

    def as_YIQ(self) -> Color3:
        raise UnsupportedConversionError("YIQ")

    def as_YCC(self) -> Color3:
        raise UnsupportedConversionError("YCC")

    # ---- context ----

    @property
    def working_space(self) -> Optional[str]:
        return self._context.working_space

    @property
    def white_point(self) -> Optional[str]:
        return self._context.white_point

    @property
    def effective_working_space(self) -> str:
        return lookup_rgb_space(self._context.working_space).name

    @property
    def effective_white_point(self) -> str:
        return first_defined(
            self._context.white_point,
            lookup_rgb_space(self._context.working_space).white_point,
        )

    def get_XYZ_white(self) -> Color3:
        """XYZ (Y = 1) of the white point the stored XYZ is relative to."""
        return lookup_white_point(self.effective_white_point).xyz

    def set_white_point(self, white_point: str) -> Color:
        """
        Re-express the color under another white point.

        Nothing changes when ``white_point`` resolves to the current effective
        white point.
        """
        new = lookup_white_point(white_point).name
        current = self.effective_white_point
        if new != current:
            self._xyz = rebase_white_point(self._xyz, current, new)
            self._context = replace(self._context, white_point=new)
        return self

    def set_working_space(self, space: Union[str, RGBSpace]) -> Color:
        """
        Switch working space, first adapting to its native white point when that
        differs from the current effective white point.
        """
        s = as_rgb_space(space)
        if s.white_point != self.effective_white_point:
            self.set_white_point(s.white_point)
        self._context = replace(self._context, working_space=s.name)
        return self

    # ---- utilities ----

    def copy(self) -> Color:
        return Color(list(self._xyz), self._context)

    __copy__ = copy

    def equals(self, other: Color, accuracy: Optional[float] = None) -> bool:
        """
        Compare XYZ after bringing a copy of ``other`` to this color's working
        space and white point.

        The comparison is the L1 distance against ``accuracy`` (1e-4 by default).
        ``other`` itself is left untouched.
        """
        accuracy = value_or_default(accuracy, DEFAULT_ACCURACY)
        other = other.copy()
        other.set_working_space(self.effective_working_space)
        other.set_white_point(self.effective_white_point)
        return delta3(self._xyz, other._xyz) < accuracy

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(xyz={self._xyz!r}, "
            f"working_space={self.working_space!r}, white_point={self.white_point!r})"
        )

    # ---- listings ----

    @staticmethod
    def list_colorspaces() -> List[str]:
        return [space.value for space in ColorSpace]

    @staticmethod
    def list_rgb_spaces() -> List[str]:
        return list_rgb_spaces()

    @staticmethod
    def list_white_points() -> List[str]:
        return list_white_points()
