"""
Single dispatch point between color spaces.

Every ``ColorSpace`` member has a ``SpaceCapability`` pair that moves a value to
and from CIE XYZ. RGB-based spaces use the working space's matrices as they are;
xyY, Lab and Luv are taken against the context's effective white point. White
point adaptation never happens here. ``convert`` always goes through XYZ.
"""
from dataclasses import replace
from types import MappingProxyType
from typing import Callable, List, NamedTuple, Optional, Union

from ..tables.rgb_spaces import RGBSpace
from ..types.color_types import (
    Color3,
    ColorInput,
    ColorSpace,
    channel_count,
    element_to_list,
    parse_space,
)
from .cmy import CMY_to_CMYK, CMY_to_RGB, CMYK_to_CMY, RGB_to_CMY
from .context import ColorContext
from .lab import Lab_to_LCHab, Lab_to_XYZ, LCHab_to_Lab, XYZ_to_Lab
from .luv import LCHuv_to_Luv, Luv_to_LCHuv, Luv_to_XYZ, XYZ_to_Luv
from .to_hsl import RGB_to_HSL
from .to_hsv import RGB_to_HSV
from .to_rgb import HSL_to_RGB, HSV_to_RGB
from .video import RGB_to_YCbCr, RGB_to_YPbPr, YCbCr_to_RGB, YPbPr_to_RGB
from .xyz import RGB_to_XYZ, XYZ_to_RGB, XYZ_to_xyY, xyY_to_XYZ

# YPbPr and YCbCr are defined on Rec. 601 (NTSC) RGB
BROADCAST_RGB_SPACE = "NTSC"

ToXYZ = Callable[[ColorInput, ColorContext], Color3]
FromXYZ = Callable[[ColorInput, ColorContext], List[float]]


class SpaceCapability(NamedTuple):
    to_xyz: ToXYZ
    from_xyz: FromXYZ


def context_RGB_to_XYZ(rgb: ColorInput, context: ColorContext) -> Color3:
    """RGB in the context's working space to XYZ through that space's matrix."""
    return RGB_to_XYZ(rgb, context.rgb_space())


def context_XYZ_to_RGB(xyz: ColorInput, context: ColorContext) -> Color3:
    return XYZ_to_RGB(xyz, context.rgb_space())


def broadcast_context(context: ColorContext) -> ColorContext:
    """NTSC working space; the stored white point is kept."""
    return replace(context, working_space=BROADCAST_RGB_SPACE)


def _via_rgb(to_rgb, from_rgb, broadcast: bool = False) -> SpaceCapability:
    def to_xyz(value, context):
        if broadcast:
            context = broadcast_context(context)
        return context_RGB_to_XYZ(to_rgb(value), context)

    def from_xyz(xyz, context):
        if broadcast:
            context = broadcast_context(context)
        return from_rgb(context_XYZ_to_RGB(xyz, context))

    return SpaceCapability(to_xyz, from_xyz)


_CAPABILITIES = {
    ColorSpace.XYZ: SpaceCapability(
        lambda v, ctx: element_to_list(v),
        lambda xyz, ctx: element_to_list(xyz),
    ),
    ColorSpace.XYY: SpaceCapability(
        lambda v, ctx: xyY_to_XYZ(v),
        lambda xyz, ctx: XYZ_to_xyY(xyz, ctx.reference_white()),
    ),
    ColorSpace.RGB: SpaceCapability(context_RGB_to_XYZ, context_XYZ_to_RGB),
    ColorSpace.LAB: SpaceCapability(
        lambda v, ctx: Lab_to_XYZ(v, ctx.reference_white()),
        lambda xyz, ctx: XYZ_to_Lab(xyz, ctx.reference_white()),
    ),
    ColorSpace.LCHAB: SpaceCapability(
        lambda v, ctx: Lab_to_XYZ(LCHab_to_Lab(v), ctx.reference_white()),
        lambda xyz, ctx: Lab_to_LCHab(XYZ_to_Lab(xyz, ctx.reference_white())),
    ),
    ColorSpace.LUV: SpaceCapability(
        lambda v, ctx: Luv_to_XYZ(v, ctx.reference_white()),
        lambda xyz, ctx: XYZ_to_Luv(xyz, ctx.reference_white()),
    ),
    ColorSpace.LCHUV: SpaceCapability(
        lambda v, ctx: Luv_to_XYZ(LCHuv_to_Luv(v), ctx.reference_white()),
        lambda xyz, ctx: Luv_to_LCHuv(XYZ_to_Luv(xyz, ctx.reference_white())),
    ),
    ColorSpace.HSL: _via_rgb(HSL_to_RGB, RGB_to_HSL),
    ColorSpace.HSV: _via_rgb(HSV_to_RGB, RGB_to_HSV),
    ColorSpace.CMY: _via_rgb(CMY_to_RGB, RGB_to_CMY),
    ColorSpace.CMYK: _via_rgb(
        lambda v: CMY_to_RGB(CMYK_to_CMY(v)),
        lambda rgb: CMY_to_CMYK(RGB_to_CMY(rgb)),
    ),
    ColorSpace.YPBPR: _via_rgb(YPbPr_to_RGB, RGB_to_YPbPr, broadcast=True),
    ColorSpace.YCBCR: _via_rgb(YCbCr_to_RGB, RGB_to_YCbCr, broadcast=True),
}

_missing = [space.value for space in ColorSpace if space not in _CAPABILITIES]
if _missing:
    raise RuntimeError(f"color spaces without conversions: {_missing}")

SPACE_CAPABILITIES = MappingProxyType(_CAPABILITIES)


def to_XYZ(value: ColorInput, space: Union[str, ColorSpace], context: ColorContext) -> Color3:
    cap = SPACE_CAPABILITIES[parse_space(space)]
    return cap.to_xyz(value, context)


def from_XYZ(xyz: ColorInput, space: Union[str, ColorSpace], context: ColorContext) -> List[float]:
    cap = SPACE_CAPABILITIES[parse_space(space)]
    return cap.from_xyz(xyz, context)


def convert(
    value: ColorInput,
    from_space: Union[str, ColorSpace],
    to_space: Union[str, ColorSpace],
    space: Union[str, RGBSpace, None] = None,
    white_point: Optional[str] = None,
) -> List[float]:
    """
    Convert a color value between any two supported spaces.

    Args:
        value: Channels in ``from_space`` (four for CMYK, three otherwise)
        from_space: Source space name or ``ColorSpace``
        to_space: Target space name or ``ColorSpace``
        space: RGB working space used by the RGB-based spaces
        white_point: Reference white; the working space's own white when None

    Returns:
        Channels in ``to_space``

    Raises:
        UnsupportedConversionError: For recognised but unimplemented spaces (YUV, YIQ, YCC)
        ValueError: For unknown space names or a wrong number of channels
    """
    src = parse_space(from_space)
    dst = parse_space(to_space)
    value = element_to_list(value, channel_count(src))
    if src is dst:
        return value
    context = ColorContext.create(space, white_point)
    return from_XYZ(to_XYZ(value, src, context), dst, context)
