"""
RGB working spaces.

Each space carries its native white point, its gamma mode (a numeric exponent or
the piecewise sRGB curve) and a pair of matrices for the row-vector product
``linear_rgb @ m == xyz`` / ``xyz @ m_inv == linear_rgb``.

Matrices: http://www.brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html

An alias names a canonical entry and resolves in a single hop; an alias that
points at another alias is rejected when this module is imported.
"""
import warnings
from types import MappingProxyType
from typing import List, NamedTuple, Optional, Tuple, Union

from ..errors import UnknownNameWarning
from ..types.color_types import Color3, GammaMode, SRGB_GAMMA
from .white_points import lookup_white_point

DEFAULT_RGB_SPACE = "sRGB"

Matrix = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]


class RGBSpace(NamedTuple):
    name: str
    white_point: str
    gamma: GammaMode
    m: Matrix
    m_inv: Matrix

    @property
    def is_srgb_gamma(self) -> bool:
        return self.gamma == SRGB_GAMMA

    @property
    def white_point_xyz(self) -> Color3:
        return lookup_white_point(self.white_point).xyz


_SPACES = {
    "Adobe RGB (1998)": RGBSpace(
        "Adobe RGB (1998)", "D65", 2.2,
        ((0.5767001212121210, 0.2973609999999999, 0.0270328181818181),
         (0.1855557042253521, 0.6273550000000000, 0.0706878873239437),
         (0.1882125000000000, 0.0752850000000000, 0.9912525000000000)),
        ((2.0414778828777158, -0.9692568708746859, 0.0134454339800522),
         (-0.5649765261191881, 1.8759931170154693, -0.1183725462165374),
         (-0.3447127732462102, 0.0415556248231326, 1.0152620834741313)),
    ),
    "Apple RGB": RGBSpace(
        "Apple RGB", "D65", 1.8,
        ((0.4496948529411764, 0.2446340000000000, 0.0251829117647059),
         (0.3162512941176471, 0.6720340000000000, 0.1411836134453782),
         (0.1845208571428572, 0.0833320000000000, 0.9226042857142855)),
        ((2.9517603398020569, -1.0851001264872848, 0.0854802409232915),
         (-1.2895090072470441, 1.9908397072633022, -0.2694550155056003),
         (-0.4738802866606785, 0.0372022452865781, 1.0911301341384845)),
    ),
    "BestRGB": RGBSpace(
        "BestRGB", "D50", 2.2,
        ((0.6326700260082926, 0.2284570000000000, 0.0000000000000000),
         (0.2045557161290322, 0.7373519999999999, 0.0095142193548387),
         (0.1269951428571429, 0.0341910000000000, 0.8156995714285713)),
        ((1.7552588897490133, -0.5441338472581142, 0.0063467101890703),
         (-0.4836782739368681, 1.5068795234848715, -0.0175760572028268),
         (-0.2529998994965047, 0.0215528345168675, 1.2256901641540674)),
    ),
    "Beta RGB": RGBSpace(
        "Beta RGB", "D50", 2.2,
        ((0.6712546349614399, 0.3032730000000001, 0.0000000000000001),
         (0.1745833659117997, 0.6637859999999999, 0.0407009558998808),
         (0.1183817187500000, 0.0329410000000000, 0.7845011448863635)),
        ((1.6832246105012654, -0.7710229999344457, 0.0400016919321019),
         (-0.4282356869228009, 1.7065573340451357, -0.0885384492378917),
         (-0.2360181522709381, 0.0446899574535591, 1.2723768250932299)),
    ),
    "BruceRGB": RGBSpace(
        "BruceRGB", "D65", 2.2,
        ((0.4673842424242424, 0.2409950000000000, 0.0219086363636363),
         (0.2944540307692308, 0.6835539999999999, 0.0736135076923076),
         (0.1886300000000000, 0.0754520000000000, 0.9934513333333335)),
        ((2.7456543761403882, -0.9692568108426551, 0.0112706581772173),
         (-1.1358911781912031, 1.8759930008236942, -0.1139588771251973),
         (-0.4350565642146659, 0.0415556222493375, 1.0131069405965349)),
    ),
    "CIE": RGBSpace(
        "CIE", "E", 2.2,
        ((0.4887167547169811, 0.1762040000000000, 0.0000000000000000),
         (0.3106804602510461, 0.8129850000000002, 0.0102048326359833),
         (0.2006041111111111, 0.0108110000000000, 0.9898071111111111)),
        ((2.3706802022946527, -0.5138847730830187, 0.0052981111618865),
         (-0.9000427625776859, 1.4253030498717687, -0.0146947611471193),
         (-0.4706349622815629, 0.0885813466699250, 1.0093845871252884)),
    ),
    "ColorMatch": RGBSpace(
        "ColorMatch", "D50", 1.8,
        ((0.5093438823529410, 0.2748840000000000, 0.0242544705882353),
         (0.3209073388429752, 0.6581320000000002, 0.1087821487603307),
         (0.1339700000000000, 0.0669850000000000, 0.6921783333333333)),
        ((2.6422872594587332, -1.1119754096457255, 0.0821692807629542),
         (-1.2234269646206919, 2.0590166676215107, -0.2807234418494614),
         (-0.3930142794480749, 0.0159613695164458, 1.4559774449385248)),
    ),
    "DonRGB4": RGBSpace(
        "DonRGB4", "D50", 2.2,
        ((0.6457719999999998, 0.2783499999999999, 0.0037113333333334),
         (0.1933510457516340, 0.6879700000000001, 0.0179861437908497),
         (0.1250971428571429, 0.0336800000000000, 0.8035085714285716)),
        ((1.7603878846606116, -0.7126289975811030, 0.0078207770365325),
         (-0.4881191497764036, 1.6527436537605511, -0.0347412748629646),
         (-0.2536122811541382, 0.0416715470705678, 1.2447804103656714)),
    ),
    "ECI": RGBSpace(
        "ECI", "D50", 1.8,
        ((0.6502045454545454, 0.3202500000000000, -0.0000000000000001),
         (0.1780773380281691, 0.6020710000000000, 0.0678389859154930),
         (0.1359382500000000, 0.0776790000000000, 0.7573702500000002)),
        ((1.7827609790470664, -0.9593624312689213, 0.0859317810050046),
         (-0.4969845184555761, 1.9477964513641737, -0.1744675553737970),
         (-0.2690099687053119, -0.0275807381172883, 1.3228286288043098)),
    ),
    "Ekta Space PS5": RGBSpace(
        "Ekta Space PS5", "D50", 2.2,
        ((0.5938923114754098, 0.2606289999999999, 0.0000000000000000),
         (0.2729799428571429, 0.7349460000000001, 0.0419969142857143),
         (0.0973500000000000, 0.0044250000000000, 0.7832250000000001)),
        ((2.0043787360968186, -0.7110290170493107, 0.0381257297502959),
         (-0.7304832564783660, 1.6202136618008882, -0.0868766628736253),
         (-0.2450047962579189, 0.0792227384931296, 1.2725243569115190)),
    ),
    "NTSC": RGBSpace(
        "NTSC", "C", 2.2,
        ((0.6067337272727271, 0.2988389999999999, -0.0000000000000001),
         (0.1735638169014085, 0.5868110000000000, 0.0661195492957747),
         (0.2001125000000000, 0.1143500000000000, 1.1149125000000002)),
        ((1.9104909450902432, -0.9843106185066585, 0.0583742441336926),
         (-0.5325921048972800, 1.9984488315135187, -0.1185174047562849),
         (-0.2882837998985277, -0.0282979742694222, 0.8986095763610844)),
    ),
    "PAL/SECAM": RGBSpace(
        "PAL/SECAM", "D65", 2.2,
        ((0.4305861818181819, 0.2220210000000001, 0.0201837272727273),
         (0.3415450833333333, 0.7066450000000000, 0.1295515833333333),
         (0.1783350000000000, 0.0713340000000000, 0.9392309999999999)),
        ((3.0631308078036081, -0.9692570313532748, 0.0678676345258901),
         (-1.3932854294802033, 1.8759934276211896, -0.2288214781555966),
         (-0.4757879688629482, 0.0415556317034429, 1.0691933898259074)),
    ),
    "ProPhoto": RGBSpace(
        "ProPhoto", "D50", 1.8,
        ((0.7976742857142858, 0.2880400000000000, 0.0000000000000000),
         (0.1351916830080914, 0.7118740000000000, 0.0000000000000000),
         (0.0314760000000000, 0.0000860000000000, 0.8284380000000000)),
        ((1.3459444124134017, -0.5445989438461810, -0.0000000000000000),
         (-0.2556077203964527, 1.5081675237232912, -0.0000000000000000),
         (-0.0511118080787822, 0.0205351443915685, 1.2070909349884964)),
    ),
    "SMPTE-C": RGBSpace(
        "SMPTE-C", "D65", 2.2,
        ((0.3935554411764707, 0.2123950000000001, 0.0187407352941176),
         (0.3652524201680672, 0.7010489999999999, 0.1119321932773109),
         (0.1916597142857142, 0.0865560000000000, 0.9582985714285710)),
        ((3.5056956039694129, -1.0690641158576772, 0.0563116543373650),
         (-1.7396380462846184, 1.9778095119692913, -0.1969933651732733),
         (-0.5440105230649496, 0.0351719640259221, 1.0500467308790999)),
    ),
    "sRGB": RGBSpace(
        "sRGB", "D65", SRGB_GAMMA,
        ((0.4124237575757575, 0.2126560000000000, 0.0193323636363636),
         (0.3575789999999999, 0.7151579999999998, 0.1191930000000000),
         (0.1804650000000000, 0.0721860000000000, 0.9504490000000001)),
        ((3.2407109439941704, -0.9692581090654827, 0.0556349466243886),
         (-1.5372603195869781, 1.8759955135292130, -0.2039948042894247),
         (-0.4985709144606416, 0.0415556779089489, 1.0570639858633826)),
    ),
    "WideGamut": RGBSpace(
        "WideGamut", "D50", 2.2,
        ((0.7161035660377360, 0.2581870000000001, 0.0000000000000000),
         (0.1009296246973366, 0.7249380000000000, 0.0517812857142858),
         (0.1471875000000000, 0.0168750000000000, 0.7734375000000001)),
        ((1.4628087611158722, -0.5217931929785991, 0.0349338148323482),
         (-0.1840625990709008, 1.4472377239217746, -0.0968919015161355),
         (-0.2743610287417160, 0.0677227300206644, 1.2883952872306403)),
    ),
}

_ALIASES = {
    "Adobe": "Adobe RGB (1998)",
    "Apple": "Apple RGB",
    "601": "NTSC",
    "CIE Rec 601": "NTSC",
    "CIE ITU": "PAL/SECAM",
    "PAL": "PAL/SECAM",
    "SMPTE": "SMPTE-C",
    "709": "sRGB",
    "CIE Rec 709": "sRGB",
}

for _alias, _target in _ALIASES.items():
    if _target not in _SPACES:
        raise RuntimeError(f"RGB space alias {_alias!r} must name a canonical space, not {_target!r}")

RGB_SPACES = MappingProxyType(_SPACES)
RGB_SPACE_ALIASES = MappingProxyType(_ALIASES)


def lookup_rgb_space(name: Optional[str]) -> RGBSpace:
    """
    Look up an RGB working space by name or alias.

    ``None`` silently yields sRGB. An unknown name yields sRGB and emits
    ``UnknownNameWarning``.
    """
    if name is None:
        return RGB_SPACES[DEFAULT_RGB_SPACE]
    name = RGB_SPACE_ALIASES.get(name, name)
    entry = RGB_SPACES.get(name)
    if entry is None:
        warnings.warn(
            f"rgb space not found: {name!r}, defaulting to {DEFAULT_RGB_SPACE}",
            UnknownNameWarning,
            stacklevel=2,
        )
        return RGB_SPACES[DEFAULT_RGB_SPACE]
    return entry


def as_rgb_space(space: Union[str, RGBSpace, None]) -> RGBSpace:
    """Accept either a resolved ``RGBSpace`` or a name to look up."""
    if isinstance(space, RGBSpace):
        return space
    return lookup_rgb_space(space)


def list_rgb_spaces() -> List[str]:
    """All known working-space names, aliases included, sorted."""
    return sorted([*RGB_SPACES, *RGB_SPACE_ALIASES])
