import numpy as np
# RED
RED_RGB = np.array([1.0, 0.0, 0.0])
RED_RGB255 = np.array([255, 0, 0])
RED_HSV = np.array([0.0, 1.0, 1.0])
RED_HSL = np.array([0.0, 1.0, 0.5])

# GREEN
GREEN_RGB = np.array([0.0, 1.0, 0.0])
GREEN_RGB255 = np.array([0, 255, 0])
GREEN_HSV = np.array([120.0, 1.0, 1.0])
GREEN_HSL = np.array([120.0, 1.0, 0.5])

# BLUE
BLUE_RGB = np.array([0.0, 0.0, 1.0])
BLUE_RGB255 = np.array([0, 0, 255])
BLUE_HSV = np.array([240.0, 1.0, 1.0])
BLUE_HSL = np.array([240.0, 1.0, 0.5])

# YELLOW
YELLOW_RGB = np.array([1.0, 1.0, 0.0])
YELLOW_RGB255 = np.array([255, 255, 0])
YELLOW_HSV = np.array([60.0, 1.0, 1.0])
YELLOW_HSL = np.array([60.0, 1.0, 0.5])

# MAGENTA
MAGENTA_RGB = np.array([1.0, 0.0, 1.0])
MAGENTA_RGB255 = np.array([255, 0, 255])
MAGENTA_HSV = np.array([300.0, 1.0, 1.0])
MAGENTA_HSL = np.array([300.0, 1.0, 0.5])

# CYAN
CYAN_RGB = np.array([0.0, 1.0, 1.0])
CYAN_RGB255 = np.array([0, 255, 255])
CYAN_HSV = np.array([180.0, 1.0, 1.0])
CYAN_HSL = np.array([180.0, 1.0, 0.5])

# WHITE
WHITE_RGB = np.array([1.0, 1.0, 1.0])
WHITE_RGB255 = np.array([255, 255, 255])
WHITE_HSV = np.array([0.0, 0.0, 1.0])
WHITE_HSL = np.array([0.0, 0.0, 1.0])

# BLACK
BLACK_RGB = np.array([0.0, 0.0, 0.0])
BLACK_RGB255 = np.array([0, 0, 0])
BLACK_HSV = np.array([0.0, 0.0, 0.0])
BLACK_HSL = np.array([0.0, 0.0, 0.0])

# sRGB primaries in XYZ (D65), IEC 61966-2-1
SRGB_RED_XYZ = np.array([0.4124, 0.2127, 0.0193])

GRAYS_RGB = [np.array([v, v, v]) for v in (0.1, 0.25, 0.5, 0.75, 0.9)]

# Out-of-gamut values: channels above 1 and below 0, kept clear of the HSL and
# Luv singularities
OFF_GAMUT_RGB = [
    np.array([1.2, -0.1, 0.3]),
    np.array([-0.1, 0.6, 0.9]),
    np.array([0.4, 1.1, -0.05]),
    np.array([0.2, 0.3, 1.15]),
]

PRIMARIES_RGB = [RED_RGB, GREEN_RGB, BLUE_RGB]
SECONDARIES_RGB = [YELLOW_RGB, MAGENTA_RGB, CYAN_RGB]

ROUND_TRIP_RGB = [
    *PRIMARIES_RGB,
    *SECONDARIES_RGB,
    BLACK_RGB,
    WHITE_RGB,
    *GRAYS_RGB,
    np.array([0.8, 0.4, 0.2]),
    np.array([0.1, 0.5, 0.3]),
    *OFF_GAMUT_RGB,
]


def get_gray_hsv(hue: float, value: float) -> np.ndarray:
    """Achromatic HSV with an arbitrary hue."""
    return np.array([hue, 0.0, value])


__all__ = [
    "RED_RGB", "RED_RGB255", "RED_HSV", "RED_HSL",
    "GREEN_RGB", "GREEN_RGB255", "GREEN_HSV", "GREEN_HSL",
    "BLUE_RGB", "BLUE_RGB255", "BLUE_HSV", "BLUE_HSL",
    "YELLOW_RGB", "YELLOW_RGB255", "YELLOW_HSV", "YELLOW_HSL",
    "MAGENTA_RGB", "MAGENTA_RGB255", "MAGENTA_HSV", "MAGENTA_HSL",
    "CYAN_RGB", "CYAN_RGB255", "CYAN_HSV", "CYAN_HSL",
    "WHITE_RGB", "WHITE_RGB255", "WHITE_HSV", "WHITE_HSL",
    "BLACK_RGB", "BLACK_RGB255", "BLACK_HSV", "BLACK_HSL",
    "SRGB_RED_XYZ",
    "GRAYS_RGB",
    "OFF_GAMUT_RGB",
    "PRIMARIES_RGB",
    "SECONDARIES_RGB",
    "ROUND_TRIP_RGB",
    "get_gray_hsv",
]
