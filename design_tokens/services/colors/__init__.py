"""
Design Tokens Colors Module

Color space conversions between hex, 8-bit sRGB, linear RGB, OKLCH and HSL.
Everything here is a pure function: malformed hex degrades to black and
out-of-gamut values are clamped, so callers always get a usable color back.
"""

import math
import re
from typing import Optional, Tuple

import numpy as np
from loguru import logger

from design_tokens.config import config

RGB = Tuple[int, int, int]
OKLCH = Tuple[float, float, float]
HSL = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

# OKLab forward transform: linear sRGB -> LMS cone response -> L, a, b
LMS_FROM_LINEAR_RGB = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])
OKLAB_FROM_LMS = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# OKLab inverse transform: L, a, b -> LMS -> linear sRGB
LMS_FROM_OKLAB = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])
LINEAR_RGB_FROM_LMS = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, like CSS tooling does."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str, strict: Optional[bool] = None) -> RGB:
    """
    Convert hex color to an 8-bit RGB tuple.

    Args:
        hex_color: Color in format #RRGGBB (case-insensitive, '#' optional)
        strict: Raise on malformed input instead of returning black.
            Defaults to config.STRICT_HEX.

    Returns:
        RGB tuple (r, g, b) with values 0-255, or (0, 0, 0) for malformed input

    Raises:
        ValueError: If strict mode is on and the input is not a 6-digit hex color
    """
    if strict is None:
        strict = config.STRICT_HEX

    match = _HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        if strict:
            raise ValueError(f"Invalid hex color format: {hex_color!r}")
        logger.warning(f"Malformed hex color {hex_color!r}, falling back to black")
        return 0, 0, 0

    return tuple(int(group, 16) for group in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a lowercase hex string.

    Channels are clamped to [0, 255] and rounded first, so out-of-range
    values still produce a valid #rrggbb string.
    """
    channels = [round_half_up(max(0.0, min(255.0, c))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def normalize_hex(hex_color: str, strict: Optional[bool] = None) -> str:
    """Canonical lowercase #rrggbb form of a hex color."""
    return rgb_to_hex(*hex_to_rgb(hex_color, strict=strict))


def srgb_to_linear(channel: float) -> float:
    """
    Expand an 8-bit sRGB channel to linear light (gamma expansion).

    Args:
        channel: sRGB channel value 0-255

    Returns:
        Linear intensity in [0, 1]
    """
    c = channel / 255.0
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(linear: float) -> int:
    """
    Compress linear light to an 8-bit sRGB channel (gamma compression).

    Input is clamped to [0, 1] before the piecewise curve, which is the
    gamut mapping strategy for out-of-gamut OKLCH values.
    """
    if math.isnan(linear):
        return 0
    clamped = max(0.0, min(1.0, linear))
    if clamped <= 0.0031308:
        return round_half_up(clamped * 12.92 * 255)
    return round_half_up((1.055 * clamped ** (1 / 2.4) - 0.055) * 255)


def rgb_to_oklch(r: int, g: int, b: int) -> OKLCH:
    """
    Convert 8-bit sRGB to OKLCH.

    Args:
        r: Red channel 0-255
        g: Green channel 0-255
        b: Blue channel 0-255

    Returns:
        Tuple of (L, C, H) where L ∈ [0,1], C >= 0, H ∈ [0,360)
    """
    linear = np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])

    lms = np.cbrt(LMS_FROM_LINEAR_RGB @ linear)
    lightness, a, b_axis = (float(v) for v in OKLAB_FROM_LMS @ lms)

    chroma = math.sqrt(a * a + b_axis * b_axis)
    hue = math.degrees(math.atan2(b_axis, a))
    if hue < 0:
        hue += 360.0
    if hue >= 360.0:
        hue -= 360.0

    # + 0.0 turns a -0.0 hue into 0.0
    return lightness, chroma, hue + 0.0


def oklch_to_rgb(lightness: float, chroma: float, hue: float) -> RGB:
    """
    Convert OKLCH to 8-bit sRGB.

    Out-of-gamut colors are clamped per channel rather than perceptually
    remapped.

    Args:
        lightness: Perceptual lightness [0, 1]
        chroma: Chroma >= 0
        hue: Hue in degrees

    Returns:
        RGB tuple (r, g, b) with values 0-255
    """
    hue_rad = math.radians(hue)
    lab = np.array([lightness, chroma * math.cos(hue_rad), chroma * math.sin(hue_rad)])

    lms = (LMS_FROM_OKLAB @ lab) ** 3
    linear = LINEAR_RGB_FROM_LMS @ lms

    return tuple(linear_to_srgb(float(c)) for c in linear)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert 8-bit sRGB to integer HSL.

    Returns:
        Tuple of (hue degrees 0-360, saturation % 0-100, lightness % 0-100).
        Achromatic colors report hue 0 and saturation 0.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    max_c, min_c = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    # hues just under 1.0 round up to 360, which is 0 on the wheel
    return round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(l * 100)


def hex_to_oklch(hex_color: str, strict: Optional[bool] = None) -> OKLCH:
    """Convert hex color straight to OKLCH."""
    return rgb_to_oklch(*hex_to_rgb(hex_color, strict=strict))


def oklch_to_hex(lightness: float, chroma: float, hue: float) -> str:
    """Convert OKLCH straight to a hex color."""
    return rgb_to_hex(*oklch_to_rgb(lightness, chroma, hue))
