"""
Design Tokens - Perceptual Color Scale

Builds the 11-stop (50-950) color scale for a base color by walking a fixed
OKLCH lightness table while keeping the base hue and chroma. Chroma is pulled
back at the very light and very dark ends so the extremes do not look washed
out or muddy.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from loguru import logger

from . import HSL, OKLCH, RGB, hex_to_rgb, oklch_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_oklch


class LightnessStop(NamedTuple):
    """One tier of the scale and its target OKLCH lightness."""
    step: int
    lightness: float


# Strictly decreasing lightness: step 50 is the lightest, 950 the darkest
LIGHTNESS_STOPS: Tuple[LightnessStop, ...] = (
    LightnessStop(50, 0.97),
    LightnessStop(100, 0.93),
    LightnessStop(200, 0.87),
    LightnessStop(300, 0.78),
    LightnessStop(400, 0.65),
    LightnessStop(500, 0.55),
    LightnessStop(600, 0.45),
    LightnessStop(700, 0.37),
    LightnessStop(800, 0.27),
    LightnessStop(900, 0.20),
    LightnessStop(950, 0.14),
)

SCALE_STEPS: Tuple[int, ...] = tuple(stop.step for stop in LIGHTNESS_STOPS)

# Chroma compensation at the extremes of the lightness table
LIGHT_THRESHOLD = 0.9
LIGHT_CHROMA_MULTIPLIER = 0.3
DARK_THRESHOLD = 0.2
DARK_CHROMA_MULTIPLIER = 0.7


@dataclass(frozen=True)
class ColorStop:
    """A single position on a generated color scale."""
    step: int  # 50, 100, ..., 950
    hex: str  # #rrggbb
    oklch: OKLCH  # (L, C, H) actually used for this stop
    rgb: RGB  # 0-255 per channel
    hsl: HSL  # (degrees, %, %)


def chroma_multiplier(lightness: float) -> float:
    """
    Chroma scaling factor for a target lightness.

    Args:
        lightness: Target OKLCH lightness [0, 1]

    Returns:
        0.3 above L=0.9, 0.7 below L=0.2, otherwise 1.0
    """
    if lightness > LIGHT_THRESHOLD:
        return LIGHT_CHROMA_MULTIPLIER
    if lightness < DARK_THRESHOLD:
        return DARK_CHROMA_MULTIPLIER
    return 1.0


def build_color_stop(step: int, lightness: float, chroma: float, hue: float) -> ColorStop:
    """Resolve one OKLCH target into a fully populated ColorStop."""
    rgb = oklch_to_rgb(lightness, chroma, hue)
    return ColorStop(
        step=step,
        hex=rgb_to_hex(*rgb),
        oklch=(lightness, chroma, hue),
        rgb=rgb,
        hsl=rgb_to_hsl(*rgb),
    )


def generate_color_scale(hex_color: str, strict: Optional[bool] = None) -> List[ColorStop]:
    """
    Generate the 11-step color scale for a base color.

    Only the base color's chroma and hue are kept; every stop takes its
    lightness from LIGHTNESS_STOPS.

    Args:
        hex_color: Base color in format #RRGGBB ('#' optional)
        strict: Forwarded to hex_to_rgb

    Returns:
        List of 11 ColorStop entries in ascending step order
    """
    _, base_chroma, base_hue = rgb_to_oklch(*hex_to_rgb(hex_color, strict=strict))

    stops = [
        build_color_stop(step, lightness, base_chroma * chroma_multiplier(lightness), base_hue)
        for step, lightness in LIGHTNESS_STOPS
    ]

    logger.debug(
        f"Generated {len(stops)}-stop scale for {hex_color} "
        f"(C={base_chroma:.3f}, H={base_hue:.1f}): {stops[0].hex} → {stops[-1].hex}"
    )
    return stops


def get_stop(stops: List[ColorStop], step: int) -> ColorStop:
    """
    Look up a stop by its step value.

    Raises:
        KeyError: If the scale has no stop with that step
    """
    for stop in stops:
        if stop.step == step:
            return stop
    raise KeyError(f"No stop {step} in scale (expected one of {SCALE_STEPS})")
