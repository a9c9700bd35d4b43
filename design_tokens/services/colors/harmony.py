"""
Design Tokens - Neutral & Semantic Harmony

Derives a brand-tinted neutral scale and the success/warning/error/info
scales from a single brand color. Every derived scale is produced by feeding
a synthetic base color into generate_color_scale, so lightness handling lives
in one place.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from loguru import logger

from . import hex_to_rgb, oklch_to_hex, rgb_to_oklch
from .scale import ColorStop, generate_color_scale

# Synthetic base colors sit at mid lightness so only their hue/chroma matter
NEUTRAL_LIGHTNESS = 0.55
NEUTRAL_CHROMA = 0.01
SEMANTIC_LIGHTNESS = 0.55
SEMANTIC_CHROMA = 0.15
DEFAULT_INFLUENCE = 0.15


@dataclass(frozen=True)
class SemanticTarget:
    """A semantic color role with its canonical hue and brand pull."""
    name: str
    hue: float  # Canonical hue in degrees
    influence: float  # Fraction of the way toward the brand hue [0, 1]


SEMANTIC_TARGETS: Tuple[SemanticTarget, ...] = (
    SemanticTarget("success", 145.0, 0.10),
    SemanticTarget("warning", 70.0, 0.10),
    SemanticTarget("error", 25.0, 0.08),
    SemanticTarget("info", 250.0, 0.15),
)


def normalize_hue(hue: float) -> float:
    """
    Wrap a hue in degrees into [0, 360).

    Args:
        hue: Hue in degrees (any value, including negative)

    Returns:
        Equivalent hue in [0, 360)
    """
    wrapped = hue % 360.0
    # float modulo can land exactly on 360 for tiny negative inputs
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def hue_delta(from_hue: float, to_hue: float) -> float:
    """
    Signed shortest rotation from one hue to another.

    Returns:
        Rotation in degrees within [-180, 180)
    """
    return ((to_hue - from_hue + 540.0) % 360.0) - 180.0


def get_hue_separation(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Returns:
        Minimum separation in degrees [0, 180]
    """
    return abs(hue_delta(h1, h2))


def blend_hue(base_hue: float, brand_hue: float, influence: float) -> float:
    """
    Pull a hue part of the way toward the brand hue along the short arc.

    350° and 10° at influence 0.5 blend to 0°, not 180°.

    Args:
        base_hue: Starting hue in degrees
        brand_hue: Hue to move toward, in degrees
        influence: 0 keeps base_hue, 1 lands on brand_hue

    Returns:
        Blended hue in [0, 360)
    """
    return normalize_hue(base_hue + hue_delta(base_hue, brand_hue) * influence)


def brand_hue_of(brand_hex: str, strict: Optional[bool] = None) -> float:
    """Extract the OKLCH hue of a brand color."""
    _, _, hue = rgb_to_oklch(*hex_to_rgb(brand_hex, strict=strict))
    return hue


def generate_neutral_scale(brand_hex: str, strict: Optional[bool] = None) -> List[ColorStop]:
    """
    Generate a gray scale tinted toward the brand hue.

    Args:
        brand_hex: Brand color in format #RRGGBB

    Returns:
        11-stop scale built from an almost desaturated brand-hue base
    """
    neutral_hex = oklch_to_hex(NEUTRAL_LIGHTNESS, NEUTRAL_CHROMA, brand_hue_of(brand_hex, strict=strict))
    logger.debug(f"Neutral base for {brand_hex}: {neutral_hex}")
    return generate_color_scale(neutral_hex)


def generate_harmonized_semantic(
    brand_hex: str,
    base_hue: float,
    influence: float = DEFAULT_INFLUENCE,
    strict: Optional[bool] = None
) -> str:
    """
    Build the synthetic base color for a semantic role.

    Args:
        brand_hex: Brand color in format #RRGGBB
        base_hue: Canonical hue of the role in degrees
        influence: How far to pull toward the brand hue

    Returns:
        Hex color at L=0.55, C=0.15 and the blended hue
    """
    blended = blend_hue(base_hue, brand_hue_of(brand_hex, strict=strict), influence)
    return oklch_to_hex(SEMANTIC_LIGHTNESS, SEMANTIC_CHROMA, blended)


def generate_semantic_colors(brand_hex: str, strict: Optional[bool] = None) -> Dict[str, List[ColorStop]]:
    """
    Generate success, warning, error and info scales harmonized with a brand.

    Args:
        brand_hex: Brand color in format #RRGGBB

    Returns:
        Dictionary mapping each semantic role to its 11-stop scale
    """
    semantic = {}
    for target in SEMANTIC_TARGETS:
        base_hex = generate_harmonized_semantic(brand_hex, target.hue, target.influence, strict=strict)
        semantic[target.name] = generate_color_scale(base_hex)

    mid_tones = {name: stops[5].hex for name, stops in semantic.items()}
    logger.debug(f"Semantic 500 stops for {brand_hex}: {mid_tones}")
    return semantic
