"""
Design Tokens - Palette Orchestrator

Coordinates the whole palette build for one brand color: primary scale,
brand-tinted neutrals, harmonized semantic scales and an optional swatch
preview, assembled into a PaletteResponse with timing data.
"""

import time
from typing import Dict, List, Optional

from design_tokens.config import config
from design_tokens.schemas import (
    BrandOklch, ColorStopModel, PaletteArtifacts, PaletteDebug, PaletteMeta, PaletteResponse,
)
from design_tokens.utils.logging import get_logger

from .colors import hex_to_rgb, rgb_to_hex, rgb_to_oklch
from .colors.harmony import generate_neutral_scale, generate_semantic_colors
from .colors.scale import ColorStop, generate_color_scale
from .colors.swatches import create_swatch_metadata, render_scale_swatch

SCALE_ORDER = ["primary", "neutral", "success", "warning", "error", "info"]


def build_scales(
    brand_hex: str,
    include_neutral: bool = True,
    include_semantic: bool = True,
    strict: Optional[bool] = None
) -> Dict[str, List[ColorStop]]:
    """
    Generate every scale for a brand color, keyed in SCALE_ORDER.

    Args:
        brand_hex: Brand color in format #RRGGBB
        include_neutral: Add the brand-tinted neutral scale
        include_semantic: Add success, warning, error and info scales
        strict: Forwarded to hex parsing

    Returns:
        Ordered mapping of scale name to 11-stop scale
    """
    scales = {"primary": generate_color_scale(brand_hex, strict=strict)}
    if include_neutral:
        scales["neutral"] = generate_neutral_scale(brand_hex, strict=strict)
    if include_semantic:
        scales.update(generate_semantic_colors(brand_hex, strict=strict))

    return {name: scales[name] for name in SCALE_ORDER if name in scales}


def generate_palette(
    brand_hex: str,
    include_neutral: bool = True,
    include_semantic: bool = True,
    return_swatch: bool = False,
    chip_size: Optional[int] = None,
    spacing: Optional[int] = None,
    strict: Optional[bool] = None
) -> PaletteResponse:
    """
    Generate a complete palette document from one brand color.

    Args:
        brand_hex: Brand color in format #RRGGBB
        include_neutral: Add the brand-tinted neutral scale
        include_semantic: Add the four semantic scales
        return_swatch: Render a base64 PNG preview of all scales
        chip_size: Swatch chip edge in pixels
        spacing: Swatch chip spacing in pixels
        strict: Reject malformed hex instead of falling back to black

    Returns:
        PaletteResponse with meta, scales, artifacts and timing

    Raises:
        ValueError: If strict parsing rejects the brand color, or the swatch
            parameters are invalid
    """
    log = get_logger()
    start_time = time.time()

    # Parse once; everything downstream sees the canonical hex
    rgb = hex_to_rgb(brand_hex, strict=strict)
    normalized_hex = rgb_to_hex(*rgb)
    brand_l, brand_c, brand_h = rgb_to_oklch(*rgb)

    scales_start = time.time()
    scales = build_scales(normalized_hex, include_neutral, include_semantic)
    scales_time = time.time() - scales_start

    chip_size = config.SWATCH_CHIP_SIZE if chip_size is None else chip_size
    spacing = config.SWATCH_SPACING if spacing is None else spacing

    artifacts = PaletteArtifacts()
    swatch_time = 0.0
    if return_swatch:
        swatch_start = time.time()
        artifacts = PaletteArtifacts(
            swatch_png_b64=render_scale_swatch(scales, chip_size, spacing),
            swatch_metadata=create_swatch_metadata(scales, chip_size, spacing),
        )
        swatch_time = time.time() - swatch_start

    total_time = time.time() - start_time

    response = PaletteResponse(
        meta=PaletteMeta(
            brand_hex=brand_hex,
            normalized_hex=normalized_hex,
            brand_oklch=BrandOklch(l=brand_l, c=brand_c, h=brand_h),
        ),
        scales={
            name: [ColorStopModel.from_stop(stop) for stop in stops]
            for name, stops in scales.items()
        },
        artifacts=artifacts,
        debug=PaletteDebug(
            timing_ms={
                "scales": round(scales_time * 1000, 2),
                "swatch": round(swatch_time * 1000, 2),
                "total": round(total_time * 1000, 2),
            },
            scale_count=len(scales),
        ),
    )

    log.debug(
        "Palette generated",
        extra={
            "brand_hex": response.meta.normalized_hex,
            "scales": list(scales.keys()),
            "swatch": return_swatch,
            "total_ms": response.debug.timing_ms["total"],
        }
    )
    return response
