"""
Design Tokens

Perceptually uniform color scales (OKLCH), brand-harmonized semantic and
neutral palettes, plus spacing and type scales, rendered as CSS, Tailwind
or JSON tokens.
"""

from design_tokens.services.colors import (
    hex_to_rgb, rgb_to_hex, srgb_to_linear, linear_to_srgb,
    rgb_to_oklch, oklch_to_rgb, rgb_to_hsl,
)
from design_tokens.services.colors.scale import ColorStop, LIGHTNESS_STOPS, generate_color_scale
from design_tokens.services.colors.harmony import generate_neutral_scale, generate_semantic_colors
from design_tokens.services.colors.formatting import format_color
from design_tokens.services.orchestrator import generate_palette
from design_tokens.utils.logging import configure_logging

__version__ = "1.0.0"

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "srgb_to_linear",
    "linear_to_srgb",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "rgb_to_hsl",
    "ColorStop",
    "LIGHTNESS_STOPS",
    "generate_color_scale",
    "generate_neutral_scale",
    "generate_semantic_colors",
    "format_color",
    "generate_palette",
    "configure_logging",
]
