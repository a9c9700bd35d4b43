"""
Design Tokens - Color Output Formatting

Renders ColorStop values as CSS color literals and assembles whole scale
sets into CSS custom properties, a Tailwind theme block, or JSON tokens.
The literals produced here are concatenated into stylesheets verbatim, so
their exact text is part of the contract.
"""

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Mapping, Optional

from design_tokens.config import config

from .scale import ColorStop

ScaleSet = Mapping[str, List[ColorStop]]


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point text for a float with ties rounded up, like JS toFixed.

    Works on the exact binary value, so 0.0625 -> "0.063" and 25.25 -> "25.3".
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_color(stop: ColorStop, color_format: str = "hex") -> str:
    """
    Render one stop as a CSS color literal.

    Args:
        stop: Color stop to render
        color_format: "oklch", "hsl", "rgb" or "hex"; anything else renders hex

    Returns:
        e.g. "oklch(55.0% 0.150 25.3)", "hsl(10 75% 55%)", "rgb(200 50 40)", "#c83228"
    """
    if color_format == "oklch":
        lightness, chroma, hue = stop.oklch
        return f"oklch({to_fixed(lightness * 100, 1)}% {to_fixed(chroma, 3)} {to_fixed(hue, 1)})"
    if color_format == "hsl":
        h, s, l = stop.hsl
        return f"hsl({h} {s}% {l}%)"
    if color_format == "rgb":
        r, g, b = stop.rgb
        return f"rgb({r} {g} {b})"
    return stop.hex


def scale_to_dict(stops: List[ColorStop], color_format: str = "hex") -> Dict[str, str]:
    """Map step (as string) to its formatted literal, in step order."""
    return {str(stop.step): format_color(stop, color_format) for stop in stops}


def generate_css(scales: ScaleSet, color_format: Optional[str] = None, prefix: Optional[str] = None) -> str:
    """Generate CSS custom properties for every stop of every scale."""
    color_format = color_format or config.COLOR_FORMAT
    prefix = prefix or config.CSS_PREFIX

    css = ":root {\n"
    for name, stops in scales.items():
        for stop in stops:
            css += f"  --{prefix}-{name}-{stop.step}: {format_color(stop, color_format)};\n"
    css += "}\n"
    return css


def generate_tailwind(scales: ScaleSet, color_format: Optional[str] = None) -> str:
    """Generate a Tailwind config extending theme.colors."""
    color_format = color_format or config.COLOR_FORMAT

    tw = "module.exports = {\n  theme: {\n    colors: {\n"
    for name, stops in scales.items():
        tw += f"      '{name}': {{\n"
        for stop in stops:
            tw += f"        {stop.step}: '{format_color(stop, color_format)}',\n"
        tw += "      },\n"
    tw += "    }\n  }\n}\n"
    return tw


def generate_json(scales: ScaleSet, color_format: Optional[str] = None, prefix: Optional[str] = None) -> str:
    """Generate flat JSON tokens under a top-level "color" key."""
    color_format = color_format or config.COLOR_FORMAT
    prefix = prefix or config.CSS_PREFIX

    tokens = {}
    for name, stops in scales.items():
        for stop in stops:
            tokens[f"{prefix}-{name}-{stop.step}"] = format_color(stop, color_format)
    return json.dumps({"color": tokens}, indent=2)
