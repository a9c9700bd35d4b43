"""
Design Tokens - Type Scale

Typography scale built from musical interval ratios, with a line height
picked per size (larger text gets tighter leading).

    size = base_size * ratio ** step
"""

import json
from dataclasses import dataclass
from typing import List

from design_tokens.schemas import TypeScaleOptions

from .spacing import format_number, round_hundredths


@dataclass(frozen=True)
class ScalePreset:
    """A named scale ratio."""
    name: str
    ratio: float


@dataclass(frozen=True)
class TypeToken:
    """A named font size with its line height."""
    name: str
    size: float
    formatted: str
    line_height: str


SCALE_PRESETS = [
    ScalePreset("Minor Second", 1.067),
    ScalePreset("Major Second", 1.125),
    ScalePreset("Minor Third", 1.2),
    ScalePreset("Major Third", 1.25),
    ScalePreset("Perfect Fourth", 1.333),
    ScalePreset("Augmented Fourth", 1.414),
    ScalePreset("Perfect Fifth", 1.5),
    ScalePreset("Golden Ratio", 1.618),
]

# Names for sizes below base
TYPE_NAMES_DOWN = ['xxs', 'xs', 'sm']

# Names for sizes above base
TYPE_NAMES_UP = ['lg', 'xl', '2xl', '3xl', '4xl', '5xl', '6xl', '7xl', '8xl', '9xl']


def calculate_line_height(font_size: float) -> float:
    """Line height multiplier for a font size."""
    if font_size <= 14:
        return 1.7
    if font_size <= 18:
        return 1.6
    if font_size <= 24:
        return 1.5
    if font_size <= 32:
        return 1.4
    if font_size <= 48:
        return 1.3
    return 1.2


def _make_token(name: str, size: float, unit: str) -> TypeToken:
    return TypeToken(
        name=name,
        size=size,
        formatted=f"{format_number(size)}{unit}",
        line_height=f"{calculate_line_height(size):.2f}",
    )


def generate_type_scale(
    base_size: float,
    ratio: float,
    steps_up: int,
    steps_down: int,
    unit: str = "px"
) -> List[TypeToken]:
    """
    Generate a typography scale.

    Args:
        base_size: The base font size (typically 16)
        ratio: Scale ratio (e.g. 1.25 for Major Third)
        steps_up: Number of sizes above base (for headings)
        steps_down: Number of sizes below base (for small text)
        unit: 'px', 'rem' or 'em'

    Returns:
        Tokens from smallest to largest, with 'base' in between

    Raises:
        pydantic.ValidationError: If any parameter is out of range
    """
    options = TypeScaleOptions(
        base_size=base_size, ratio=ratio, steps_up=steps_up, steps_down=steps_down, unit=unit
    )
    tokens = []

    # Smallest first
    for i in range(options.steps_down, 0, -1):
        size = round_hundredths(options.base_size / options.ratio ** i)
        name_index = len(TYPE_NAMES_DOWN) - i
        name = TYPE_NAMES_DOWN[name_index] if name_index >= 0 else f"down-{i}"
        tokens.append(_make_token(name, size, options.unit))

    tokens.append(_make_token("base", options.base_size, options.unit))

    for i in range(1, options.steps_up + 1):
        size = round_hundredths(options.base_size * options.ratio ** i)
        name = TYPE_NAMES_UP[i - 1] if i <= len(TYPE_NAMES_UP) else f"{i + 1}xl"
        tokens.append(_make_token(name, size, options.unit))

    return tokens


def generate_css(tokens: List[TypeToken], prefix: str = "text") -> str:
    """Generate CSS custom properties for sizes and line heights."""
    css = ":root {\n"
    css += "  /* Font Sizes */\n"
    for token in tokens:
        css += f"  --{prefix}-{token.name}: {token.formatted};\n"
    css += "\n  /* Line Heights */\n"
    for token in tokens:
        css += f"  --leading-{token.name}: {token.line_height};\n"
    css += "}\n"
    return css


def generate_tailwind(tokens: List[TypeToken]) -> str:
    """Generate Tailwind config."""
    tw = "module.exports = {\n  theme: {\n    fontSize: {\n"
    for token in tokens:
        tw += f"      '{token.name}': ['{token.formatted}', {{ lineHeight: '{token.line_height}' }}],\n"
    tw += "    }\n  }\n}\n"
    return tw


def generate_json(tokens: List[TypeToken], prefix: str = "text") -> str:
    """Generate JSON tokens."""
    obj = {
        f"{prefix}-{token.name}": {"fontSize": token.formatted, "lineHeight": token.line_height}
        for token in tokens
    }
    return json.dumps({"typography": obj}, indent=2)
