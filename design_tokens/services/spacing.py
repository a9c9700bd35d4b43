"""
Design Tokens - Spacing Scale

Exponential spacing scale centered on a base value:

    value = base_value * ratio ** (step - midpoint)
"""

import json
import math
from dataclasses import dataclass
from typing import Dict, List

from design_tokens.schemas import SpacingScaleOptions

# T-shirt size names from smallest to largest
TSHIRT_SIZES = ['3xs', '2xs', 'xs', 'sm', 'md', 'lg', 'xl', '2xl', '3xl', '4xl', '5xl', '6xl']

RATIO_PRESETS: Dict[str, float] = {
    "tight": 1.25,     # Subtle progression
    "balanced": 1.5,   # Good default
    "golden": 1.618,   # Golden ratio
    "dramatic": 2.0,   # Doubles each step (4, 8, 16, 32...)
}


@dataclass(frozen=True)
class SpacingToken:
    """A named spacing value."""
    name: str
    value: float
    formatted: str


def round_hundredths(value: float) -> float:
    """Round to 2 decimals with .005 going up."""
    return math.floor(value * 100 + 0.5) / 100


def format_number(value: float) -> str:
    """Render a number the way CSS expects: 4 not 4.0, 2.67 stays 2.67."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def generate_spacing_scale(
    base_value: float,
    ratio: float,
    steps: int,
    unit: str = "px",
    naming_style: str = "tshirt"
) -> List[SpacingToken]:
    """
    Generate a spacing scale.

    Args:
        base_value: The middle value of the scale (e.g. 4 for 4px)
        ratio: Growth ratio between steps (e.g. 1.5, 2)
        steps: Total number of steps to generate
        unit: 'px', 'rem' or 'em'
        naming_style: 'tshirt' (xs, sm, md...) or 'numeric' (100, 200, 300...)

    Returns:
        Tokens from smallest to largest

    Raises:
        pydantic.ValidationError: If any parameter is out of range
    """
    options = SpacingScaleOptions(
        base_value=base_value, ratio=ratio, steps=steps, unit=unit, naming_style=naming_style
    )
    midpoint = options.steps // 2
    tokens = []

    for i in range(options.steps):
        value = round_hundredths(options.base_value * options.ratio ** (i - midpoint))

        if options.naming_style == "tshirt":
            # Center the midpoint on 'md' where the table allows it
            size_index = i + max(0, 4 - midpoint)
            name = TSHIRT_SIZES[size_index] if size_index < len(TSHIRT_SIZES) else str(i + 1)
        else:
            name = str((i + 1) * 100)

        tokens.append(SpacingToken(name=name, value=value, formatted=f"{format_number(value)}{options.unit}"))

    return tokens


def generate_css(tokens: List[SpacingToken], prefix: str = "spacing") -> str:
    """Generate CSS custom properties."""
    css = ":root {\n"
    for token in tokens:
        css += f"  --{prefix}-{token.name}: {token.formatted};\n"
    css += "}\n"
    return css


def generate_tailwind(tokens: List[SpacingToken]) -> str:
    """Generate Tailwind config."""
    tw = "module.exports = {\n  theme: {\n    spacing: {\n"
    for token in tokens:
        tw += f"      '{token.name}': '{token.formatted}',\n"
    tw += "    }\n  }\n}\n"
    return tw


def generate_json(tokens: List[SpacingToken], prefix: str = "spacing") -> str:
    """Generate JSON tokens."""
    obj = {f"{prefix}-{token.name}": token.formatted for token in tokens}
    return json.dumps({"spacing": obj}, indent=2)
