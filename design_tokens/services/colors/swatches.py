"""
Design Tokens - Swatch Generation

Renders generated scales as a PNG preview: one labeled row of chips per
scale, returned base64-encoded so nothing touches the filesystem.
"""

import base64
import io
from typing import Any, Dict, List, Mapping, Optional

from PIL import Image, ImageDraw

from design_tokens.config import config

from .scale import ColorStop

ScaleSet = Mapping[str, List[ColorStop]]

LABEL_HEIGHT = 16
BACKGROUND = (255, 255, 255)


def create_color_chip(stop: ColorStop, chip_size: int = 40) -> Image.Image:
    """Create a single solid chip for one stop."""
    return Image.new('RGB', (chip_size, chip_size), stop.rgb)


def create_scale_row(stops: List[ColorStop], chip_size: int = 40, spacing: int = 2) -> Image.Image:
    """
    Create a horizontal row of chips for one scale.

    Args:
        stops: Scale stops in display order
        chip_size: Size of each chip in pixels
        spacing: Spacing between chips in pixels

    Returns:
        PIL Image of the row
    """
    num_chips = len(stops)
    row_width = num_chips * chip_size + (num_chips - 1) * spacing
    row = Image.new('RGB', (row_width, chip_size), BACKGROUND)

    x_pos = 0
    for stop in stops:
        row.paste(create_color_chip(stop, chip_size), (x_pos, 0))
        x_pos += chip_size + spacing

    return row


def create_labeled_swatch(
    scales: ScaleSet,
    chip_size: int = 40,
    spacing: int = 2,
    row_spacing: int = 4,
    include_labels: bool = True
) -> Image.Image:
    """
    Stack one labeled row per scale into a single image.

    Args:
        scales: Mapping of scale name to stops, rendered in mapping order
        chip_size: Size of each chip
        spacing: Horizontal spacing between chips
        row_spacing: Vertical spacing between rows
        include_labels: Draw the scale name above each row
    """
    rows = [(name, create_scale_row(stops, chip_size, spacing)) for name, stops in scales.items() if stops]

    label_height = LABEL_HEIGHT if include_labels else 0
    width = max(row.width for _, row in rows)
    height = sum(label_height + row.height + row_spacing for _, row in rows) - row_spacing

    swatch = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(swatch)

    y_pos = 0
    for name, row in rows:
        if include_labels:
            draw.text((2, y_pos), name.title(), fill=(0, 0, 0))
            y_pos += label_height
        swatch.paste(row, (0, y_pos))
        y_pos += row.height + row_spacing

    return swatch


def render_scale_swatch(
    scales: ScaleSet,
    chip_size: Optional[int] = None,
    spacing: Optional[int] = None,
    include_labels: bool = True
) -> str:
    """
    Render scales as a base64-encoded PNG swatch.

    Args:
        scales: Mapping of scale name to stops
        chip_size: Chip edge in pixels (defaults to config.SWATCH_CHIP_SIZE)
        spacing: Gap between chips (defaults to config.SWATCH_SPACING)
        include_labels: Draw scale names above rows

    Returns:
        Base64-encoded PNG image string

    Raises:
        ValueError: If there is nothing to render or the chip size is out of range
    """
    chip_size = config.SWATCH_CHIP_SIZE if chip_size is None else chip_size
    spacing = config.SWATCH_SPACING if spacing is None else spacing

    if not config.validate_chip_size(chip_size):
        raise ValueError(f"Chip size out of range: {chip_size}")
    if spacing < 0:
        raise ValueError(f"Spacing must be non-negative: {spacing}")
    if not any(scales.values()):
        raise ValueError("No color stops to render")

    swatch = create_labeled_swatch(scales, chip_size, spacing, include_labels=include_labels)

    buffer = io.BytesIO()
    swatch.save(buffer, format='PNG')
    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def create_swatch_metadata(scales: ScaleSet, chip_size: int, spacing: int) -> Dict[str, Any]:
    """
    Describe swatch geometry and content.

    Returns:
        Dictionary with chip geometry, per-scale counts and hex mapping
    """
    return {
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "total_colors": sum(len(stops) for stops in scales.values()),
        "scales": {name: len(stops) for name, stops in scales.items() if stops},
        "color_mapping": {
            name: [stop.hex for stop in stops]
            for name, stops in scales.items()
            if stops
        }
    }
