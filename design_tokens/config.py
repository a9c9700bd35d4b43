"""
Design Tokens Configuration
Manages environment variables and defaults for the token generators.
"""
import os
from typing import Literal


class Config:
    """Configuration class for design token generation."""

    # Logging
    LOG_LEVEL: str = os.environ.get("DESIGN_TOKENS_LOG_LEVEL", "INFO")

    # Input handling: 1 rejects malformed hex instead of falling back to black
    STRICT_HEX: bool = bool(int(os.environ.get("DESIGN_TOKENS_STRICT_HEX", "0")))

    # Output defaults
    COLOR_FORMAT: Literal["oklch", "hsl", "rgb", "hex"] = os.environ.get("DESIGN_TOKENS_COLOR_FORMAT", "hex")
    CSS_PREFIX: str = os.environ.get("DESIGN_TOKENS_CSS_PREFIX", "color")

    # Swatch previews
    SWATCH_CHIP_SIZE: int = int(os.environ.get("DESIGN_TOKENS_SWATCH_CHIP", "40"))
    SWATCH_SPACING: int = int(os.environ.get("DESIGN_TOKENS_SWATCH_SPACING", "2"))

    # Supported values
    COLOR_FORMATS = ("oklch", "hsl", "rgb", "hex")
    UNITS = ("px", "rem", "em")
    NAMING_STYLES = ("tshirt", "numeric")

    @classmethod
    def validate_color_format(cls, color_format: str) -> bool:
        """Validate color output format."""
        return color_format in cls.COLOR_FORMATS

    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size."""
        return 4 <= chip_size <= 256

    @classmethod
    def validate_unit(cls, unit: str) -> bool:
        """Validate CSS length unit."""
        return unit in cls.UNITS


# Global config instance
config = Config()
