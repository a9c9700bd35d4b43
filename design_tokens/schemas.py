"""
Design Tokens Schemas
Pydantic models for generator options and serializable palette documents.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from design_tokens.services.colors.scale import ColorStop


# ============================================================================
# GENERATOR OPTIONS
# ============================================================================

class SpacingScaleOptions(BaseModel):
    """Validated parameters for the spacing scale generator."""
    base_value: float = Field(..., gt=0, description="Value placed at the midpoint of the scale")
    ratio: float = Field(..., gt=0, description="Growth ratio between adjacent steps")
    steps: int = Field(..., ge=1, le=64, description="Total number of steps to generate")
    unit: Literal["px", "rem", "em"] = Field("px", description="Output unit")
    naming_style: Literal["tshirt", "numeric"] = Field(
        "tshirt",
        description="'tshirt' (xs, sm, md...) or 'numeric' (100, 200, 300...)"
    )


class TypeScaleOptions(BaseModel):
    """Validated parameters for the type scale generator."""
    base_size: float = Field(..., gt=0, description="Body font size")
    ratio: float = Field(..., gt=0, description="Scale ratio, e.g. 1.25 for Major Third")
    steps_up: int = Field(..., ge=0, le=32, description="Number of sizes above base")
    steps_down: int = Field(..., ge=0, le=32, description="Number of sizes below base")
    unit: Literal["px", "rem", "em"] = Field("px", description="Output unit")


# ============================================================================
# PALETTE DOCUMENT
# ============================================================================

class ColorStopModel(BaseModel):
    """One generated scale position."""
    step: int = Field(..., description="Scale tier (50-950)")
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Lowercase hex color #rrggbb")
    oklch: List[float] = Field(..., min_length=3, max_length=3, description="[L, C, H]")
    rgb: List[int] = Field(..., min_length=3, max_length=3, description="[r, g, b] 0-255")
    hsl: List[int] = Field(..., min_length=3, max_length=3, description="[h, s%, l%]")

    @classmethod
    def from_stop(cls, stop: ColorStop) -> "ColorStopModel":
        return cls(
            step=stop.step,
            hex=stop.hex,
            oklch=list(stop.oklch),
            rgb=list(stop.rgb),
            hsl=list(stop.hsl),
        )


class BrandOklch(BaseModel):
    """OKLCH coordinates of the input brand color."""
    l: float = Field(..., description="Perceptual lightness [0, 1]")
    c: float = Field(..., ge=0.0, description="Chroma")
    h: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees")


class PaletteMeta(BaseModel):
    """Input echo for a generated palette."""
    brand_hex: str = Field(..., description="Brand color as supplied by the caller")
    normalized_hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Canonical lowercase hex")
    brand_oklch: BrandOklch = Field(..., description="Brand color in OKLCH")


class PaletteArtifacts(BaseModel):
    """Optional rendered previews."""
    swatch_png_b64: Optional[str] = Field(None, description="Base64 PNG preview of all scales")
    swatch_metadata: Optional[Dict] = Field(None, description="Swatch geometry and hex mapping")


class PaletteDebug(BaseModel):
    """Timing information for palette generation."""
    timing_ms: Dict[str, float] = Field(..., description="Per-stage durations in milliseconds")
    scale_count: int = Field(..., description="Number of scales generated")


class PaletteResponse(BaseModel):
    """Complete palette generated from one brand color."""
    meta: PaletteMeta
    scales: Dict[str, List[ColorStopModel]] = Field(
        ...,
        description="Scales keyed by name: primary, neutral, success, warning, error, info"
    )
    artifacts: PaletteArtifacts = Field(default_factory=PaletteArtifacts)
    debug: PaletteDebug
