"""
Unit tests for the spacing and type scale generators.
"""

import json

import pytest
from pydantic import ValidationError

from design_tokens.services import spacing, typography
from design_tokens.services.spacing import (
    RATIO_PRESETS, TSHIRT_SIZES, format_number, generate_spacing_scale, round_hundredths
)
from design_tokens.services.typography import (
    SCALE_PRESETS, calculate_line_height, generate_type_scale
)


class TestNumberFormatting:
    """Test rounding and CSS number rendering."""

    def test_round_hundredths(self):
        assert round_hundredths(2.6666) == 2.67
        assert round_hundredths(0.125) == 0.13  # .5 goes up

    def test_format_number(self):
        assert format_number(4.0) == "4"
        assert format_number(2.67) == "2.67"
        assert format_number(0.5) == "0.5"


class TestSpacingScale:
    """Test spacing scale generation."""

    def test_tshirt_doubling(self):
        """Base 4, ratio 2, 5 steps centers 4px on 'md'."""
        tokens = generate_spacing_scale(4, 2, 5, "px", "tshirt")
        assert [t.name for t in tokens] == ["xs", "sm", "md", "lg", "xl"]
        assert [t.value for t in tokens] == [1.0, 2.0, 4.0, 8.0, 16.0]
        assert [t.formatted for t in tokens] == ["1px", "2px", "4px", "8px", "16px"]

    def test_numeric_names(self):
        tokens = generate_spacing_scale(4, 1.5, 3, "rem", "numeric")
        assert [t.name for t in tokens] == ["100", "200", "300"]
        assert [t.formatted for t in tokens] == ["2.67rem", "4rem", "6rem"]

    def test_long_scale_falls_back_to_index_names(self):
        """Steps past the end of the size table use their 1-based index."""
        tokens = generate_spacing_scale(4, 1.25, 13, "px", "tshirt")
        assert [t.name for t in tokens[:12]] == TSHIRT_SIZES
        assert tokens[12].name == "13"

    def test_presets(self):
        assert RATIO_PRESETS["golden"] == 1.618
        assert RATIO_PRESETS["dramatic"] == 2.0

    def test_invalid_options(self):
        with pytest.raises(ValidationError):
            generate_spacing_scale(4, 0, 5)
        with pytest.raises(ValidationError):
            generate_spacing_scale(-1, 2, 5)
        with pytest.raises(ValidationError):
            generate_spacing_scale(4, 2, 5, unit="pt")
        with pytest.raises(ValidationError):
            generate_spacing_scale(4, 2, 5, naming_style="roman")

    def test_emitters(self):
        tokens = generate_spacing_scale(4, 2, 3, "px", "tshirt")
        assert spacing.generate_css(tokens) == (
            ":root {\n  --spacing-sm: 2px;\n  --spacing-md: 4px;\n  --spacing-lg: 8px;\n}\n"
        )
        assert spacing.generate_tailwind(tokens) == (
            "module.exports = {\n  theme: {\n    spacing: {\n"
            "      'sm': '2px',\n      'md': '4px',\n      'lg': '8px',\n"
            "    }\n  }\n}\n"
        )
        assert json.loads(spacing.generate_json(tokens, prefix="space")) == {
            "spacing": {"space-sm": "2px", "space-md": "4px", "space-lg": "8px"}
        }


class TestTypeScale:
    """Test type scale generation."""

    def test_line_heights(self):
        assert calculate_line_height(12) == 1.7
        assert calculate_line_height(14) == 1.7
        assert calculate_line_height(16) == 1.6
        assert calculate_line_height(24) == 1.5
        assert calculate_line_height(32) == 1.4
        assert calculate_line_height(48) == 1.3
        assert calculate_line_height(49) == 1.2

    def test_major_third(self):
        """16px at 1.25 with two steps each way."""
        tokens = generate_type_scale(16, 1.25, 2, 2, "px")
        assert [t.name for t in tokens] == ["xs", "sm", "base", "lg", "xl"]
        assert [t.formatted for t in tokens] == ["10.24px", "12.8px", "16px", "20px", "25px"]
        assert [t.line_height for t in tokens] == ["1.70", "1.70", "1.60", "1.50", "1.40"]

    def test_name_fallbacks(self):
        """Sizes beyond the name tables get generated names."""
        tokens = generate_type_scale(16, 1.125, 11, 4, "rem")
        assert tokens[0].name == "down-4"
        assert [t.name for t in tokens[1:4]] == ["xxs", "xs", "sm"]
        assert tokens[4].name == "base"
        assert tokens[-1].name == "12xl"

    def test_no_steps(self):
        tokens = generate_type_scale(16, 1.25, 0, 0)
        assert [t.name for t in tokens] == ["base"]

    def test_presets(self):
        ratios = {p.name: p.ratio for p in SCALE_PRESETS}
        assert len(ratios) == 8
        assert ratios["Major Third"] == 1.25

    def test_invalid_options(self):
        with pytest.raises(ValidationError):
            generate_type_scale(0, 1.25, 2, 2)
        with pytest.raises(ValidationError):
            generate_type_scale(16, 1.25, -1, 2)

    def test_emitters(self):
        tokens = generate_type_scale(16, 1.25, 1, 0)
        assert typography.generate_css(tokens) == (
            ":root {\n"
            "  /* Font Sizes */\n"
            "  --text-base: 16px;\n"
            "  --text-lg: 20px;\n"
            "\n  /* Line Heights */\n"
            "  --leading-base: 1.60;\n"
            "  --leading-lg: 1.50;\n"
            "}\n"
        )
        assert "      'lg': ['20px', { lineHeight: '1.50' }],\n" in typography.generate_tailwind(tokens)
        assert json.loads(typography.generate_json(tokens)) == {
            "typography": {
                "text-base": {"fontSize": "16px", "lineHeight": "1.60"},
                "text-lg": {"fontSize": "20px", "lineHeight": "1.50"},
            }
        }
