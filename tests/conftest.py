"""
Test configuration and fixtures for design token generation tests.
"""
import pytest

from design_tokens.config import config
from design_tokens.services.colors.scale import generate_color_scale


@pytest.fixture
def brand_hex():
    """Tailwind blue-500, used as the reference brand color."""
    return "#3B82F6"


@pytest.fixture
def brand_scale(brand_hex):
    """Primary scale for the reference brand color."""
    return generate_color_scale(brand_hex)


@pytest.fixture
def strict_hex(monkeypatch):
    """Turn on strict hex parsing for one test."""
    monkeypatch.setattr(config, "STRICT_HEX", True)
    yield
