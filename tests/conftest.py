"""Shared fixtures."""

from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from brandmark.pipeline.brand_context import build_brand_context
from brandmark.pipeline.models import (
    GenerationJob,
    GenerationOptions,
    LogoGenerationRequest,
    VisualPreferences,
)


@pytest.fixture
def brand_data() -> dict:
    return {
        "brand": {"name": "Northwind", "industry": "Technology"},
        "strategy": {
            "purpose": {
                "mission": "Make logistics software effortless",
                "vision": "Every shipment tracked in real time",
                "why": "Supply chains deserve clarity",
            },
            "values": {
                "coreValues": ["Clarity", "Reliability"],
                "positioning": "The calm control tower for modern logistics",
            },
            "audience": {
                "primaryAudience": "Operations managers at mid-size shippers",
                "psychographics": "Young creative professional with a tech focus",
            },
            "archetype": {"selectedArchetype": "Sage", "secondaryArchetype": "explorer"},
        },
    }


@pytest.fixture
def brand(brand_data):
    return build_brand_context(brand_data)


@pytest.fixture
def make_job(brand):
    def _make(user_id: str | None = "user-1", **options) -> GenerationJob:
        return GenerationJob(
            user_id=user_id,
            request=LogoGenerationRequest(
                brand_context=brand,
                visual_preferences=VisualPreferences(),
                generation_options=GenerationOptions(**options),
            ),
        )

    return _make


@pytest.fixture
def png_base64() -> str:
    buffer = io.BytesIO()
    Image.new("RGBA", (8, 8), (59, 130, 246, 255)).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode()
