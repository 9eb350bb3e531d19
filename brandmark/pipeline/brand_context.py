"""Normalize loosely-shaped caller brand data into a strict BrandContext."""

from __future__ import annotations

from typing import Any, Optional

from brandmark.pipeline.models import (
    BrandArchetype,
    BrandAudience,
    BrandCompetitive,
    BrandContext,
    BrandIdentity,
    BrandPurpose,
    BrandStrategy,
    BrandValues,
)

DEFAULT_BRAND_NAME = "Brand"
DEFAULT_INDUSTRY = "Business"
DEFAULT_ARCHETYPE = "sage"

DEFAULTS = {
    "mission": "To deliver excellence",
    "vision": "To be the best in our field",
    "why": "To make a difference",
    "core_values": ("Quality", "Innovation", "Trust"),
    "unique_value": "Unique combination of quality and service",
    "audience_primary": "Professionals seeking quality",
    "demographics": "Adults 25-55",
    "psychographics": "Value-conscious, quality-focused",
    "pain_points": ("Finding reliable solutions",),
    "advantage": "Superior quality and service",
    "market_gap": "Underserved quality segment",
    "archetype_reasoning": "Reflects brand wisdom and expertise",
}


def _text(value: Any, default: str) -> str:
    """Non-blank string or the default."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _optional_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _items(value: Any, default: tuple[str, ...] = ()) -> tuple[str, ...]:
    """Non-blank strings from a list, or the default when none remain."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return default
    items = tuple(v.strip() for v in value if isinstance(v, str) and v.strip())
    return items or default


def _section(data: Any, key: str) -> dict:
    section = data.get(key) if isinstance(data, dict) else None
    return section if isinstance(section, dict) else {}


def build_brand_context(brand_data: Optional[dict] = None) -> BrandContext:
    """Build a BrandContext from the caller's ``{brand, strategy}`` payload.

    Expected shape (every key optional)::

        {
          "brand": {"name": ..., "industry": ...},
          "strategy": {
            "purpose": {"mission", "vision", "why"},
            "values": {"coreValues", "positioning", "uniqueValue"},
            "audience": {"primaryAudience", "demographics",
                         "psychographics", "painPoints"},
            "competitive": {"competitiveAdvantage", "marketGap",
                            "directCompetitors", "industry"},
            "archetype": {"selectedArchetype", "secondaryArchetype",
                          "reasoning"},
          },
        }

    Missing or blank values are replaced with defaults here so nothing
    downstream has to re-check optionality.
    """
    brand_data = brand_data or {}
    brand = _section(brand_data, "brand")
    strategy = _section(brand_data, "strategy")
    purpose = _section(strategy, "purpose")
    values = _section(strategy, "values")
    audience = _section(strategy, "audience")
    competitive = _section(strategy, "competitive")
    archetype = _section(strategy, "archetype")

    name = _text(brand.get("name"), DEFAULT_BRAND_NAME)
    industry = _text(
        brand.get("industry") or competitive.get("industry"),
        DEFAULT_INDUSTRY,
    )

    return BrandContext(
        brand_identity=BrandIdentity(
            name=name,
            industry=industry,
            industry_segment=_optional_text(brand.get("industrySegment")),
        ),
        brand_strategy=BrandStrategy(
            purpose=BrandPurpose(
                mission=_text(purpose.get("mission"), DEFAULTS["mission"]),
                vision=_text(purpose.get("vision"), DEFAULTS["vision"]),
                why=_text(purpose.get("why"), DEFAULTS["why"]),
            ),
            values=BrandValues(
                core_values=_items(values.get("coreValues"), DEFAULTS["core_values"]),
                positioning=_text(
                    values.get("positioning"),
                    f"{name} delivers exceptional value",
                ),
                unique_value=_text(values.get("uniqueValue"), DEFAULTS["unique_value"]),
            ),
            audience=BrandAudience(
                primary=_text(audience.get("primaryAudience"), DEFAULTS["audience_primary"]),
                demographics=_text(audience.get("demographics"), DEFAULTS["demographics"]),
                psychographics=_text(audience.get("psychographics"), DEFAULTS["psychographics"]),
                pain_points=_items(audience.get("painPoints"), DEFAULTS["pain_points"]),
            ),
            competitive=BrandCompetitive(
                advantage=_text(competitive.get("competitiveAdvantage"), DEFAULTS["advantage"]),
                market_gap=_text(competitive.get("marketGap"), DEFAULTS["market_gap"]),
                direct_competitors=_items(competitive.get("directCompetitors")),
            ),
            archetype=BrandArchetype(
                primary=_text(archetype.get("selectedArchetype"), DEFAULT_ARCHETYPE).lower(),
                secondary=(_optional_text(archetype.get("secondaryArchetype")) or "").lower() or None,
                reasoning=_text(archetype.get("reasoning"), DEFAULTS["archetype_reasoning"]),
            ),
        ),
    )
