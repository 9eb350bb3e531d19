"""Visual keyword extraction from brand strategy.

Plain substring classification: each rule table is an ordered list of
(predicate, result) pairs so the order can be read and tested on its own.
"""

from __future__ import annotations

from typing import Callable

from brandmark.pipeline.knowledge_base import lookup_archetype
from brandmark.pipeline.models import BrandContext, VisualKeywords

Predicate = Callable[[str], bool]


def contains_any(*needles: str) -> Predicate:
    """Predicate matching text that contains any of *needles*."""
    return lambda text: any(needle in text for needle in needles)


# Every matching rule contributes its keyword.
AUDIENCE_MOOD_RULES: list[tuple[Predicate, str]] = [
    (contains_any("professional", "business"), "professional"),
    (contains_any("creative", "artistic"), "creative"),
    (contains_any("young", "millennial"), "contemporary"),
    (contains_any("traditional", "conservative"), "established"),
    (contains_any("tech", "digital"), "innovative"),
    (contains_any("luxury", "premium"), "sophisticated"),
    (contains_any("eco", "sustainable"), "natural"),
    (contains_any("family", "parent"), "trustworthy"),
]
DEFAULT_AUDIENCE_MOOD = ["professional", "approachable"]

# First matching rule wins.
INDUSTRY_AVOID_RULES: list[tuple[Predicate, list[str]]] = [
    (contains_any("technology"), ["outdated tech imagery", "generic globe or circuit patterns"]),
    (contains_any("finance"), ["dollar signs", "piggy banks", "generic money imagery"]),
    (contains_any("healthcare"), ["red crosses (trademarked)", "generic heart with pulse"]),
    (contains_any("food"), ["generic fork and knife", "obvious food clipart"]),
    (contains_any("education"), ["graduation caps", "generic book stacks"]),
    (contains_any("legal"), ["scales of justice cliche", "gavel imagery"]),
    (contains_any("real_estate"), ["generic house outline", "roof shapes"]),
    (contains_any("fitness"), ["generic muscle arms", "running figures"]),
]
DEFAULT_INDUSTRY_AVOID = ["industry cliches", "overused symbols"]

UNIVERSAL_AVOID = [
    "generic clipart",
    "overly complex details that disappear at small sizes",
]


def mood_from_audience(psychographics: str) -> list[str]:
    text = psychographics.lower()
    moods = [mood for matches, mood in AUDIENCE_MOOD_RULES if matches(text)]
    return moods or list(DEFAULT_AUDIENCE_MOOD)


def industry_avoid(industry: str) -> list[str]:
    text = industry.lower()
    for matches, avoid in INDUSTRY_AVOID_RULES:
        if matches(text):
            return list(avoid)
    return list(DEFAULT_INDUSTRY_AVOID)


def extract_visual_keywords(brand: BrandContext) -> VisualKeywords:
    """Derive the mood/shape/symbol/color vocabulary for a brand."""
    visuals = lookup_archetype(brand.archetype)
    strategy = brand.brand_strategy
    value_moods = [value.lower() for value in strategy.values.core_values]

    return VisualKeywords(
        primary_mood=[*visuals.mood[:3], *value_moods[:2]],
        secondary_mood=[*visuals.mood[3:], *mood_from_audience(strategy.audience.psychographics)],
        shapes=list(visuals.shapes),
        symbols=list(visuals.symbols),
        colors_suggested=list(visuals.colors),
        typography_style=visuals.typography,
        avoid=[*visuals.avoid, *industry_avoid(brand.industry), *UNIVERSAL_AVOID],
    )
