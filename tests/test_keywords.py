"""Tests for visual keyword extraction."""

from __future__ import annotations

from brandmark.pipeline.brand_context import build_brand_context
from brandmark.pipeline.keywords import (
    DEFAULT_AUDIENCE_MOOD,
    DEFAULT_INDUSTRY_AVOID,
    UNIVERSAL_AVOID,
    extract_visual_keywords,
    industry_avoid,
    mood_from_audience,
)
from brandmark.pipeline.knowledge_base import ARCHETYPE_VISUALS


class TestAudienceMood:
    def test_every_matching_rule_contributes(self):
        assert mood_from_audience("young creative professional") == [
            "professional",
            "creative",
            "contemporary",
        ]

    def test_case_insensitive(self):
        assert mood_from_audience("LUXURY shoppers") == ["sophisticated"]

    def test_no_match_gives_default(self):
        assert mood_from_audience("cat owners") == DEFAULT_AUDIENCE_MOOD


class TestIndustryAvoid:
    def test_first_match_wins(self):
        # "technology" precedes "finance" in rule order
        assert industry_avoid("Technology and Finance")[0] == "outdated tech imagery"

    def test_finance(self):
        assert "dollar signs" in industry_avoid("finance")

    def test_unknown_industry(self):
        assert industry_avoid("Pet grooming") == DEFAULT_INDUSTRY_AVOID


class TestExtract:
    def test_primary_mood_blends_archetype_and_values(self, brand):
        keywords = extract_visual_keywords(brand)
        sage = ARCHETYPE_VISUALS["sage"]
        assert keywords.primary_mood == [*sage.mood[:3], "clarity", "reliability"]

    def test_secondary_mood_includes_audience(self, brand):
        keywords = extract_visual_keywords(brand)
        assert keywords.secondary_mood[:2] == list(ARCHETYPE_VISUALS["sage"].mood[3:])
        assert "innovative" in keywords.secondary_mood

    def test_avoid_ends_with_universal(self, brand):
        keywords = extract_visual_keywords(brand)
        assert keywords.avoid[-2:] == UNIVERSAL_AVOID
        assert "outdated tech imagery" in keywords.avoid

    def test_unknown_archetype_uses_sage(self):
        brand = build_brand_context({
            "strategy": {"archetype": {"selectedArchetype": "wizard"}},
        })
        keywords = extract_visual_keywords(brand)
        assert keywords.typography_style == ARCHETYPE_VISUALS["sage"].typography
