"""Tests for the archetype and style vocabularies."""

from __future__ import annotations

import pytest

from brandmark.pipeline.knowledge_base import (
    ARCHETYPE_BASE_COLORS,
    ARCHETYPE_VISUALS,
    DEFAULT_BASE_COLORS,
    LOGO_TYPE_DESCRIPTIONS,
    STYLE_VISUALS,
    archetype_base_colors,
    blend_archetypes,
    lookup_archetype,
    lookup_style,
)
from brandmark.pipeline.models import LogoStyle, LogoType

ARCHETYPES = {
    "innocent", "explorer", "sage", "hero", "outlaw", "magician",
    "regular", "lover", "jester", "caregiver", "creator", "ruler",
}


class TestTables:
    def test_all_archetypes_present(self):
        assert set(ARCHETYPE_VISUALS) == ARCHETYPES

    def test_all_styles_present(self):
        assert set(STYLE_VISUALS) == set(LogoStyle)

    def test_every_logo_type_described(self):
        assert set(LOGO_TYPE_DESCRIPTIONS) == set(LogoType)

    def test_every_archetype_has_base_colors(self):
        assert set(ARCHETYPE_BASE_COLORS) == ARCHETYPES
        for colors in ARCHETYPE_BASE_COLORS.values():
            assert len(colors) == 4
            assert all(c.startswith("#") and len(c) == 7 for c in colors)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ARCHETYPE_VISUALS["sage"] = ARCHETYPE_VISUALS["hero"]

    def test_records_are_non_empty(self):
        for visuals in ARCHETYPE_VISUALS.values():
            assert visuals.colors and visuals.shapes and visuals.mood
            assert visuals.symbols and visuals.avoid and visuals.typography

    def test_style_records_are_non_empty(self):
        for visuals in STYLE_VISUALS.values():
            assert visuals.description
            assert visuals.characteristics and visuals.technical_notes


class TestLookup:
    def test_known_archetype(self):
        assert lookup_archetype("hero") is ARCHETYPE_VISUALS["hero"]

    def test_case_and_whitespace_insensitive(self):
        assert lookup_archetype("  Jester ") is ARCHETYPE_VISUALS["jester"]

    @pytest.mark.parametrize("name", ["wizard", "", None])
    def test_unknown_falls_back_to_sage(self, name):
        assert lookup_archetype(name) is ARCHETYPE_VISUALS["sage"]

    def test_style_by_string(self):
        assert lookup_style("minimal") is STYLE_VISUALS[LogoStyle.MINIMAL]

    def test_unknown_style_rejected(self):
        with pytest.raises(ValueError):
            lookup_style("baroque")


class TestBlend:
    def test_without_secondary_returns_primary(self):
        assert blend_archetypes("hero") is ARCHETYPE_VISUALS["hero"]

    def test_unknown_secondary_ignored(self):
        assert blend_archetypes("hero", "wizard") is ARCHETYPE_VISUALS["hero"]

    def test_primary_leads(self):
        hero = ARCHETYPE_VISUALS["hero"]
        sage = ARCHETYPE_VISUALS["sage"]
        blended = blend_archetypes("hero", "sage")
        assert blended.colors == hero.colors[:3] + sage.colors[:2]
        assert blended.typography == hero.typography

    def test_avoid_is_deduplicated(self):
        blended = blend_archetypes("explorer", "outlaw")
        assert blended.avoid.count("corporate sterility") == 1


class TestBaseColors:
    def test_known(self):
        assert archetype_base_colors("Ruler") == ARCHETYPE_BASE_COLORS["ruler"]

    def test_unknown_uses_default(self):
        assert archetype_base_colors("wizard") == DEFAULT_BASE_COLORS
