"""Tests for the deterministic fallback artefacts."""

from __future__ import annotations

from xml.etree import ElementTree

from brandmark.pipeline.fallbacks import (
    FALLBACK_LOGO_STYLES,
    generate_fallback_logos,
    generate_fallback_palettes,
    generate_fallback_typography,
    generate_logo_variations,
    generate_svg_logo,
)
from brandmark.pipeline.knowledge_base import ARCHETYPE_BASE_COLORS, DEFAULT_BASE_COLORS


class TestSvgLogo:
    def test_name_is_escaped(self):
        svg = generate_svg_logo("<script>alert(1)</script>", "minimal")
        assert "<script>" not in svg
        assert "&lt;script&gt;" in svg

    def test_ampersand_escaped_and_parseable(self):
        svg = generate_svg_logo("Salt & Pepper", "modern")
        root = ElementTree.fromstring(svg)
        texts = [el.text for el in root.iter() if el.tag.endswith("text")]
        assert texts == ["Salt & Pepper"]

    def test_unknown_style_uses_default(self):
        svg = generate_svg_logo("Acme", "baroque")
        assert svg.startswith("<svg")
        assert "Acme" in svg


class TestFallbackLogos:
    def test_one_logo_per_style(self):
        logos = generate_fallback_logos("Acme")
        assert [logo.style for logo in logos] == FALLBACK_LOGO_STYLES
        assert all(not logo.ai_generated for logo in logos)
        assert all(logo.url is None for logo in logos)

    def test_variations(self):
        assert [v.type for v in generate_logo_variations()] == [
            "horizontal", "vertical", "icon", "monochrome",
        ]


class TestFallbackPalettes:
    def test_one_palette_per_base_color(self):
        palettes = generate_fallback_palettes("hero")
        assert [p.primary for p in palettes] == list(ARCHETYPE_BASE_COLORS["hero"])
        assert all(len(p.colors) == 5 and not p.ai_generated for p in palettes)

    def test_unknown_archetype(self):
        palettes = generate_fallback_palettes(None)
        assert [p.primary for p in palettes] == list(DEFAULT_BASE_COLORS)

    def test_wcag_score_deterministic(self):
        first = [p.wcag_score for p in generate_fallback_palettes("sage")]
        second = [p.wcag_score for p in generate_fallback_palettes("sage")]
        assert first == second
        assert all(85 <= score <= 100 for score in first)


class TestFallbackTypography:
    def test_pairs(self):
        pairs = generate_fallback_typography()
        assert [p.name for p in pairs] == [
            "Inter + Inter",
            "Playfair Display + Source Sans Pro",
            "Montserrat + Open Sans",
            "Poppins + Poppins",
        ]
        assert pairs[1].heading.fallback == "serif"
        assert not any(p.ai_generated for p in pairs)
