"""Tests for palette and typography export formats."""

from __future__ import annotations

import json

import pytest

from brandmark.pipeline.exporters import export_palette, export_typography
from brandmark.pipeline.models import ColorPalette, FontFace, TypographyPairing


@pytest.fixture
def palette() -> ColorPalette:
    return ColorPalette(
        id="p1",
        name="Ocean",
        colors=["#3B82F6", "#F6AF3B"],
        primary="#3B82F6",
        wcag_score=95,
        ai_generated=False,
    )


@pytest.fixture
def pairing() -> TypographyPairing:
    return TypographyPairing(
        id="t1",
        name="Playfair Display + Source Sans Pro",
        heading=FontFace(family="Playfair Display", fallback="serif"),
        body=FontFace(family="Source Sans Pro"),
        ai_generated=False,
    )


class TestPaletteExport:
    def test_css(self, palette):
        assert export_palette(palette, "css") == (
            ":root {\n  --color-1: #3B82F6;\n  --color-2: #F6AF3B;\n}"
        )

    def test_scss(self, palette):
        assert export_palette(palette, "scss") == "$color-1: #3B82F6;\n$color-2: #F6AF3B;"

    def test_json(self, palette):
        assert json.loads(export_palette(palette, "json")) == palette.colors

    def test_ase(self, palette):
        assert export_palette(palette, "ase").splitlines() == [
            "Adobe Swatch Exchange", "#3B82F6", "#F6AF3B",
        ]

    def test_unknown_format(self, palette):
        with pytest.raises(ValueError):
            export_palette(palette, "pdf")


class TestTypographyExport:
    def test_css(self, pairing):
        css = export_typography(pairing, "css")
        assert css.startswith("/* Playfair Display + Source Sans Pro Typography */")
        assert "font-family: 'Playfair Display', serif;" in css
        assert "font-family: 'Source Sans Pro', sans-serif;" in css

    def test_scss(self, pairing):
        assert "$font-heading: 'Playfair Display', serif;" in export_typography(pairing, "scss")

    def test_json(self, pairing):
        data = json.loads(export_typography(pairing, "json"))
        assert data["heading"] == {"family": "Playfair Display", "fallback": "serif"}

    def test_ase_not_supported(self, pairing):
        with pytest.raises(ValueError):
            export_typography(pairing, "ase")
