"""Deterministic fallbacks used when the image or suggestion service is down.

Nothing in here touches the network, so these always produce output.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from brandmark.pipeline.color_harmony import calculate_wcag_score, generate_color_harmony
from brandmark.pipeline.knowledge_base import archetype_base_colors
from brandmark.pipeline.models import (
    ColorPalette,
    FallbackLogo,
    FontFace,
    LogoVariation,
    TypographyPairing,
)

FALLBACK_LOGO_STYLES: list[str] = ["minimal", "modern", "classic", "bold"]

_SVG_OPEN = '<svg width="200" height="80" viewBox="0 0 200 80" xmlns="http://www.w3.org/2000/svg">'

SVG_TEMPLATES: dict[str, str] = {
    "minimal": (
        _SVG_OPEN
        + '<rect x="10" y="20" width="40" height="40" fill="#3B82F6" />'
        + '<text x="60" y="45" font-family="Arial, sans-serif" font-size="18" '
        + 'font-weight="bold" fill="#1E293B">{name}</text></svg>'
    ),
    "modern": (
        _SVG_OPEN
        + '<defs><linearGradient id="grad" x1="0%" y1="0%" x2="100%" y2="0%">'
        + '<stop offset="0%" style="stop-color:#3B82F6;stop-opacity:1" />'
        + '<stop offset="100%" style="stop-color:#1E40AF;stop-opacity:1" />'
        + "</linearGradient></defs>"
        + '<circle cx="30" cy="40" r="20" fill="url(#grad)" />'
        + '<text x="60" y="45" font-family="Arial, sans-serif" font-size="18" '
        + 'font-weight="bold" fill="#1E293B">{name}</text></svg>'
    ),
    "classic": (
        _SVG_OPEN
        + '<rect x="10" y="20" width="40" height="40" rx="5" ry="5" fill="#3B82F6" />'
        + '<text x="60" y="45" font-family="Georgia, serif" font-size="18" '
        + 'font-weight="bold" fill="#1E293B">{name}</text></svg>'
    ),
    "bold": (
        _SVG_OPEN
        + '<polygon points="10,20 50,20 40,60 20,60" fill="#3B82F6" />'
        + '<text x="60" y="45" font-family="Impact, sans-serif" font-size="20" '
        + 'fill="#1E293B">{name}</text></svg>'
    ),
}
DEFAULT_SVG_TEMPLATE = (
    _SVG_OPEN
    + '<text x="20" y="45" font-family="Arial, sans-serif" font-size="18" '
    + 'font-weight="bold" fill="#3B82F6">{name}</text></svg>'
)

LOGO_VARIATIONS: list[LogoVariation] = [
    LogoVariation(type="horizontal", description="Horizontal layout"),
    LogoVariation(type="vertical", description="Vertical layout"),
    LogoVariation(type="icon", description="Icon only"),
    LogoVariation(type="monochrome", description="Single color version"),
]

# (heading, heading fallback, body, body fallback, category)
FALLBACK_FONT_PAIRS: list[tuple[str, str, str, str, str]] = [
    ("Inter", "sans-serif", "Inter", "sans-serif", "modern"),
    ("Playfair Display", "serif", "Source Sans Pro", "sans-serif", "elegant"),
    ("Montserrat", "sans-serif", "Open Sans", "sans-serif", "friendly"),
    ("Poppins", "sans-serif", "Poppins", "sans-serif", "geometric"),
]


def generate_svg_logo(brand_name: str, style: str) -> str:
    """Render a simple SVG mark. The name is escaped for &, < and >."""
    template = SVG_TEMPLATES.get(style, DEFAULT_SVG_TEMPLATE)
    return template.format(name=escape(brand_name))


def generate_logo_variations() -> list[LogoVariation]:
    return [variation.model_copy() for variation in LOGO_VARIATIONS]


def generate_fallback_logos(brand_name: str) -> list[FallbackLogo]:
    return [
        FallbackLogo(
            id=f"fallback-logo-{index}",
            style=style,
            svg=generate_svg_logo(brand_name, style),
            description=f"{style} logo concept for {brand_name}",
        )
        for index, style in enumerate(FALLBACK_LOGO_STYLES)
    ]


def generate_fallback_palettes(archetype: str | None) -> list[ColorPalette]:
    """One palette per archetype base color."""
    return [
        ColorPalette(
            id=f"fallback-palette-{index}",
            name=f"Palette {index + 1}",
            description="Color harmony derived from the brand archetype",
            colors=generate_color_harmony(color),
            primary=color,
            wcag_score=calculate_wcag_score(color),
            ai_generated=False,
        )
        for index, color in enumerate(archetype_base_colors(archetype))
    ]


def generate_fallback_typography() -> list[TypographyPairing]:
    return [
        TypographyPairing(
            id=f"fallback-typography-{index}",
            name=f"{heading} + {body}",
            heading=FontFace(family=heading, fallback=heading_fallback),
            body=FontFace(family=body, fallback=body_fallback),
            category=category,
            ai_generated=False,
        )
        for index, (heading, heading_fallback, body, body_fallback, category)
        in enumerate(FALLBACK_FONT_PAIRS)
    ]
