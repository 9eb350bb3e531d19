"""Archetype and logo-style visual vocabularies.

The tables are built once at import and exposed as read-only mappings.
Callers go through ``lookup_archetype`` / ``lookup_style`` so that an
unknown archetype always resolves to the ``sage`` record.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from brandmark.pipeline.models import ArchetypeVisuals, LogoStyle, LogoType, StyleVisuals

logger = logging.getLogger(__name__)

FALLBACK_ARCHETYPE = "sage"

_ARCHETYPES = {
    "innocent": {
        "colors": ["white", "sky blue", "soft pink", "light yellow", "pure pastels"],
        "shapes": ["circles", "soft curves", "rounded forms", "gentle arcs"],
        "typography": "clean, simple sans-serif with generous spacing",
        "mood": ["pure", "simple", "honest", "optimistic", "youthful"],
        "symbols": ["sun", "dove", "cloud", "flower", "smile"],
        "avoid": ["dark colors", "sharp angles", "complex patterns", "aggressive forms"],
    },
    "explorer": {
        "colors": ["forest green", "earth brown", "sunset orange", "mountain blue", "sand"],
        "shapes": ["arrows", "paths", "horizons", "mountains", "compass points"],
        "typography": "rugged, adventurous sans-serif or slab serif",
        "mood": ["bold", "free", "authentic", "adventurous", "independent"],
        "symbols": ["compass", "mountain", "path", "footprint", "horizon"],
        "avoid": ["confined shapes", "delicate forms", "corporate sterility"],
    },
    "sage": {
        "colors": ["deep navy", "royal purple", "gold", "forest green", "burgundy"],
        "shapes": ["books", "circles of wisdom", "balanced geometric forms", "owls"],
        "typography": "refined serif or elegant sans-serif with authority",
        "mood": ["wise", "trusted", "expert", "thoughtful", "credible"],
        "symbols": ["owl", "book", "light bulb", "tree of knowledge", "key"],
        "avoid": ["childish elements", "trendy styles", "frivolous decoration"],
    },
    "hero": {
        "colors": ["bold red", "gold", "black", "royal blue", "silver"],
        "shapes": ["shields", "stars", "strong geometric forms", "upward angles"],
        "typography": "bold, commanding sans-serif with strong presence",
        "mood": ["powerful", "confident", "courageous", "determined", "triumphant"],
        "symbols": ["shield", "star", "lightning bolt", "eagle", "sword"],
        "avoid": ["soft curves", "passive forms", "muted colors", "weakness"],
    },
    "outlaw": {
        "colors": ["black", "crimson red", "metallic silver", "dark gray", "electric"],
        "shapes": ["edgy angles", "broken forms", "unconventional geometry", "sharp points"],
        "typography": "distressed, unconventional, or deliberately imperfect",
        "mood": ["rebellious", "disruptive", "bold", "revolutionary", "fearless"],
        "symbols": ["skull", "flame", "broken chains", "lightning", "fist"],
        "avoid": ["corporate sterility", "safe choices", "conventional forms"],
    },
    "magician": {
        "colors": ["deep purple", "iridescent", "starlight silver", "midnight blue", "gold"],
        "shapes": ["spirals", "stars", "transformation symbols", "fluid forms"],
        "typography": "mystical, elegant, or otherworldly letterforms",
        "mood": ["inspiring", "transformative", "visionary", "magical", "innovative"],
        "symbols": ["star", "wand", "crystal", "butterfly", "infinity"],
        "avoid": ["mundane imagery", "overly literal symbols", "boring geometry"],
    },
    "regular": {
        "colors": ["warm brown", "friendly green", "sky blue", "warm neutrals", "earthy tones"],
        "shapes": ["friendly rounded forms", "handshake imagery", "home-like shapes"],
        "typography": "approachable, readable sans-serif without pretension",
        "mood": ["relatable", "honest", "dependable", "friendly", "down-to-earth"],
        "symbols": ["handshake", "home", "heart", "checkmark", "smile"],
        "avoid": ["luxury signals", "elitist styling", "cold corporate forms"],
    },
    "lover": {
        "colors": ["romantic red", "blush pink", "gold", "burgundy", "champagne"],
        "shapes": ["flowing curves", "heart-inspired forms", "sensual lines", "embrace shapes"],
        "typography": "elegant, sensual serif or flowing script elements",
        "mood": ["passionate", "intimate", "luxurious", "beautiful", "devoted"],
        "symbols": ["heart", "rose", "lips", "embrace", "flame"],
        "avoid": ["cold geometry", "harsh angles", "sterile forms"],
    },
    "jester": {
        "colors": ["bright yellow", "playful orange", "vibrant red", "electric blue", "multi-color"],
        "shapes": ["playful asymmetry", "bouncy forms", "unexpected combinations", "smiles"],
        "typography": "fun, bouncy, playful letterforms with personality",
        "mood": ["joyful", "entertaining", "spontaneous", "irreverent", "fun"],
        "symbols": ["smile", "confetti", "balloon", "star burst", "party elements"],
        "avoid": ["serious corporate styling", "dark themes", "boring symmetry"],
    },
    "caregiver": {
        "colors": ["nurturing blue", "healing green", "warm cream", "soft pink", "gentle gold"],
        "shapes": ["embracing curves", "protective forms", "hands", "hearts", "shields"],
        "typography": "warm, caring, readable with human touch",
        "mood": ["nurturing", "protective", "compassionate", "supportive", "safe"],
        "symbols": ["hands", "heart", "embrace", "home", "shield"],
        "avoid": ["cold forms", "aggressive angles", "impersonal geometry"],
    },
    "creator": {
        "colors": ["creative orange", "artistic purple", "unique combinations", "bold accents"],
        "shapes": ["artistic forms", "abstract expressions", "unique geometry", "creative marks"],
        "typography": "distinctive, creative, often custom or artistic",
        "mood": ["innovative", "expressive", "artistic", "imaginative", "original"],
        "symbols": ["paintbrush", "lightbulb", "spark", "abstract form", "unique mark"],
        "avoid": ["generic templates", "boring conformity", "lack of originality"],
    },
    "ruler": {
        "colors": ["royal purple", "gold", "black", "deep navy", "rich burgundy"],
        "shapes": ["crowns", "columns", "strong geometric forms", "commanding presence"],
        "typography": "prestigious, authoritative serif or refined sans-serif",
        "mood": ["luxurious", "commanding", "prestigious", "successful", "powerful"],
        "symbols": ["crown", "lion", "eagle", "column", "crest"],
        "avoid": ["casual styling", "cheap appearance", "weakness signals"],
    },
}

_STYLES = {
    LogoStyle.MINIMAL: {
        "description": "Clean, essential design with maximum impact from minimum elements",
        "characteristics": [
            "Single or dual color palette only",
            "Maximum 2-3 visual elements",
            "Strategic use of negative space",
            "Typography as the primary hero",
            "Clean geometric shapes",
            "No gradients or complex effects",
        ],
        "technical_notes": [
            "Must work perfectly in single color",
            "Excellent scalability from 16px to billboard",
            "Quick brand recognition from simplicity",
        ],
    },
    LogoStyle.MODERN: {
        "description": "Contemporary aesthetic with subtle sophistication and tech-forward sensibility",
        "characteristics": [
            "Sleek, refined forms",
            "Subtle gradients or color transitions acceptable",
            "Contemporary typography choices",
            "Clean but not stark",
            "Slight dimensionality or depth",
            "Tech-forward but human",
        ],
        "technical_notes": [
            "Ensure gradients work in print (CMYK)",
            "Maintain clarity at all sizes",
            "Balance between trendy and timeless",
        ],
    },
    LogoStyle.CLASSIC: {
        "description": "Timeless elegance with refined proportions and traditional craftsmanship",
        "characteristics": [
            "Serif typography or custom lettering",
            "Balanced, symmetrical compositions",
            "Traditional proportions",
            "Sophisticated color palette",
            "Heritage feel without being dated",
            "Refined details that age well",
        ],
        "technical_notes": [
            "Avoid trendy elements that will date",
            "Focus on lasting design principles",
            "Ensure legibility of refined details",
        ],
    },
    LogoStyle.PLAYFUL: {
        "description": "Energetic, approachable design that brings joy and personality",
        "characteristics": [
            "Rounded, friendly forms",
            "Vibrant colors within brand palette",
            "Movement and dynamism",
            "Personality-driven elements",
            "Smile-inducing design choices",
            "Approachable typography",
        ],
        "technical_notes": [
            "Balance playfulness with professionalism",
            "Ensure it appeals to target audience age",
            "Maintain brand credibility",
        ],
    },
    LogoStyle.BOLD: {
        "description": "Strong, confident presence that commands attention and respect",
        "characteristics": [
            "High contrast elements",
            "Thick strokes and solid forms",
            "Impactful shapes",
            "Statement typography",
            "Commanding visual weight",
            "Confident color choices",
        ],
        "technical_notes": [
            "Ensure bold elements scale well",
            "Maintain legibility at small sizes",
            "Balance strength without aggression",
        ],
    },
    LogoStyle.ORGANIC: {
        "description": "Natural, flowing design with handcrafted feel and earth-inspired forms",
        "characteristics": [
            "Flowing, natural shapes",
            "Hand-crafted aesthetic",
            "Earth-inspired color palette",
            "Subtle imperfections for character",
            "Warm, inviting forms",
            "Nature-derived patterns",
        ],
        "technical_notes": [
            "Maintain consistency in hand-drawn elements",
            "Ensure organic forms reproduce well",
            "Balance organic feel with professionalism",
        ],
    },
}

ARCHETYPE_VISUALS: Mapping[str, ArchetypeVisuals] = MappingProxyType({
    key: ArchetypeVisuals(**record) for key, record in _ARCHETYPES.items()
})

STYLE_VISUALS: Mapping[LogoStyle, StyleVisuals] = MappingProxyType({
    key: StyleVisuals(**record) for key, record in _STYLES.items()
})

LOGO_TYPE_DESCRIPTIONS: Mapping[LogoType, str] = MappingProxyType({
    LogoType.WORDMARK: "Text-based logo using the brand name in distinctive typography (like Google, Coca-Cola)",
    LogoType.LETTERMARK: "Initials or acronym-based logo for longer brand names (like IBM, HBO)",
    LogoType.PICTORIAL: "Iconic image or symbol that represents the brand (like Apple, Twitter bird)",
    LogoType.ABSTRACT: "Unique geometric or abstract form that captures brand essence (like Pepsi, Nike swoosh)",
    LogoType.MASCOT: "Character or illustrated figure representing the brand (like KFC Colonel, Michelin Man)",
    LogoType.COMBINATION: "Icon paired with wordmark that can work together or separately (like Burger King, Lacoste)",
})

# Seed colors for palette generation, four per archetype
ARCHETYPE_BASE_COLORS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "innocent": ("#FFFFFF", "#F0F8FF", "#E6F3FF", "#87CEEB"),
    "explorer": ("#228B22", "#8B4513", "#FF8C00", "#4682B4"),
    "sage": ("#2F4F4F", "#708090", "#4169E1", "#800080"),
    "hero": ("#DC143C", "#B22222", "#FF4500", "#1E90FF"),
    "outlaw": ("#000000", "#8B0000", "#FF0000", "#696969"),
    "magician": ("#4B0082", "#8A2BE2", "#9400D3", "#FF1493"),
    "regular": ("#CD853F", "#D2691E", "#A0522D", "#8FBC8F"),
    "lover": ("#FF69B4", "#FF1493", "#DC143C", "#8B008B"),
    "jester": ("#FFD700", "#FF6347", "#32CD32", "#FF69B4"),
    "caregiver": ("#F0E68C", "#DDA0DD", "#98FB98", "#F5DEB3"),
    "creator": ("#FF4500", "#FF6347", "#9370DB", "#20B2AA"),
    "ruler": ("#800080", "#4B0082", "#B8860B", "#2F4F4F"),
})
DEFAULT_BASE_COLORS: tuple[str, ...] = ("#3B82F6", "#1E40AF", "#F59E0B", "#EF4444")


def _normalize(name: str | None) -> str:
    return (name or "").strip().lower()


def lookup_archetype(name: str | None) -> ArchetypeVisuals:
    """Return the visuals for *name*, falling back to the sage record."""
    key = _normalize(name)
    visuals = ARCHETYPE_VISUALS.get(key)
    if visuals is None:
        logger.debug("Unknown archetype %r, using %s", name, FALLBACK_ARCHETYPE)
        return ARCHETYPE_VISUALS[FALLBACK_ARCHETYPE]
    return visuals


def lookup_style(style: LogoStyle | str) -> StyleVisuals:
    """Return the visuals for a logo style. Raises ValueError for non-members."""
    return STYLE_VISUALS[LogoStyle(style)]


def blend_archetypes(primary: str | None, secondary: str | None = None) -> ArchetypeVisuals:
    """Mix a secondary archetype into the primary one.

    The primary keeps the lead (three entries per list, two from the
    secondary) and its typography. An unknown secondary is ignored.
    """
    base = lookup_archetype(primary)
    extra = ARCHETYPE_VISUALS.get(_normalize(secondary))
    if extra is None:
        return base

    return ArchetypeVisuals(
        colors=base.colors[:3] + extra.colors[:2],
        shapes=base.shapes[:3] + extra.shapes[:2],
        typography=base.typography,
        mood=base.mood[:3] + extra.mood[:2],
        symbols=base.symbols[:3] + extra.symbols[:2],
        avoid=tuple(dict.fromkeys(base.avoid + extra.avoid)),
    )


def archetype_base_colors(archetype: str | None) -> tuple[str, ...]:
    """Seed hex colors for an archetype, with a neutral blue/amber default."""
    return ARCHETYPE_BASE_COLORS.get(_normalize(archetype), DEFAULT_BASE_COLORS)
