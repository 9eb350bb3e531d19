"""Logo type recommendation: a fixed priority cascade, first match wins."""

from __future__ import annotations

from typing import Callable

from brandmark.pipeline.models import BrandContext, LogoType

Rule = Callable[[str, str, str], bool]


def _archetype_in(*archetypes: str) -> Rule:
    return lambda name, archetype, industry: archetype in archetypes


def _industry_has(*needles: str) -> Rule:
    return lambda name, archetype, industry: any(n in industry for n in needles)


# (predicate over (name, archetype, industry), result); position is priority
LOGO_TYPE_RULES: list[tuple[Rule, LogoType]] = [
    (lambda name, archetype, industry: len(name) > 12, LogoType.LETTERMARK),
    (lambda name, archetype, industry: len(name) <= 4, LogoType.WORDMARK),
    (_archetype_in("jester", "caregiver"), LogoType.MASCOT),
    (_archetype_in("creator", "magician"), LogoType.ABSTRACT),
    (_archetype_in("ruler", "sage"), LogoType.COMBINATION),
    (_industry_has("tech", "software"), LogoType.ABSTRACT),
    (_industry_has("food", "restaurant"), LogoType.COMBINATION),
    (_industry_has("luxury", "fashion"), LogoType.WORDMARK),
]
DEFAULT_LOGO_TYPE = LogoType.COMBINATION


def recommend_logo_type(brand: BrandContext) -> LogoType:
    name = brand.name
    archetype = brand.archetype.lower()
    industry = brand.industry.lower()

    for matches, logo_type in LOGO_TYPE_RULES:
        if matches(name, archetype, industry):
            return logo_type
    return DEFAULT_LOGO_TYPE
