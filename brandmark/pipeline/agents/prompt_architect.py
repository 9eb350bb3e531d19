"""Prompt Architect: composes the five-section logo prompt from brand strategy.

Every section builder is a pure function over the data it is given. Nothing
here calls out to a model, reads the clock or draws random numbers, so the
same input always yields the same prompt text.
"""

from __future__ import annotations

import logging

from brandmark.config import GEMINI_MODEL, MAX_PROMPT_LENGTH, MIN_PROMPT_LENGTH
from brandmark.pipeline.keywords import extract_visual_keywords
from brandmark.pipeline.knowledge_base import (
    LOGO_TYPE_DESCRIPTIONS,
    blend_archetypes,
    lookup_style,
)
from brandmark.pipeline.models import (
    ArchetypeVisuals,
    BrandContext,
    GenerationOptions,
    GenerationParams,
    ImageBackground,
    LogoPrompt,
    LogoType,
    PromptSections,
    PromptValidation,
    StyleVisuals,
    VisualKeywords,
    VisualPreferences,
)
from brandmark.pipeline.recommender import recommend_logo_type

logger = logging.getLogger(__name__)

BRAND_CONTEXT_TEMPLATE = """\
Design a professional brand logo for "{name}".

BRAND IDENTITY:
- Name: {name}
- Industry: {industry}

BRAND PURPOSE:
- Mission: {mission}
- Vision: {vision}
- Core Values: {core_values}

BRAND POSITIONING:
- "{positioning}"
- Unique Value: {unique_value}
- Competitive Advantage: {advantage}

TARGET AUDIENCE:
- {audience}
- Psychographics: {psychographics}

BRAND PERSONALITY ({archetype} Archetype):
- Primary mood: {primary_mood}
- The brand should feel: {secondary_mood}"""

VISUAL_DIRECTION_TEMPLATE = """\
VISUAL DIRECTION:

Style: {style}
{description}

Style Characteristics:
{characteristics}

Visual Elements to Consider:
- Shapes: {shapes}
- Potential Symbols: {symbols}
- Color Direction: {colors}
- Typography Feel: {typography}

Desired Mood: {mood}"""

REQUIREMENTS_TEMPLATE = """\
REQUIREMENTS:

Logo Type: {logo_type}
{type_description}

Essential Requirements:
- The brand name "{name}" must be clearly legible
- Must work at all sizes from 16px favicon to large format
- Needs to work on both light and dark backgrounds
- Should be instantly recognizable and memorable
- Must be unique and ownable (not generic)
- Should convey the brand's {archetype} personality"""

CONSTRAINTS_TEMPLATE = """\
CONSTRAINTS - AVOID:
{avoid}

ENSURE:
- Unique, distinctive mark that stands out from competitors
- Clean, professional execution
- Balanced visual weight and composition
- Clear hierarchy if combining elements"""

TECHNICAL_SPECS_TEMPLATE = """\
TECHNICAL SPECIFICATIONS:
- {background}
- Vector-style rendering with clean edges
- Professional quality suitable for brand guidelines
- Scalable design that maintains integrity at all sizes
{technical_notes}"""

CLOSING_TEMPLATE = (
    "Create a distinctive, memorable, and professional logo that embodies "
    "{name}'s identity as \"{positioning}\". The logo should instantly "
    "communicate {mood} while being unique and ownable."
)

CONSTRAINT_AVOID = [
    "Generic stock imagery or clipart",
    "Overly complex details that disappear at small sizes",
    "Trendy effects that will quickly date",
    "Difficult to reproduce elements",
]

BACKGROUND_INSTRUCTIONS = {
    ImageBackground.TRANSPARENT: "Transparent background (PNG format)",
    ImageBackground.OPAQUE: "Clean white background",
    ImageBackground.AUTO: "Clean, neutral background suitable for versatile use",
}


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_brand_context_section(brand: BrandContext, keywords: VisualKeywords) -> str:
    identity = brand.brand_identity
    strategy = brand.brand_strategy
    industry = identity.industry
    if identity.industry_segment:
        industry = f"{industry} ({identity.industry_segment})"

    return BRAND_CONTEXT_TEMPLATE.format(
        name=identity.name,
        industry=industry,
        mission=strategy.purpose.mission,
        vision=strategy.purpose.vision,
        core_values=", ".join(strategy.values.core_values),
        positioning=strategy.values.positioning,
        unique_value=strategy.values.unique_value,
        advantage=strategy.competitive.advantage,
        audience=strategy.audience.primary,
        psychographics=strategy.audience.psychographics,
        archetype=strategy.archetype.primary.capitalize(),
        primary_mood=", ".join(keywords.primary_mood),
        secondary_mood=", ".join(keywords.secondary_mood),
    )


def build_visual_direction_section(
    preferences: VisualPreferences,
    style_visuals: StyleVisuals,
    archetype_visuals: ArchetypeVisuals,
    keywords: VisualKeywords,
) -> str:
    return VISUAL_DIRECTION_TEMPLATE.format(
        style=preferences.selected_style.value.capitalize(),
        description=style_visuals.description,
        characteristics=_bullets(style_visuals.characteristics),
        shapes=", ".join(archetype_visuals.shapes[:4]),
        symbols=", ".join(archetype_visuals.symbols[:4]),
        colors=", ".join(archetype_visuals.colors[:4]),
        typography=keywords.typography_style,
        mood=", ".join(preferences.mood),
    )


def build_requirements_section(logo_type: LogoType, brand: BrandContext) -> str:
    return REQUIREMENTS_TEMPLATE.format(
        logo_type=logo_type.value.capitalize(),
        type_description=LOGO_TYPE_DESCRIPTIONS[logo_type],
        name=brand.name,
        archetype=brand.archetype,
    )


def build_constraints_section(keywords: VisualKeywords, preferences: VisualPreferences) -> str:
    avoid = [*keywords.avoid, *preferences.avoid, *CONSTRAINT_AVOID]
    # dict.fromkeys keeps first occurrence order
    return CONSTRAINTS_TEMPLATE.format(avoid=_bullets(dict.fromkeys(avoid)))


def build_technical_specs_section(options: GenerationOptions, style_visuals: StyleVisuals) -> str:
    return TECHNICAL_SPECS_TEMPLATE.format(
        background=BACKGROUND_INSTRUCTIONS[options.background],
        technical_notes=_bullets(style_visuals.technical_notes),
    )


def build_prompt(
    brand: BrandContext,
    preferences: VisualPreferences,
    options: GenerationOptions,
) -> LogoPrompt:
    """Compose the full logo prompt and its generation parameters."""
    keywords = extract_visual_keywords(brand)
    archetype_visuals = blend_archetypes(
        brand.brand_strategy.archetype.primary,
        brand.brand_strategy.archetype.secondary,
    )
    style_visuals = lookup_style(preferences.selected_style)
    logo_type = preferences.logo_type_preference or recommend_logo_type(brand)

    sections = PromptSections(
        brand_context=build_brand_context_section(brand, keywords),
        visual_direction=build_visual_direction_section(
            preferences, style_visuals, archetype_visuals, keywords,
        ),
        requirements=build_requirements_section(logo_type, brand),
        constraints=build_constraints_section(keywords, preferences),
        technical_specs=build_technical_specs_section(options, style_visuals),
    )

    closing = CLOSING_TEMPLATE.format(
        name=brand.name,
        positioning=brand.brand_strategy.values.positioning,
        mood=", ".join(keywords.primary_mood[:3]),
    )

    full_prompt = "\n\n".join([
        sections.brand_context,
        sections.visual_direction,
        sections.requirements,
        sections.constraints,
        sections.technical_specs,
        closing,
    ])

    return LogoPrompt(
        full_prompt=full_prompt,
        sections=sections,
        generation_params=GenerationParams(
            model=GEMINI_MODEL,
            size=options.size,
            quality=options.quality,
            background=options.background,
            format=options.format,
            n=options.count,
        ),
    )


def validate_prompt(prompt: LogoPrompt) -> PromptValidation:
    """Flag prompt-shape risks. Issues are advisory; this never raises."""
    issues: list[str] = []
    length = len(prompt.full_prompt)

    if length < MIN_PROMPT_LENGTH:
        issues.append("Prompt may be too short for quality generation")
    if length > MAX_PROMPT_LENGTH:
        issues.append("Prompt may be too long, consider condensing")
    if "Name:" not in prompt.sections.brand_context:
        issues.append("Brand name not clearly specified")
    if "must" not in prompt.sections.requirements:
        issues.append("Requirements section may lack specificity")

    if issues:
        logger.info("Prompt validation flagged %d issue(s): %s", len(issues), "; ".join(issues))
    return PromptValidation(valid=not issues, issues=issues)
