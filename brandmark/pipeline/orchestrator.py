"""Pipeline orchestrator: prompt → token gate → generation → storage, with fallbacks."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from brandmark.exceptions import (
    AuthenticationRequired,
    BrandmarkError,
    InsufficientTokens,
    StorageError,
)
from brandmark.pipeline.agents.generator import run_generator
from brandmark.pipeline.agents.prompt_architect import build_prompt, validate_prompt
from brandmark.pipeline.agents.suggestions import run_suggestions
from brandmark.pipeline.color_harmony import (
    analyze_accessibility,
    analyze_color_harmony,
    calculate_wcag_score,
    generate_color_harmony,
    get_color_psychology,
)
from brandmark.pipeline.events import EventType, publish
from brandmark.pipeline.fallbacks import (
    generate_fallback_logos,
    generate_fallback_palettes,
    generate_fallback_typography,
)
from brandmark.pipeline.knowledge_base import archetype_base_colors
from brandmark.pipeline.models import (
    ColorPalette,
    FallbackLogo,
    FontFace,
    GenerationJob,
    JobStage,
    LogoGenerationResponse,
    TypographyPairing,
)
from brandmark.storage.assets import LocalAssetStorage, asset_storage

logger = logging.getLogger(__name__)

# (user_id, action_type, description) -> allowed
TokenGate = Callable[[str, str, str], bool]

AI_PALETTE_COUNT = 6

AI_FONT_PAIRS = [
    ("Inter", "sans-serif", "Inter", "sans-serif", "modern"),
    ("Playfair Display", "serif", "Source Sans Pro", "sans-serif", "elegant"),
    ("Montserrat", "sans-serif", "Open Sans", "sans-serif", "friendly"),
    ("Roboto Slab", "serif", "Roboto", "sans-serif", "technical"),
]

DEFAULT_PALETTE_REASONING = "Generated based on brand personality"
DEFAULT_TYPOGRAPHY_REASONING = "AI-recommended based on brand personality"


def _default_token_gate(user_id: str, action_type: str, description: str) -> bool:
    from brandmark.storage.database import get_token_store

    return get_token_store().use_token(user_id, action_type, description)


async def _set_stage(job: GenerationJob, stage: JobStage) -> None:
    job.stage = stage
    await publish(EventType.STAGE_CHANGED, job.job_id, stage=stage.value)


def _finish(job: GenerationJob, stage: JobStage, error: Optional[str] = None) -> None:
    job.stage = stage
    job.error = error
    job.completed_at = datetime.now(timezone.utc)


async def _persist_fallbacks(
    job: GenerationJob,
    logos: list[FallbackLogo],
    storage: LocalAssetStorage,
) -> None:
    for version, logo in enumerate(logos, start=1):
        try:
            logo.url = await asyncio.to_thread(
                storage.upload_svg,
                logo.svg,
                job.user_id,
                job.brand_id,
                "logo",
                version,
            )
        except StorageError as e:
            logger.warning("Could not store fallback logo %s: %s", logo.id, e)


async def _persist_logos(
    job: GenerationJob,
    response: LogoGenerationResponse,
    storage: LocalAssetStorage,
) -> None:
    for version, logo in enumerate(response.logos, start=1):
        try:
            logo.image_data.url = await asyncio.to_thread(
                storage.upload_image,
                logo.image_data.base64,
                job.user_id,
                job.brand_id,
                "logo",
                version,
            )
        except StorageError as e:
            logger.warning("Could not store logo %s: %s", logo.id, e)
            continue

        await publish(
            EventType.LOGO_GENERATED,
            job.job_id,
            logo_id=logo.id,
            url=logo.image_data.url,
        )


# ── Logos ──────────────────────────────────────────────────────────────


async def run_logo_generation(
    job: GenerationJob,
    token_gate: Optional[TokenGate] = None,
    storage: Optional[LocalAssetStorage] = None,
) -> GenerationJob:
    """Run one logo job to completion. Never raises; the outcome is on the job."""

    token_gate = token_gate or _default_token_gate
    storage = storage or asset_storage
    request = job.request
    brand = request.brand_context

    await publish(
        EventType.JOB_STARTED,
        job.job_id,
        brand=brand.name,
        style=request.visual_preferences.selected_style.value,
    )

    try:
        # ── Stage 1: Prompt ────────────────────────────────────────
        await _set_stage(job, JobStage.PROMPT_BUILDING)
        job.prompt = build_prompt(brand, request.visual_preferences, request.generation_options)
        job.validation = validate_prompt(job.prompt)

        await publish(
            EventType.PROMPT_BUILT,
            job.job_id,
            length=len(job.prompt.full_prompt),
            issues=job.validation.issues,
        )

        # ── Stage 2: Auth and token gate ───────────────────────────
        if not job.user_id:
            raise AuthenticationRequired("Authentication required to generate logos")

        allowed = await asyncio.to_thread(
            token_gate,
            job.user_id,
            "logo_generation",
            f"Logo generation for {brand.name}",
        )
        if not allowed:
            raise InsufficientTokens(
                "Insufficient tokens for logo generation",
                details=f"user={job.user_id}",
            )

        # ── Stage 3: Generation ────────────────────────────────────
        await _set_stage(job, JobStage.GENERATING)
        try:
            response = await run_generator(request, job.prompt)
        except BrandmarkError as e:
            logger.warning("Generation failed for job %s, using fallbacks: %s", job.job_id, e)
            job.response = LogoGenerationResponse(success=False, error=str(e))
            job.fallback_logos = generate_fallback_logos(brand.name)

            await _set_stage(job, JobStage.STORING)
            await _persist_fallbacks(job, job.fallback_logos, storage)
            await publish(
                EventType.FALLBACK_USED,
                job.job_id,
                reason=str(e),
                count=len(job.fallback_logos),
            )
        else:
            job.response = response

            # ── Stage 4: Storage ───────────────────────────────────
            await _set_stage(job, JobStage.STORING)
            await _persist_logos(job, response, storage)

        # ── Complete ───────────────────────────────────────────────
        _finish(job, JobStage.COMPLETE)
        await publish(
            EventType.JOB_COMPLETED,
            job.job_id,
            logos=len(job.response.logos) if job.response else 0,
            fallbacks=len(job.fallback_logos),
        )
        logger.info("Logo job %s completed", job.job_id)

    except AuthenticationRequired as e:
        job.fallback_logos = generate_fallback_logos(brand.name)
        job.response = LogoGenerationResponse(success=False, error=e.message)
        _finish(job, JobStage.FAILED, e.message)
        await publish(
            EventType.FALLBACK_USED,
            job.job_id,
            reason=e.message,
            count=len(job.fallback_logos),
        )
        await publish(EventType.JOB_FAILED, job.job_id, error=e.message)
        logger.info("Logo job %s has no user, returned fallbacks", job.job_id)

    except InsufficientTokens as e:
        job.response = LogoGenerationResponse(success=False, error=e.message)
        _finish(job, JobStage.FAILED, e.message)
        await publish(EventType.JOB_FAILED, job.job_id, error=e.message)
        logger.info("Logo job %s refused: %s", job.job_id, e)

    except Exception as e:
        job.response = LogoGenerationResponse(success=False, error=str(e))
        _finish(job, JobStage.FAILED, str(e))
        await publish(EventType.JOB_FAILED, job.job_id, error=str(e))
        logger.exception("Logo job %s failed", job.job_id)

    return job


# ── Palettes and typography ────────────────────────────────────────────


async def run_palette_generation(
    archetype: Optional[str],
    context: dict[str, Any],
) -> list[ColorPalette]:
    """AI-annotated palettes, or the deterministic fallback set on any failure."""
    try:
        suggestions = await run_suggestions("colors", context)
    except BrandmarkError as e:
        logger.warning("Palette suggestions unavailable, using fallbacks: %s", e)
        return generate_fallback_palettes(archetype)

    base_colors = archetype_base_colors(archetype)
    palettes = []
    for i in range(AI_PALETTE_COUNT):
        primary = base_colors[i % len(base_colors)]
        colors = generate_color_harmony(primary)
        suggestion = suggestions[i] if i < len(suggestions) else None
        palettes.append(ColorPalette(
            id=f"ai-palette-{i}",
            name=f"AI Palette {i + 1}",
            description=suggestion or "AI-generated color harmony",
            colors=colors,
            primary=primary,
            wcag_score=calculate_wcag_score(primary),
            ai_generated=True,
            reasoning=suggestion or DEFAULT_PALETTE_REASONING,
            harmony=analyze_color_harmony(colors),
            accessibility=analyze_accessibility(colors),
            psychology=get_color_psychology(colors),
        ))
    return palettes


async def run_typography_generation(context: dict[str, Any]) -> list[TypographyPairing]:
    """AI-annotated font pairings, or the deterministic fallback set on any failure."""
    try:
        suggestions = await run_suggestions("typography", context)
    except BrandmarkError as e:
        logger.warning("Typography suggestions unavailable, using fallbacks: %s", e)
        return generate_fallback_typography()

    return [
        TypographyPairing(
            id=f"ai-typography-{index}",
            name=f"{heading} + {body}",
            heading=FontFace(family=heading, fallback=heading_fallback),
            body=FontFace(family=body, fallback=body_fallback),
            category=category,
            reasoning=(suggestions[index] if index < len(suggestions) else "")
            or DEFAULT_TYPOGRAPHY_REASONING,
            ai_generated=True,
        )
        for index, (heading, heading_fallback, body, body_fallback, category)
        in enumerate(AI_FONT_PAIRS)
    ]
