"""REST API routes."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from brandmark.pipeline.agents.prompt_architect import build_prompt, validate_prompt
from brandmark.pipeline.brand_context import build_brand_context
from brandmark.pipeline.exporters import (
    PALETTE_FORMATS,
    TYPOGRAPHY_FORMATS,
    export_palette,
    export_typography,
)
from brandmark.pipeline.models import (
    BrandContext,
    ColorPalette,
    GenerationJob,
    GenerationOptions,
    LogoGenerationRequest,
    TypographyPairing,
    VisualPreferences,
)
from brandmark.pipeline.orchestrator import (
    run_logo_generation,
    run_palette_generation,
    run_typography_generation,
)
from brandmark.pipeline.recommender import recommend_logo_type
from brandmark.storage.database import get_token_store
from brandmark.storage.jobs import job_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class LogoRequestBody(BaseModel):
    """Loose brand data as the client sends it, plus typed preferences."""

    brand: dict[str, Any] = Field(default_factory=dict)
    visual_preferences: VisualPreferences = Field(default_factory=VisualPreferences)
    generation_options: GenerationOptions = Field(default_factory=GenerationOptions)


class BrandBody(BaseModel):
    brand: dict[str, Any] = Field(default_factory=dict)


def _suggestion_context(brand: BrandContext) -> dict[str, Any]:
    strategy = brand.brand_strategy
    return {
        "name": brand.name,
        "industry": brand.industry,
        "archetype": brand.archetype,
        "audience": strategy.audience.primary,
        "values": list(strategy.values.core_values),
        "positioning": strategy.values.positioning,
    }


def _job_summary(job: GenerationJob) -> dict:
    return {
        "job_id": job.job_id,
        "brand": job.request.brand_context.name,
        "style": job.request.visual_preferences.selected_style.value,
        "stage": job.stage.value,
        "created_at": job.created_at.isoformat(),
        "completed_at": job.completed_at.isoformat() if job.completed_at else None,
        "logo_count": len(job.response.logos) if job.response else 0,
        "fallback_count": len(job.fallback_logos),
        "error": job.error,
    }


def _unsupported_format(fmt: str, supported: tuple[str, ...]) -> JSONResponse:
    return JSONResponse(
        {"error": f"Unsupported export format: {fmt}", "supported": list(supported)},
        status_code=400,
    )


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": "brandmark"}


# ── Logos ──────────────────────────────────────────────────────────────


@router.post("/logos/prompt")
async def logo_prompt(body: LogoRequestBody) -> JSONResponse:
    """Compose and validate a prompt without generating (no tokens spent)."""
    brand = build_brand_context(body.brand)
    prompt = build_prompt(brand, body.visual_preferences, body.generation_options)
    return JSONResponse({
        "prompt": prompt.model_dump(mode="json"),
        "validation": validate_prompt(prompt).model_dump(mode="json"),
        "logo_type": (
            body.visual_preferences.logo_type_preference or recommend_logo_type(brand)
        ).value,
    })


@router.post("/logos/generate")
async def generate_logos(
    body: LogoRequestBody,
    x_user_id: Optional[str] = Header(default=None),
    x_brand_id: Optional[str] = Header(default=None),
) -> JSONResponse:
    job = GenerationJob(
        user_id=x_user_id or None,
        brand_id=x_brand_id or "temp",
        request=LogoGenerationRequest(
            brand_context=build_brand_context(body.brand),
            visual_preferences=body.visual_preferences,
            generation_options=body.generation_options,
        ),
    )
    job_store.create(job)

    # Fire in background; client tracks via WebSocket or GET /api/jobs/{id}
    asyncio.create_task(run_logo_generation(job))

    return JSONResponse({"job_id": job.job_id}, status_code=202)


@router.get("/jobs")
async def list_jobs(x_user_id: Optional[str] = Header(default=None)) -> JSONResponse:
    return JSONResponse([_job_summary(j) for j in job_store.list_all(x_user_id)])


@router.get("/jobs/{job_id}")
async def get_job(job_id: str) -> JSONResponse:
    job = job_store.get(job_id)
    if not job:
        return JSONResponse({"error": "Job not found"}, status_code=404)

    return JSONResponse({
        **_job_summary(job),
        "validation": job.validation.model_dump(mode="json") if job.validation else None,
        "response": job.response.model_dump(mode="json") if job.response else None,
        "fallback_logos": [logo.model_dump(mode="json") for logo in job.fallback_logos],
    })


# ── Palettes and typography ────────────────────────────────────────────


@router.post("/palettes")
async def palettes(body: BrandBody) -> JSONResponse:
    brand = build_brand_context(body.brand)
    result = await run_palette_generation(brand.archetype, _suggestion_context(brand))
    return JSONResponse([p.model_dump(mode="json") for p in result])


@router.post("/typography")
async def typography(body: BrandBody) -> JSONResponse:
    brand = build_brand_context(body.brand)
    result = await run_typography_generation(_suggestion_context(brand))
    return JSONResponse([t.model_dump(mode="json") for t in result])


@router.post("/palettes/export")
async def palette_export(palette: ColorPalette, format: str = "css"):
    if format not in PALETTE_FORMATS:
        return _unsupported_format(format, PALETTE_FORMATS)
    return PlainTextResponse(export_palette(palette, format))


@router.post("/typography/export")
async def typography_export(pairing: TypographyPairing, format: str = "css"):
    if format not in TYPOGRAPHY_FORMATS:
        return _unsupported_format(format, TYPOGRAPHY_FORMATS)
    return PlainTextResponse(export_typography(pairing, format))


# ── Tokens ─────────────────────────────────────────────────────────────


@router.get("/tokens")
async def tokens(x_user_id: Optional[str] = Header(default=None)) -> JSONResponse:
    if not x_user_id:
        return JSONResponse({"error": "Authentication required"}, status_code=401)

    store = get_token_store()
    balance = await asyncio.to_thread(store.get_balance, x_user_id)
    history = await asyncio.to_thread(store.transaction_history, x_user_id)
    return JSONResponse({"user_id": x_user_id, "balance": balance, "transactions": history})
