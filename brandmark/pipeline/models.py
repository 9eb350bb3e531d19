"""Pydantic data models for the brand-identity pipeline."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from brandmark.config import MAX_LOGO_COUNT


# ── Enums ──────────────────────────────────────────────────────────

class LogoStyle(str, Enum):
    MINIMAL = "minimal"
    MODERN = "modern"
    CLASSIC = "classic"
    PLAYFUL = "playful"
    BOLD = "bold"
    ORGANIC = "organic"


class LogoType(str, Enum):
    WORDMARK = "wordmark"
    LETTERMARK = "lettermark"
    PICTORIAL = "pictorial"
    ABSTRACT = "abstract"
    MASCOT = "mascot"
    COMBINATION = "combination"


class ImageQuality(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    AUTO = "auto"


class ImageSize(str, Enum):
    SQUARE = "1024x1024"
    PORTRAIT = "1024x1536"
    LANDSCAPE = "1536x1024"
    AUTO = "auto"


class ImageBackground(str, Enum):
    TRANSPARENT = "transparent"
    OPAQUE = "opaque"
    AUTO = "auto"


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"


class JobStage(str, Enum):
    QUEUED = "queued"
    PROMPT_BUILDING = "prompt_building"
    GENERATING = "generating"
    STORING = "storing"
    COMPLETE = "complete"
    FAILED = "failed"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Brand Context ──────────────────────────────────────────────────

class BrandIdentity(_Frozen):
    name: str
    industry: str
    industry_segment: Optional[str] = None


class BrandPurpose(_Frozen):
    mission: str
    vision: str
    why: str


class BrandValues(_Frozen):
    core_values: tuple[str, ...]
    positioning: str
    unique_value: str


class BrandAudience(_Frozen):
    primary: str
    demographics: str
    psychographics: str
    pain_points: tuple[str, ...] = ()


class BrandCompetitive(_Frozen):
    advantage: str
    market_gap: str
    direct_competitors: tuple[str, ...] = ()


class BrandArchetype(_Frozen):
    primary: str
    secondary: Optional[str] = None
    reasoning: str = ""


class BrandStrategy(_Frozen):
    purpose: BrandPurpose
    values: BrandValues
    audience: BrandAudience
    competitive: BrandCompetitive
    archetype: BrandArchetype


class BrandContext(_Frozen):
    """Normalized brand identity + strategy. Every field is resolved."""

    brand_identity: BrandIdentity
    brand_strategy: BrandStrategy

    @property
    def name(self) -> str:
        return self.brand_identity.name

    @property
    def industry(self) -> str:
        return self.brand_identity.industry

    @property
    def archetype(self) -> str:
        return self.brand_strategy.archetype.primary


# ── Knowledge Base Records ─────────────────────────────────────────

class ArchetypeVisuals(_Frozen):
    colors: tuple[str, ...]
    shapes: tuple[str, ...]
    typography: str
    mood: tuple[str, ...]
    symbols: tuple[str, ...]
    avoid: tuple[str, ...]


class StyleVisuals(_Frozen):
    description: str
    characteristics: tuple[str, ...]
    technical_notes: tuple[str, ...]


class VisualKeywords(BaseModel):
    primary_mood: list[str] = Field(default_factory=list)
    secondary_mood: list[str] = Field(default_factory=list)
    shapes: list[str] = Field(default_factory=list)
    symbols: list[str] = Field(default_factory=list)
    colors_suggested: list[str] = Field(default_factory=list)
    typography_style: str = ""
    avoid: list[str] = Field(default_factory=list)


# ── Request Parameters ─────────────────────────────────────────────

class VisualPreferences(BaseModel):
    selected_style: LogoStyle = LogoStyle.MODERN
    mood: list[str] = Field(default_factory=list)
    avoid: list[str] = Field(default_factory=list)
    logo_type_preference: Optional[LogoType] = None


class GenerationOptions(BaseModel):
    count: int = Field(default=1, ge=1, le=MAX_LOGO_COUNT)
    size: ImageSize = ImageSize.SQUARE
    quality: ImageQuality = ImageQuality.HIGH
    background: ImageBackground = ImageBackground.TRANSPARENT
    format: ImageFormat = ImageFormat.PNG


# ── Logo Prompt ────────────────────────────────────────────────────

class PromptSections(_Frozen):
    brand_context: str
    visual_direction: str
    requirements: str
    constraints: str
    technical_specs: str


class GenerationParams(_Frozen):
    model: str
    size: ImageSize
    quality: ImageQuality
    background: ImageBackground
    format: ImageFormat
    n: int


class LogoPrompt(_Frozen):
    full_prompt: str
    sections: PromptSections
    generation_params: GenerationParams


class PromptValidation(BaseModel):
    valid: bool
    issues: list[str] = Field(default_factory=list)


# ── Image Generation Boundary ──────────────────────────────────────

class LogoGenerationRequest(BaseModel):
    brand_context: BrandContext
    visual_preferences: VisualPreferences = Field(default_factory=VisualPreferences)
    generation_options: GenerationOptions = Field(default_factory=GenerationOptions)


class LogoVariation(BaseModel):
    type: str
    description: str


class ImageData(BaseModel):
    base64: str = ""
    url: Optional[str] = None
    format: ImageFormat = ImageFormat.PNG
    size: str = ImageSize.SQUARE.value
    has_transparency: bool = False


class GeneratedLogo(BaseModel):
    id: str
    variant: str
    style: LogoStyle
    image_data: ImageData
    revised_prompt: Optional[str] = None
    generation_params: dict[str, Any] = Field(default_factory=dict)
    variations: list[LogoVariation] = Field(default_factory=list)


class PromptInfo(BaseModel):
    original_request: str
    enhanced_prompt: str
    revised_prompt: Optional[str] = None
    context_used: list[str] = Field(default_factory=list)


class GenerationMetadata(BaseModel):
    model: str
    quality: ImageQuality
    size: ImageSize
    tokens_used: Optional[int] = None
    generation_time_ms: Optional[int] = None


class LogoGenerationResponse(BaseModel):
    success: bool
    generation_id: Optional[str] = None
    logos: list[GeneratedLogo] = Field(default_factory=list)
    prompt_info: Optional[PromptInfo] = None
    metadata: Optional[GenerationMetadata] = None
    error: Optional[str] = None


# ── Fallback Logo ──────────────────────────────────────────────────

class FallbackLogo(BaseModel):
    id: str
    style: str
    svg: str
    description: str
    url: Optional[str] = None
    ai_generated: bool = False


# ── Color Palette ──────────────────────────────────────────────────

class ColorHarmony(BaseModel):
    type: str
    balance: int
    contrast: str
    temperature: str


class AccessibilityReport(BaseModel):
    wcag_score: int
    wcag_aa: bool
    wcag_aaa: bool
    color_blind_friendly: bool
    recommendations: list[str] = Field(default_factory=list)


class ColorPsychology(BaseModel):
    emotions: list[str] = Field(default_factory=list)
    overall: str = ""


class ColorPalette(BaseModel):
    id: str
    name: str
    description: str = ""
    colors: list[str]
    primary: str
    wcag_score: int
    ai_generated: bool
    reasoning: str = ""
    harmony: Optional[ColorHarmony] = None
    accessibility: Optional[AccessibilityReport] = None
    psychology: Optional[ColorPsychology] = None


# ── Typography ─────────────────────────────────────────────────────

class FontFace(BaseModel):
    family: str
    fallback: str = "sans-serif"


class TypographyPairing(BaseModel):
    id: str
    name: str
    heading: FontFace
    body: FontFace
    category: str = ""
    reasoning: str = ""
    ai_generated: bool


# ── Generation Job ─────────────────────────────────────────────────

class GenerationJob(BaseModel):
    job_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    user_id: Optional[str] = None
    brand_id: str = "temp"
    request: LogoGenerationRequest
    stage: JobStage = JobStage.QUEUED
    prompt: Optional[LogoPrompt] = None
    validation: Optional[PromptValidation] = None
    response: Optional[LogoGenerationResponse] = None
    fallback_logos: list[FallbackLogo] = Field(default_factory=list)
    error: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None
