"""Generator Agent: renders logos from a composed prompt with the Gemini image API."""

from __future__ import annotations

import asyncio
import base64
import io
import logging
import time
import uuid

from google import genai
from google.genai import types
from PIL import Image

from brandmark.config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    MAX_LOGO_COUNT,
    MAX_RETRIES,
    QUALITY_TO_RESOLUTION,
    SIZE_TO_ASPECT_RATIO,
)
from brandmark.exceptions import ConfigurationError, GenerationError
from brandmark.pipeline.fallbacks import generate_logo_variations
from brandmark.pipeline.models import (
    GeneratedLogo,
    GenerationMetadata,
    ImageBackground,
    ImageData,
    ImageFormat,
    LogoGenerationRequest,
    LogoGenerationResponse,
    LogoPrompt,
    PromptInfo,
)

logger = logging.getLogger(__name__)

TRANSPARENT_INSTRUCTION = (
    "Render the logo on a fully transparent background with no backdrop, "
    "shadow plate or frame.\n\n"
)

PIL_FORMATS = {
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.WEBP: "WEBP",
}


def _make_client() -> genai.Client:
    if not GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY is not configured")
    return genai.Client(api_key=GEMINI_API_KEY)


def _generate_single(
    client: genai.Client,
    prompt: str,
    aspect_ratio: str,
    resolution: str,
) -> tuple[Image.Image | None, str]:
    """Synchronous Gemini call, run via asyncio.to_thread."""

    response = client.models.generate_content(
        model=GEMINI_MODEL,
        contents=[prompt],
        config=types.GenerateContentConfig(
            response_modalities=["TEXT", "IMAGE"],
            image_config=types.ImageConfig(
                aspect_ratio=aspect_ratio,
                image_size=resolution,
            ),
        ),
    )

    result_image = None
    result_text = ""

    if response.parts:
        for part in response.parts:
            if getattr(part, "thought", False):
                continue
            if part.text is not None:
                result_text += part.text
            elif part.inline_data is not None and part.inline_data.data:
                result_image = Image.open(io.BytesIO(part.inline_data.data))

    return result_image, result_text


def encode_image(image: Image.Image, fmt: ImageFormat) -> tuple[str, bool]:
    """Base64-encode *image* in *fmt*. Returns (data, has_transparency)."""
    if fmt == ImageFormat.JPEG and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format=PIL_FORMATS[fmt])
    has_alpha = fmt != ImageFormat.JPEG and image.mode in ("RGBA", "LA", "PA")
    return base64.b64encode(buffer.getvalue()).decode(), has_alpha


def _generation_id() -> str:
    return f"logo_gen_{int(time.time() * 1000)}_{uuid.uuid4().hex[:6]}"


async def run_generator(
    request: LogoGenerationRequest,
    prompt: LogoPrompt,
) -> LogoGenerationResponse:
    """Generate ``count`` logos sequentially. Raises GenerationError if none succeed."""

    options = request.generation_options
    aspect_ratio = SIZE_TO_ASPECT_RATIO[options.size.value]
    resolution = QUALITY_TO_RESOLUTION[options.quality.value]
    count = min(max(options.count, 1), MAX_LOGO_COUNT)
    style = request.visual_preferences.selected_style

    text_prompt = prompt.full_prompt
    if options.background == ImageBackground.TRANSPARENT:
        text_prompt = TRANSPARENT_INSTRUCTION + text_prompt

    client = _make_client()
    generation_id = _generation_id()
    started = time.monotonic()

    logos: list[GeneratedLogo] = []
    last_error = ""

    for i in range(count):
        for attempt in range(MAX_RETRIES + 1):
            try:
                image, text = await asyncio.to_thread(
                    _generate_single,
                    client,
                    text_prompt,
                    aspect_ratio,
                    resolution,
                )

                if image is None:
                    last_error = "No image in Gemini response (safety filter?)"
                    logger.warning(
                        "Attempt %d/%d for logo %d: %s",
                        attempt + 1, MAX_RETRIES + 1, i + 1, last_error,
                    )
                    continue

                data, has_alpha = encode_image(image, options.format)
                logos.append(GeneratedLogo(
                    id=f"{generation_id}_{i}",
                    variant=f"variant-{i + 1}",
                    style=style,
                    image_data=ImageData(
                        base64=data,
                        format=options.format,
                        size=options.size.value,
                        has_transparency=has_alpha,
                    ),
                    revised_prompt=text.strip() or None,
                    generation_params=prompt.generation_params.model_dump(mode="json"),
                    variations=generate_logo_variations(),
                ))
                break

            except Exception as e:
                last_error = str(e)
                logger.warning(
                    "Attempt %d/%d for logo %d failed: %s",
                    attempt + 1, MAX_RETRIES + 1, i + 1, last_error,
                )
                if attempt < MAX_RETRIES:
                    await asyncio.sleep(2 * (attempt + 1))

    if not logos:
        raise GenerationError("Logo generation failed", details=last_error)

    elapsed_ms = int((time.monotonic() - started) * 1000)
    logger.info("Generator completed: %d/%d logos in %d ms", len(logos), count, elapsed_ms)

    brand = request.brand_context
    return LogoGenerationResponse(
        success=True,
        generation_id=generation_id,
        logos=logos,
        prompt_info=PromptInfo(
            original_request=f"{style.value} logo for {brand.name}",
            enhanced_prompt=prompt.full_prompt,
            revised_prompt=logos[0].revised_prompt,
            context_used=[
                "brand_identity",
                "purpose",
                "values",
                "audience",
                "competitive",
                "archetype",
            ],
        ),
        metadata=GenerationMetadata(
            model=prompt.generation_params.model,
            quality=options.quality,
            size=options.size,
            generation_time_ms=elapsed_ms,
        ),
    )
