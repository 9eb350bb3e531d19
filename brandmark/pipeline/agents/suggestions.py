"""Suggestion Agent: Claude writes reasoning text for palettes and typography."""

from __future__ import annotations

import json
import logging
from typing import Any

import anthropic

from brandmark.config import ANTHROPIC_API_KEY, CLAUDE_MODEL
from brandmark.exceptions import ConfigurationError, SuggestionError

logger = logging.getLogger(__name__)

SUGGESTION_SYSTEM = """\
You are a senior brand identity designer. You give short, concrete design
rationale grounded in color theory, typography and brand archetypes.
Each suggestion is one or two sentences."""

SUGGESTION_PROMPTS = {
    "colors": (
        "Based on this brand context: {context}, suggest 6 different color "
        "palette concepts with psychological reasoning{industry}. Consider the "
        "brand archetype, target audience, and industry. For each palette, "
        "explain the emotional impact and brand alignment."
    ),
    "typography": (
        "Based on this brand context: {context}, recommend 4 typography pairings "
        "(heading + body font combinations){industry}. Consider readability, brand "
        "personality, target audience, and accessibility. Explain why each "
        "pairing works for this specific brand."
    ),
}

OUTPUT_FORMAT = """

## Output Format
Return a JSON array of strings, one string per suggestion, in order.
Return ONLY the JSON array, no other text."""


async def run_suggestions(category: str, context: dict[str, Any]) -> list[str]:
    """Ask Claude for reasoning text. Raises SuggestionError on any failure."""

    template = SUGGESTION_PROMPTS.get(category)
    if template is None:
        raise ValueError(f"Unknown suggestion category: {category}")
    if not ANTHROPIC_API_KEY:
        raise ConfigurationError("ANTHROPIC_API_KEY is not configured")

    industry = context.get("industry")
    prompt = template.format(
        context=json.dumps(context, default=str),
        industry=f" for a {industry} industry brand" if industry else "",
    ) + OUTPUT_FORMAT

    client = anthropic.AsyncAnthropic(api_key=ANTHROPIC_API_KEY)

    try:
        response = await client.messages.create(
            model=CLAUDE_MODEL,
            max_tokens=1500,
            system=SUGGESTION_SYSTEM,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        raise SuggestionError("Suggestion service request failed", details=str(e)) from e

    raw = next(
        (block.text for block in response.content or () if getattr(block, "type", "") == "text"),
        None,
    )
    if not raw:
        raise SuggestionError("Suggestion service returned no text")
    logger.info("Suggestion agent completed %s (%d chars)", category, len(raw))

    return _parse_suggestions(raw)


def _parse_suggestions(raw: str) -> list[str]:
    """Parse a JSON array of strings from Claude's response."""
    # Strip markdown code fences if present
    text = raw.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        lines = lines[1:]  # drop opening fence
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse suggestion JSON: %s", text[:200])
        raise SuggestionError("Suggestion service returned invalid JSON") from e

    if not isinstance(data, list):
        raise SuggestionError("Suggestion service did not return a list")

    return [str(item).strip() for item in data if str(item).strip()]
