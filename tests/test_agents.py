"""Tests for the image generator and suggestion agents (SDK calls mocked)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from PIL import Image

from brandmark.exceptions import ConfigurationError, GenerationError, SuggestionError
from brandmark.pipeline.agents import generator, suggestions
from brandmark.pipeline.agents.generator import encode_image, run_generator
from brandmark.pipeline.agents.prompt_architect import build_prompt
from brandmark.pipeline.agents.suggestions import _parse_suggestions, run_suggestions
from brandmark.pipeline.models import ImageBackground, ImageFormat


def _prompt_for(job):
    request = job.request
    return build_prompt(
        request.brand_context,
        request.visual_preferences,
        request.generation_options,
    )


class TestEncodeImage:
    def test_png_keeps_alpha(self):
        _, has_alpha = encode_image(Image.new("RGBA", (4, 4)), ImageFormat.PNG)
        assert has_alpha

    def test_jpeg_drops_alpha(self):
        data, has_alpha = encode_image(Image.new("RGBA", (4, 4)), ImageFormat.JPEG)
        assert data
        assert not has_alpha


class TestRunGenerator:
    @pytest.mark.asyncio
    async def test_generates_requested_count(self, make_job):
        job = make_job(count=2)
        single = MagicMock(return_value=(Image.new("RGBA", (8, 8)), "A bold mark"))
        with (
            patch.object(generator, "_make_client", return_value=MagicMock()),
            patch.object(generator, "_generate_single", single),
        ):
            response = await run_generator(job.request, _prompt_for(job))

        assert response.success
        assert response.generation_id.startswith("logo_gen_")
        assert [logo.variant for logo in response.logos] == ["variant-1", "variant-2"]
        assert all(logo.image_data.has_transparency for logo in response.logos)
        assert len(response.logos[0].variations) == 4
        assert response.prompt_info.revised_prompt == "A bold mark"
        assert response.metadata.generation_time_ms >= 0

    @pytest.mark.asyncio
    async def test_transparent_background_instruction(self, make_job):
        job = make_job(background=ImageBackground.TRANSPARENT)
        single = MagicMock(return_value=(Image.new("RGBA", (8, 8)), ""))
        with (
            patch.object(generator, "_make_client", return_value=MagicMock()),
            patch.object(generator, "_generate_single", single),
        ):
            await run_generator(job.request, _prompt_for(job))

        sent_prompt = single.call_args.args[1]
        assert sent_prompt.startswith(generator.TRANSPARENT_INSTRUCTION)
        assert single.call_args.args[2:] == ("1:1", "2K")

    @pytest.mark.asyncio
    async def test_no_image_raises(self, make_job):
        job = make_job()
        single = MagicMock(return_value=(None, "blocked"))
        with (
            patch.object(generator, "_make_client", return_value=MagicMock()),
            patch.object(generator, "_generate_single", single),
        ):
            with pytest.raises(GenerationError):
                await run_generator(job.request, _prompt_for(job))

        assert single.call_count == generator.MAX_RETRIES + 1

    @pytest.mark.asyncio
    async def test_missing_key(self, make_job):
        job = make_job()
        with patch.object(generator, "GEMINI_API_KEY", ""):
            with pytest.raises(ConfigurationError):
                await run_generator(job.request, _prompt_for(job))


class TestSuggestions:
    def test_parse_plain_array(self):
        assert _parse_suggestions('["a", " b "]') == ["a", "b"]

    def test_parse_fenced(self):
        assert _parse_suggestions('```json\n["calm blues"]\n```') == ["calm blues"]

    def test_parse_invalid(self):
        with pytest.raises(SuggestionError):
            _parse_suggestions("not json")

    def test_parse_not_a_list(self):
        with pytest.raises(SuggestionError):
            _parse_suggestions('{"a": 1}')

    @pytest.mark.asyncio
    async def test_unknown_category(self):
        with pytest.raises(ValueError):
            await run_suggestions("logos", {})

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with patch.object(suggestions, "ANTHROPIC_API_KEY", ""):
            with pytest.raises(ConfigurationError):
                await run_suggestions("colors", {})

    @pytest.mark.asyncio
    async def test_calls_claude(self):
        message = MagicMock()
        message.content = [MagicMock(type="text", text='["Deep navy conveys trust"]')]
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=message)

        with (
            patch.object(suggestions, "ANTHROPIC_API_KEY", "test-key"),
            patch.object(suggestions.anthropic, "AsyncAnthropic", return_value=client),
        ):
            result = await run_suggestions("colors", {"industry": "Finance"})

        assert result == ["Deep navy conveys trust"]
        prompt = client.messages.create.call_args.kwargs["messages"][0]["content"]
        assert "for a Finance industry brand" in prompt

    @pytest.mark.asyncio
    async def test_skips_non_text_blocks(self):
        message = MagicMock()
        message.content = [
            MagicMock(type="thinking", text=None),
            MagicMock(type="text", text='["Warm amber feels inviting"]'),
        ]
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=message)

        with (
            patch.object(suggestions, "ANTHROPIC_API_KEY", "test-key"),
            patch.object(suggestions.anthropic, "AsyncAnthropic", return_value=client),
        ):
            result = await run_suggestions("colors", {})

        assert result == ["Warm amber feels inviting"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [
        [],
        [SimpleNamespace(type="tool_use", id="tu_1", name="lookup", input={})],
    ])
    async def test_reply_without_text(self, content):
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=SimpleNamespace(content=content))

        with (
            patch.object(suggestions, "ANTHROPIC_API_KEY", "test-key"),
            patch.object(suggestions.anthropic, "AsyncAnthropic", return_value=client),
        ):
            with pytest.raises(SuggestionError):
                await run_suggestions("typography", {})
