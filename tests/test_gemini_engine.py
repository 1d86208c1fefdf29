"""Integration smoke test for the live Gemini API."""

from __future__ import annotations

import os

import pytest

from readme_emojifier.config import API_KEY_ENV_VARS, get_settings
from readme_emojifier.core.llm_engine import GeminiClient
from readme_emojifier.core.prompt_builder import OutputFormat


@pytest.mark.skipif(
    not any(os.getenv(name) for name in API_KEY_ENV_VARS),
    reason="Gemini API key is not set; skipping live connectivity test.",
)
class TestGeminiConnectivity:
    """Validate that Gemini answers with fence-free Markdown."""

    @pytest.mark.asyncio
    async def test_list_enhancement(self):
        client = GeminiClient(get_settings().model)
        reply = await client.generate("## Key Features\n- Dark mode", OutputFormat.LIST)
        assert isinstance(reply, str)
        assert reply
        assert not reply.startswith("```")
