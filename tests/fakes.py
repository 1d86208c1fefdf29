"""Test doubles for the Gemini SDK."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any, List, Optional


class FakeGeminiModel:
    """Stands in for google.generativeai.GenerativeModel."""

    def __init__(self, text: str = "", error: Optional[BaseException] = None, response: Any = None):
        self.text = text
        self.error = error
        self.response = response
        self.calls: List[dict] = []

    async def generate_content_async(self, prompt: str, generation_config: Any = None) -> Any:
        self.calls.append({"prompt": prompt, "generation_config": generation_config})
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return SimpleNamespace(text=self.text, candidates=[])


class LoopBoundGeminiModel(FakeGeminiModel):
    """Binds to the first loop it runs on, like the SDK's async gRPC client."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.loop: Optional[asyncio.AbstractEventLoop] = None

    async def generate_content_async(self, prompt: str, generation_config: Any = None) -> Any:
        running = asyncio.get_running_loop()
        if self.loop is None:
            self.loop = running
        elif self.loop is not running or self.loop.is_closed():
            raise RuntimeError("Event loop is closed")
        return await super().generate_content_async(prompt, generation_config)


class BlockedResponse:
    """Reply whose ``.text`` raises, as the SDK does for safety-blocked output."""

    def __init__(self, reason: str = "", finish_reason: Any = None, parts: Optional[list] = None):
        self.reason = reason
        self.candidates = [
            SimpleNamespace(content=SimpleNamespace(parts=parts or []), finish_reason=finish_reason)
        ]

    @property
    def text(self) -> str:
        raise ValueError(self.reason)
