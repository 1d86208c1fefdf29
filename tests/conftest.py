"""Shared fixtures: Gemini clients backed by fake models."""

from __future__ import annotations

import asyncio
import threading
from typing import Any

import pytest

from readme_emojifier.config import ModelSettings
from readme_emojifier.core.llm_engine import GeminiClient
from tests.fakes import FakeGeminiModel


@pytest.fixture
def model_settings() -> ModelSettings:
    return ModelSettings(api_key="test-key", model_name="gemini-2.5-flash", temperature=0.4)


@pytest.fixture
def make_client(model_settings):
    def _make(model_cls: type = FakeGeminiModel, **kwargs: Any) -> GeminiClient:
        return GeminiClient(model_settings, model=model_cls(**kwargs))

    return _make


@pytest.fixture
def background_loop():
    """Event loop running in its own thread, as the Streamlit page uses it."""
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()
    yield loop
    loop.call_soon_threadsafe(loop.stop)
    thread.join()
    loop.close()
