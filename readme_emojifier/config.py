"""Centralized configuration objects for the README Emojifier."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class AppSettings(BaseModel):
    """Streamlit/UI level configuration."""

    name: str = "README Emojifier"
    tagline: str = "Transform your README from plain to polished with AI"
    debug: bool = False


class ModelSettings(BaseModel):
    """Runtime configuration for the Gemini backend."""

    api_key: Optional[str] = None
    model_name: str = "gemini-2.5-flash"
    # Low temperature keeps the output close to the formatting rules.
    temperature: float = Field(0.4, ge=0.0, le=2.0)


class Settings(BaseModel):
    """Top-level settings container."""

    project_root: Path = PROJECT_ROOT
    app: AppSettings = AppSettings()
    model: ModelSettings = ModelSettings()


API_KEY_ENV_VARS = ("EMOJIFIER_GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY")


def _api_key_from_env() -> Optional[str]:
    for env_key in API_KEY_ENV_VARS:
        value = os.getenv(env_key)
        if value:
            return value
    return None


def _settings_from_env() -> Dict[str, Any]:
    """Allow lightweight overriding via environment variables."""

    overrides: Dict[str, Any] = {}
    model_overrides: Dict[str, Any] = {}

    api_key = _api_key_from_env()
    if api_key:
        model_overrides["api_key"] = api_key

    model_name = os.getenv("EMOJIFIER_MODEL_NAME")
    if model_name:
        model_overrides["model_name"] = model_name

    temperature = os.getenv("EMOJIFIER_TEMPERATURE")
    if temperature is not None:
        model_overrides["temperature"] = float(temperature)

    if model_overrides:
        overrides["model"] = model_overrides

    app_debug = os.getenv("EMOJIFIER_DEBUG")
    if app_debug is not None:
        overrides["app"] = {"debug": app_debug.lower() in {"1", "true", "yes"}}

    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings(**_settings_from_env())


__all__ = ["AppSettings", "ModelSettings", "Settings", "get_settings", "API_KEY_ENV_VARS"]
