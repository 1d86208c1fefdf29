"""Prompt construction and Gemini generation."""

from .exceptions import (
    ConfigurationError,
    EmojifierError,
    GenerationFailure,
    RemoteServiceError,
    UnknownGenerationError,
    ValidationError,
)
from .llm_engine import GeminiClient, emojify_readme
from .prompt_builder import OutputFormat, build_prompt

__all__ = [
    "ConfigurationError",
    "EmojifierError",
    "GenerationFailure",
    "RemoteServiceError",
    "UnknownGenerationError",
    "ValidationError",
    "GeminiClient",
    "emojify_readme",
    "OutputFormat",
    "build_prompt",
]
