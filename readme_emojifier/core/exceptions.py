"""Exception hierarchy shared by the core and the UI layer."""

from __future__ import annotations


class EmojifierError(Exception):
    """Base error carrying a human-readable message for display."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(EmojifierError):
    """Required configuration (the Gemini API key) is missing."""


class ValidationError(EmojifierError):
    """User input was rejected before any remote call."""


class GenerationFailure(EmojifierError):
    """A generation request failed; the invocation is over."""


class RemoteServiceError(GenerationFailure):
    """The Gemini API reported an error with a message."""


class UnknownGenerationError(GenerationFailure):
    """The remote call failed without any usable message."""


__all__ = [
    "EmojifierError",
    "ConfigurationError",
    "ValidationError",
    "GenerationFailure",
    "RemoteServiceError",
    "UnknownGenerationError",
]
