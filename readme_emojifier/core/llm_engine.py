"""Gemini generation client."""

from __future__ import annotations

from typing import Any, Optional, Union

from readme_emojifier.config import ModelSettings, get_settings
from readme_emojifier.core.exceptions import (
    ConfigurationError,
    RemoteServiceError,
    UnknownGenerationError,
)
from readme_emojifier.core.prompt_builder import OutputFormat, build_prompt
from readme_emojifier.utils.logger import logger
from readme_emojifier.utils.markdown_cleaner import sanitize_markdown

REMOTE_ERROR_PREFIX = "Gemini API Error"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while communicating with the Gemini API."


def _response_text(response: Any) -> str:
    # response.text raises ValueError when the candidate has no simple text part
    blocked_reason = ""
    try:
        text = response.text
        if text:
            return text
    except (ValueError, AttributeError) as exc:
        blocked_reason = str(exc).strip()

    candidates = getattr(response, "candidates", None)
    if candidates:
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        parts_text = [part.text for part in parts if getattr(part, "text", None)]
        if parts_text:
            return "".join(parts_text)
        if not blocked_reason:
            finish_reason = getattr(candidates[0], "finish_reason", None)
            if finish_reason:
                blocked_reason = f"finish_reason {getattr(finish_reason, 'name', finish_reason)}"

    logger.error("Gemini returned no text: {}", blocked_reason or "empty response")
    if blocked_reason:
        raise RemoteServiceError(f"{REMOTE_ERROR_PREFIX}: {blocked_reason}")
    raise UnknownGenerationError(UNKNOWN_ERROR_MESSAGE)


class GeminiClient:
    """Sends enhancement prompts to Google Gemini and cleans the reply."""

    def __init__(self, model_settings: ModelSettings, model: Any = None) -> None:
        if not model_settings.api_key or not model_settings.api_key.strip():
            raise ConfigurationError(
                "Gemini API key is required. Set EMOJIFIER_GEMINI_API_KEY (or API_KEY) in .env file"
            )

        self.model_name = model_settings.model_name
        self.temperature = model_settings.temperature
        self.model = model if model is not None else self._build_model(model_settings)
        logger.info("Initialized Gemini client for model {}", self.model_name)

    @staticmethod
    def _build_model(model_settings: ModelSettings) -> Any:
        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError(
                "google-generativeai package is required for Gemini. "
                "Install it with: pip install google-generativeai"
            )

        genai.configure(api_key=model_settings.api_key)
        return genai.GenerativeModel(model_settings.model_name)

    async def generate(self, content: str, output_format: Union[OutputFormat, str]) -> str:
        """
        Enhance ``content`` in the requested format.

        Exactly one request is made. Failures, including replies that carry
        no text, are raised as RemoteServiceError (the provider gave a
        message or a finish reason) or UnknownGenerationError (it did not).
        """
        prompt = build_prompt(content, output_format)
        logger.debug(
            "Dispatching {} prompt ({} chars) to {}",
            getattr(output_format, "value", output_format),
            len(prompt),
            self.model_name,
        )

        try:
            response = await self.model.generate_content_async(
                prompt,
                generation_config={"temperature": self.temperature},
            )
        except Exception as exc:
            logger.error("Gemini API request failed: {!r}", exc)
            message = str(exc).strip()
            if message:
                raise RemoteServiceError(f"{REMOTE_ERROR_PREFIX}: {message}") from exc
            raise UnknownGenerationError(UNKNOWN_ERROR_MESSAGE) from exc

        return sanitize_markdown(_response_text(response))


async def emojify_readme(
    content: str,
    output_format: Union[OutputFormat, str],
    client: Optional[GeminiClient] = None,
) -> str:
    """Enhance README content using ``client`` or one built from settings."""
    client = client or GeminiClient(get_settings().model)
    return await client.generate(content, output_format)


__all__ = [
    "GeminiClient",
    "emojify_readme",
    "REMOTE_ERROR_PREFIX",
    "UNKNOWN_ERROR_MESSAGE",
]
