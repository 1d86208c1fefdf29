"""Validation helpers for README input."""

from __future__ import annotations

from typing import Optional

from readme_emojifier.core.exceptions import ValidationError

EMPTY_INPUT_MESSAGE = "Please enter some README content to enhance."


def is_input_valid(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def validate_readme_input(value: Optional[str]) -> str:
    """Return ``value`` unchanged or raise ValidationError if it is blank."""
    if not is_input_valid(value):
        raise ValidationError(EMPTY_INPUT_MESSAGE)
    return value


__all__ = ["validate_readme_input", "is_input_valid", "EMPTY_INPUT_MESSAGE"]
